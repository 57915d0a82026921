"""GraphQL schema loader using graphql-core.

Reads a schema file, or every schema file below a directory, and parses it
into a single DocumentNode.
"""

import logging
import os

from graphql import DocumentNode, GraphQLSyntaxError, Lexer, Source, TokenKind, parse

from .errors import SchemaLoadError

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def has_definitions(content: str) -> bool:
    """Check if schema text holds anything besides whitespace and comments."""
    return Lexer(Source(content)).lookahead().kind != TokenKind.EOF


class SchemaLoader:
    """Loads GraphQL schema sources into one document."""

    def __init__(self, schema_path: str, encoding: str = "utf-8"):
        """Initialize a loader with a path to a schema file or directory."""
        self.schema_path = str(schema_path)
        self.encoding = encoding

    def load(self) -> DocumentNode:
        """Parse all schema files and return their definitions as one document.

        Files are read in sorted path order so output is stable.

        Raises:
            SchemaLoadError: If no schema file is found, or a file cannot be
                read or parsed
        """
        schema_files = self._collect_schema_files()
        if not schema_files:
            raise SchemaLoadError("no schema files found", source=self.schema_path)

        definitions = []
        for file_path in schema_files:
            document = self._parse_file(file_path)
            definitions.extend(document.definitions)
            logger.debug("Parsed %s: %d definitions", file_path, len(document.definitions))

        return DocumentNode(definitions=tuple(definitions))

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            files.append(self.schema_path)
        elif os.path.isdir(self.schema_path):
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        else:
            raise SchemaLoadError("no such file or directory", source=self.schema_path)
        return sorted(files)

    def _parse_file(self, file_path: str) -> DocumentNode:
        source_name = os.path.basename(file_path)
        try:
            with open(file_path, encoding=self.encoding) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(f"cannot read schema: {e}", source=source_name) from e

        try:
            if not has_definitions(content):
                logger.debug("%s has no definitions", source_name)
                return DocumentNode(definitions=())
            return parse(content, no_location=True)
        except GraphQLSyntaxError as e:
            message = e.message
            if e.locations:
                location = e.locations[0]
                message += f" (line {location.line}, column {location.column})"
            raise SchemaLoadError(message, source=source_name) from e


def load_schema(schema_path: str) -> DocumentNode:
    """Load a schema file or directory into a DocumentNode."""
    return SchemaLoader(schema_path).load()
