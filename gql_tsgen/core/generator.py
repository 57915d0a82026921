"""TypeScript declaration generator for GraphQL schemas.

Ties the pieces together: load the schema, run pre-generation hooks, fold
the document, emit the declarations, run post-generation hooks and write
the result.

Example:
    generator = TypeScriptGenerator(GeneratorConfig(scalars={"DateTime": "string"}))
    generator.hooks.add_post_hook(AddHeaderHook("// Generated - do not edit"))
    generator.generate("./schema.graphql", "./src/schema.d.ts")
"""

import logging
import os
from pathlib import Path

from graphql import DocumentNode, parse

from .config import GeneratorConfig
from .emitter import emit_declarations
from .folder import fold_document
from .hooks import HookRunner
from .loader import SchemaLoader
from .scalars import ScalarRegistry

logger = logging.getLogger(__name__)


class TypeScriptGenerator:
    """Generates TypeScript declarations from GraphQL schemas."""

    DEFAULT_FILENAME = "schema.d.ts"

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the generator.

        Args:
            config: Generator settings; defaults match the plain GraphQL conventions
            hooks: Hooks to run around generation
        """
        self.config = config or GeneratorConfig()
        self.hooks = hooks or HookRunner()
        self.scalars = ScalarRegistry.from_config(self.config)

    def render(self, document: DocumentNode) -> str:
        """Return the declarations for a parsed schema document."""
        document = self.hooks.run_pre_hooks(document)
        entries = fold_document(document, self.config, scalars=self.scalars)
        return emit_declarations(entries, self.config.export_keyword)

    def render_source(self, source: str) -> str:
        """Parse SDL text and return its declarations."""
        return self.render(parse(source, no_location=True))

    def generate(self, schema_path: str | Path, output_path: str | Path) -> Path:
        """Generate declarations for a schema file or directory and write them.

        If output_path is an existing directory, or ends with a path
        separator, the declarations are written to DEFAULT_FILENAME inside it.

        Returns:
            The path of the written file
        """
        document = SchemaLoader(str(schema_path)).load()
        output = Path(output_path)
        if output.is_dir() or str(output_path).endswith(("/", os.sep)):
            output = output / self.DEFAULT_FILENAME

        content = self.render(document)
        content = self.hooks.run_post_hooks(output.name, content)

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", output)
        return output
