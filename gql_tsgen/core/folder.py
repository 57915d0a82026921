"""Fold a GraphQL schema AST into TypeScript declarations.

The fold is a single post-order pass driven by graphql-core's visit():
every leave_* method receives a node whose children have already been
replaced by their folded values and returns the node's own folded value.
Node kinds without a leave_* method are left as they are.

graphql-core copies a node before applying the edits of its children, so the
parsed document is never modified.
"""

import logging
from pathlib import Path
from typing import Any

from graphql import DocumentNode, SchemaDefinitionNode, visit
from graphql.language import (
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    UnionTypeDefinitionNode,
    Visitor,
)
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig
from .errors import FoldError
from .folded import SUPPRESSED, FoldedType, unwrap_type
from .scalars import ScalarRegistry

logger = logging.getLogger(__name__)


def build_environment(template_dir: str | None = None) -> Environment:
    """Create the Jinja2 environment used to render declarations.

    Templates in template_dir take precedence over the built-in ones.
    """
    loaders = []
    if template_dir:
        template_path = Path(template_dir)
        if template_path.is_dir():
            loaders.append(FileSystemLoader(str(template_path)))
        else:
            logger.warning("Template directory %s not found, using built-in templates", template_dir)
    loaders.append(PackageLoader("gql_tsgen", "templates"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(),
    )


def operation_root_names(document: DocumentNode, config: GeneratorConfig) -> frozenset[str]:
    """Return the object type names to drop as operation roots.

    Besides the configured names, root types renamed by a
    ``schema { query: ... }`` definition are included.
    """
    names = set(config.operation_roots)
    for definition in document.definitions:
        if isinstance(definition, SchemaDefinitionNode):
            for operation_type in definition.operation_types:
                names.add(operation_type.type.name.value)
    return frozenset(names)


class TypeScriptFolder(Visitor):
    """Visitor rewriting each schema node into TypeScript text.

    Folded values:
        Name, NamedType, ListType: str
        NonNullType: FoldedType with non_null=True
        FieldDefinition, InputValueDefinition: "name?: type" line
        type definitions: declaration str, or SUPPRESSED
        Document: list of the folded definitions, in source order
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        scalars: ScalarRegistry | None = None,
        operation_roots: frozenset[str] | None = None,
        env: Environment | None = None,
    ):
        super().__init__()
        self.config = config or GeneratorConfig()
        self.scalars = scalars or ScalarRegistry.from_config(self.config)
        self.operation_roots = (
            self.config.operation_roots if operation_roots is None else operation_roots
        )
        self.env = env or build_environment(self.config.template_dir)
        self._interface_template = self.env.get_template("interface.ts.j2")
        self._alias_template = self.env.get_template("alias.ts.j2")

    # Leaves

    def leave_name(self, node: NameNode, *_args) -> str:
        return node.value

    def leave_named_type(self, node: NamedTypeNode, *_args) -> str:
        return self.scalars.resolve(node.name)

    def leave_non_null_type(self, node: NonNullTypeNode, *_args) -> FoldedType:
        # Directly under a field the flag makes the field required; inside a
        # list the list rule drops it again.
        return FoldedType(self._type_text(node.type, node), non_null=True)

    def leave_list_type(self, node: ListTypeNode, *_args) -> str:
        return f"{self._type_text(node.type, node)}[]"

    # Fields

    def leave_field_definition(self, node: FieldDefinitionNode, *_args) -> str:
        return self._field_line(node)

    def leave_input_value_definition(self, node: InputValueDefinitionNode, *_args) -> str:
        return self._field_line(node)

    # Definitions

    def leave_scalar_type_definition(self, node: ScalarTypeDefinitionNode, *_args):
        if self.scalars.is_opaque(node.name):
            logger.debug("Skipping opaque scalar %s", node.name)
            return SUPPRESSED
        return self._alias(node.name, [self.scalars.declared_type(node.name)])

    def leave_enum_type_definition(self, node: EnumTypeDefinitionNode, *_args) -> str:
        return self._alias(node.name, [f'"{value.name}"' for value in node.values or ()])

    def leave_union_type_definition(self, node: UnionTypeDefinitionNode, *_args) -> str:
        return self._alias(node.name, list(node.types or ()))

    def leave_object_type_definition(self, node: ObjectTypeDefinitionNode, *_args):
        if node.name in self.operation_roots:
            logger.debug("Skipping operation root type %s", node.name)
            return SUPPRESSED
        return self._interface(node.name, node.fields, list(node.interfaces or ()))

    def leave_interface_type_definition(self, node: InterfaceTypeDefinitionNode, *_args) -> str:
        return self._interface(node.name, node.fields)

    def leave_input_object_type_definition(
        self, node: InputObjectTypeDefinitionNode, *_args
    ) -> str:
        return self._interface(node.name, node.fields)

    def leave_document(self, node: DocumentNode, *_args) -> list[Any]:
        return list(node.definitions)

    # Helpers

    @staticmethod
    def _type_text(value: Any, node) -> str:
        folded = unwrap_type(value)
        if folded is None:
            raise FoldError(f"Expected a folded type inside {node.kind}, got {value!r}")
        return folded.type

    def _field_line(self, node) -> str:
        folded = unwrap_type(node.type)
        if folded is None:
            raise FoldError(f"Field {node.name!r} has no usable type, got {node.type!r}")
        suffix = "" if folded.non_null else self.config.optional_marker
        return f"{node.name}{suffix}: {folded.type}"

    def _alias(self, name: str, members: list[str]) -> str:
        return self._alias_template.render(name=name, members=members)

    def _interface(self, name: str, fields, interfaces: list[str] | None = None) -> str:
        return self._interface_template.render(
            name=name,
            interfaces=interfaces or [],
            fields=list(fields or ()),
            indent=self.config.indent,
        )


def fold_document(
    document: DocumentNode,
    config: GeneratorConfig | None = None,
    scalars: ScalarRegistry | None = None,
) -> list[Any]:
    """Fold a schema document into its ordered definition entries.

    Each entry is a declaration string, SUPPRESSED, or an AST node of a
    definition kind that has no TypeScript counterpart.
    """
    config = config or GeneratorConfig()
    folder = TypeScriptFolder(
        config,
        scalars=scalars,
        operation_roots=operation_root_names(document, config),
    )
    entries = visit(document, folder)
    if not isinstance(entries, list):
        raise FoldError(f"Expected the document to fold into a list, got {entries!r}")
    logger.debug("Folded %d definitions", len(entries))
    return entries
