"""Tests for folding schema ASTs into TypeScript declarations."""

import pytest
from graphql import parse
from graphql.language import (
    DocumentNode,
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    ObjectTypeDefinitionNode,
)

from gql_tsgen.core.config import GeneratorConfig
from gql_tsgen.core.errors import FoldError
from gql_tsgen.core.folded import SUPPRESSED, FoldedType
from gql_tsgen.core.folder import TypeScriptFolder, fold_document, operation_root_names


def fold(sdl: str, config: GeneratorConfig | None = None) -> list:
    return fold_document(parse(sdl), config)


def fold_one(sdl: str, config: GeneratorConfig | None = None):
    entries = fold(sdl, config)
    assert len(entries) == 1
    return entries[0]


class TestObjectTypes:
    """Tests for object type declarations."""

    def test_required_and_optional_fields(self):
        result = fold_one("type User { id: ID! name: String }")
        assert result == "interface User {\n\tid: string\n\tname?: string\n}"

    def test_field_order_preserved(self):
        result = fold_one("type T { z: Int a: Int m: Int }")
        assert result == "interface T {\n\tz?: number\n\ta?: number\n\tm?: number\n}"

    def test_extends_interfaces(self):
        result = fold_one("type User implements Node & Entity { id: ID! }")
        assert result.startswith("interface User extends Node, Entity {\n")

    def test_single_interface(self):
        result = fold_one("type User implements Node { id: ID! }")
        assert result == "interface User extends Node {\n\tid: string\n}"

    def test_type_without_fields(self):
        assert fold_one("type Empty") == "interface Empty {\n}"

    def test_no_extends_without_interfaces(self):
        result = fold_one("type User { id: ID! }")
        assert "extends" not in result

    def test_field_arguments_not_emitted(self):
        result = fold_one("type User { posts(first: Int!, after: String): [Post] }")
        assert result == "interface User {\n\tposts?: Post[]\n}"

    def test_references_other_types_by_name(self):
        result = fold_one("type Post { author: User! }")
        assert "\tauthor: User" in result

    @pytest.mark.parametrize("root", ["Query", "Mutation", "Subscription"])
    def test_operation_roots_suppressed(self, root):
        assert fold_one(f"type {root} {{ user(id: ID!): User }}") is SUPPRESSED

    def test_schema_definition_roots_suppressed(self):
        entries = fold(
            """
            schema { query: RootQuery mutation: RootMutation }
            type RootQuery { me: User }
            type RootMutation { logout: Boolean }
            type User { id: ID! }
            """
        )
        assert entries[1] is SUPPRESSED
        assert entries[2] is SUPPRESSED
        assert entries[3].startswith("interface User")

    def test_configured_roots(self):
        config = GeneratorConfig(operation_roots={"Api"})
        assert fold_one("type Api { me: User }", config) is SUPPRESSED
        assert fold_one("type Query { me: User }", config).startswith("interface Query")


class TestNullabilityAndLists:
    """Tests for nullability inversion and list rendering."""

    def test_non_null_list_of_non_null(self):
        result = fold_one("type User { posts: [Post!]! }")
        assert "\tposts: Post[]" in result

    def test_nullable_list_of_non_null(self):
        result = fold_one("type User { posts: [Post!] }")
        assert "\tposts?: Post[]" in result

    def test_non_null_list_of_nullable(self):
        result = fold_one("type User { posts: [Post]! }")
        assert "\tposts: Post[]" in result

    def test_nested_lists(self):
        result = fold_one("type Grid { cells: [[Int!]]! }")
        assert "\tcells: number[][]" in result

    def test_list_of_scalars_resolved(self):
        result = fold_one("type Post { tags: [String] }")
        assert "\ttags?: string[]" in result

    def test_custom_indent(self):
        config = GeneratorConfig(indent="  ")
        result = fold_one("type User { name: String }", config)
        assert result == "interface User {\n  name?: string\n}"


class TestInterfacesAndInputs:
    """Tests for interface and input object declarations."""

    def test_interface(self):
        result = fold_one("interface Node { id: ID! }")
        assert result == "interface Node {\n\tid: string\n}"

    def test_input_object(self):
        result = fold_one("input NewPost { title: String! tags: [String!] }")
        assert result == "interface NewPost {\n\ttitle: string\n\ttags?: string[]\n}"

    def test_input_default_values_ignored(self):
        result = fold_one('input Filter { limit: Int = 10 order: String = "asc" }')
        assert result == "interface Filter {\n\tlimit?: number\n\torder?: string\n}"


class TestAliases:
    """Tests for enum, union and scalar aliases."""

    def test_enum_values_in_order(self):
        assert fold_one("enum Letter { A B }") == 'type Letter = "A" | "B"'
        assert fold_one("enum Letter { B A }") == 'type Letter = "B" | "A"'

    def test_union_members_in_order(self):
        assert fold_one("union SearchResult = User | Post") == "type SearchResult = User | Post"

    def test_custom_scalar_is_any(self):
        assert fold_one("scalar JSON") == "type JSON = any"

    def test_opaque_scalar_suppressed(self):
        assert fold_one("scalar Date") is SUPPRESSED

    def test_configured_opaque_scalars(self):
        config = GeneratorConfig(opaque_scalars={"Upload"})
        assert fold_one("scalar Upload", config) is SUPPRESSED
        assert fold_one("scalar Date", config) == "type Date = any"

    def test_mapped_custom_scalar(self):
        config = GeneratorConfig(scalars={"DateTime": "string"})
        assert fold_one("scalar DateTime", config) == "type DateTime = string"


class TestDocument:
    """Tests for whole-document folding."""

    def test_source_order_preserved(self, sample_sdl):
        entries = fold(sample_sdl)
        names = [
            entry.split()[1] for entry in entries if isinstance(entry, str)
        ]
        assert names == ["Node", "JSON", "Role", "User", "Post", "SearchResult", "NewPost"]

    def test_empty_document(self):
        assert fold_document(DocumentNode(definitions=())) == []

    def test_unhandled_definitions_pass_through(self):
        entries = fold("directive @auth(role: String) on FIELD_DEFINITION")
        assert len(entries) == 1
        assert not isinstance(entries[0], str)
        assert entries[0].kind == "directive_definition"

    def test_does_not_modify_document(self, sample_sdl):
        document = parse(sample_sdl)
        fold_document(document)
        user = document.definitions[4]
        assert isinstance(user, ObjectTypeDefinitionNode)
        assert isinstance(user.name, NameNode)
        assert user.name.value == "User"

    def test_fold_is_repeatable(self, sample_sdl):
        document = parse(sample_sdl)
        assert fold_document(document) == fold_document(document)

    def test_operation_root_names(self):
        document = parse("schema { query: Root } type Root { a: Int }")
        names = operation_root_names(document, GeneratorConfig())
        assert names == {"Root", "Query", "Mutation", "Subscription"}


class TestCustomTemplates:
    """Tests for overriding declaration templates."""

    def test_template_dir_overrides_builtin(self, tmp_path):
        (tmp_path / "alias.ts.j2").write_text("type {{ name }} = {{ members | join(' | ') }};")
        config = GeneratorConfig(template_dir=str(tmp_path))
        assert fold_one("union U = A | B", config) == "type U = A | B;"
        # Templates missing from the directory fall back to the built-in ones
        assert fold_one("type A { x: Int }", config) == "interface A {\n\tx?: number\n}"

    def test_missing_template_dir_uses_builtin(self, tmp_path):
        config = GeneratorConfig(template_dir=str(tmp_path / "missing"))
        assert fold_one("scalar JSON", config) == "type JSON = any"


class TestFoldErrors:
    """Tests for invariant violations inside the fold."""

    def test_unfolded_list_item(self):
        folder = TypeScriptFolder()
        node = ListTypeNode(type=NamedTypeNode(name=NameNode(value="User")))
        with pytest.raises(FoldError, match="list_type"):
            folder.leave_list_type(node)

    def test_field_without_type(self):
        folder = TypeScriptFolder()
        node = FieldDefinitionNode(name="user", type=None)
        with pytest.raises(FoldError, match="user"):
            folder.leave_field_definition(node)

    def test_non_null_leaves_pair(self):
        folder = TypeScriptFolder()
        node = ListTypeNode(type=FoldedType("User", non_null=True))
        assert folder.leave_list_type(node) == "User[]"
