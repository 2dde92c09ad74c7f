"""
Tests for federation directive metadata, naming and node building.
"""

import pytest
import strawberry
from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, GraphQLString, print_ast
from strawberry.federation.schema_directives import Key
from strawberry.schema_directive import Location
from strawberry.types.unset import UNSET

from subgraph_sdl.federation import (
    FEDERATION_DIRECTIVES_EXTENSION,
    DirectiveArgument,
    FederationContext,
    FederationDirective,
    directive,
    federation_directives_of,
    federation_extensions,
    merge_directives,
    resolve_directive_name,
)
from subgraph_sdl.federation.directives import build_directive_node
from subgraph_sdl.printer import DocumentFromSchema, build_field_node


class TestResolveDirectiveName:
    """Directive naming per federation version."""

    @pytest.mark.parametrize("name", ["key", "tag", "inaccessible", "somethingCustom"])
    def test_federation_1_keeps_bare_names(self, name):
        assert resolve_directive_name(name, False, "federation") == name

    @pytest.mark.parametrize("name", ["key", "external", "shareable", "somethingCustom"])
    def test_federation_2_prefixes_link_namespace(self, name):
        assert resolve_directive_name(name, True, "federation") == f"federation__{name}"

    def test_inaccessible_is_never_namespaced(self):
        assert resolve_directive_name("inaccessible", True, "federation") == "inaccessible"
        assert resolve_directive_name("inaccessible", True, "custom") == "inaccessible"

    def test_namespace_is_used_verbatim(self):
        assert resolve_directive_name("key", True, "fed") == "fed__key"

    def test_resolution_is_repeatable(self):
        first = resolve_directive_name("tag", True, "federation")
        second = resolve_directive_name("tag", True, "federation")
        assert first == second == "federation__tag"


class TestFederationDirectivesOf:
    """Reading directive metadata off schema members."""

    def test_member_without_extension_has_none(self):
        field = GraphQLField(GraphQLString)
        assert federation_directives_of(field) == ()

    @pytest.mark.parametrize("attached", [None, (), []])
    def test_empty_or_missing_list_has_none(self, attached):
        field = GraphQLField(
            GraphQLString, extensions={FEDERATION_DIRECTIVES_EXTENSION: attached}
        )
        assert federation_directives_of(field) == ()

    def test_mappings_are_normalised(self):
        field = GraphQLField(
            GraphQLString,
            extensions=federation_extensions(
                {"name": "tag", "arguments": [{"name": "name", "values": "v1"}]},
                {"name": "external"},
            ),
        )

        assert federation_directives_of(field) == (
            FederationDirective("tag", (DirectiveArgument("name", "v1"),)),
            FederationDirective("external"),
        )

    def test_other_extensions_are_kept(self):
        extensions = federation_extensions(directive("key", fields="id"), extensions={"owner": "catalog"})

        assert extensions["owner"] == "catalog"
        assert extensions[FEDERATION_DIRECTIVES_EXTENSION] == (
            FederationDirective("key", (DirectiveArgument("fields", "id"),)),
        )


class TestMergeDirectives:
    """Appending federation directives to generic nodes."""

    @pytest.fixture
    def tagged_field(self):
        return GraphQLField(
            GraphQLString,
            extensions=federation_extensions(
                directive("inaccessible"),
                directive("tag", name="v1"),
            ),
        )

    @pytest.fixture
    def printer(self):
        query = GraphQLObjectType("Query", {"hello": GraphQLField(GraphQLString)})
        return DocumentFromSchema(GraphQLSchema(query=query))

    def test_federation_2_names(self, printer, tagged_field):
        node = build_field_node(printer, "flag", tagged_field)

        merged = merge_directives(node, tagged_field, FederationContext(version="2"))

        assert print_ast(merged) == 'flag: String @inaccessible @federation__tag(name: "v1")'

    def test_federation_1_names(self, printer, tagged_field):
        node = build_field_node(printer, "flag", tagged_field)

        merged = merge_directives(node, tagged_field, FederationContext(version="1"))

        assert print_ast(merged) == 'flag: String @inaccessible @tag(name: "v1")'

    def test_member_without_directives_returns_same_node(self, printer):
        field = GraphQLField(GraphQLString)
        node = build_field_node(printer, "plain", field)

        assert merge_directives(node, field, FederationContext(version="2")) is node

    def test_argument_values_are_emitted_as_given(self):
        key = FederationDirective(
            "key",
            (
                DirectiveArgument("fields", "id sku"),
                DirectiveArgument("resolvable", False),
            ),
        )

        node = build_directive_node(key, FederationContext(version="1"))

        assert print_ast(node) == '@key(fields: "id sku", resolvable: false)'

    def test_list_argument(self):
        scopes = directive("requiresScopes", scopes=[["read:products"], ["admin"]])

        node = build_directive_node(scopes, FederationContext(version="2"))

        assert print_ast(node) == (
            '@federation__requiresScopes(scopes: [["read:products"], ["admin"]])'
        )


class TestDirectiveShorthand:
    """Keyword arguments of ``directive()`` become directive arguments."""

    def test_name_argument(self):
        tag = directive("tag", name="v1")

        assert tag == FederationDirective("tag", (DirectiveArgument("name", "v1"),))

    def test_arguments_keep_keyword_order(self):
        key = directive("key", fields="id", resolvable=False)

        assert [argument.name for argument in key.arguments] == ["fields", "resolvable"]


class TestStrawberryDirectives:
    """Federation directives declared through strawberry."""

    def test_key_without_resolvable(self):
        key = Key(fields="id", resolvable=UNSET)

        assert FederationDirective.from_strawberry(key) == FederationDirective(
            "key", (DirectiveArgument("fields", "id"),)
        )

    def test_default_arguments_are_omitted(self):
        assert FederationDirective.from_strawberry(Key(fields="sku")).arguments == (
            DirectiveArgument("fields", "sku"),
        )

    def test_non_default_arguments_are_kept(self):
        key = FederationDirective.from_strawberry(Key(fields="id", resolvable=False))

        assert key.arguments == (
            DirectiveArgument("fields", "id"),
            DirectiveArgument("resolvable", False),
        )

    def test_field_directives_follow_extension_ones(self):
        @strawberry.federation.type(keys=["id"])
        class Contract:
            id: strawberry.ID
            title: str = strawberry.federation.field(shareable=True, tags=["legal"])

        @strawberry.type
        class Query:
            contract: Contract

        schema = strawberry.federation.Schema(query=Query)
        title = schema._schema.type_map["Contract"].fields["title"]
        title.extensions = federation_extensions(
            directive("external"), extensions=title.extensions
        )

        assert [d.name for d in federation_directives_of(title)] == [
            "external",
            "shareable",
            "tag",
        ]

    def test_other_schema_directives_are_ignored(self):
        @strawberry.schema_directive(locations=[Location.OBJECT])
        class Audited:
            reason: str

        @strawberry.type(directives=[Audited(reason="legal")])
        class Query:
            ok: bool

        query = strawberry.Schema(query=Query)._schema.query_type

        assert federation_directives_of(query) == ()
