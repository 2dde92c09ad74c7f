"""
Federation Directives attached to schema members
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from graphql import (
    ArgumentNode,
    DirectiveNode,
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLObjectType,
)
from loguru import logger
from strawberry.federation.schema_directives import (
    FederationDirective as StrawberryFederationDirective,
)
from strawberry.schema.name_converter import NameConverter
from strawberry.types.unset import UNSET

from ..printer.document import STRAWBERRY_DEFINITION_EXTENSION
from ..printer.nodes import N, name_node, value_node, with_directive
from .context import FederationContext


# Key under which a member's ``extensions`` holds its federation directives
FEDERATION_DIRECTIVES_EXTENSION = "federation_directives"

# Federation 2 treats @inaccessible as a core directive, never namespaced.
# Only this one name is reserved; more would need a set here.
INACCESSIBLE_DIRECTIVE = "inaccessible"

DirectiveMember = Union[GraphQLObjectType, GraphQLInterfaceType, GraphQLField]


@dataclass(frozen=True)
class DirectiveArgument:
    """One argument of a federation directive; ``values`` is emitted as is"""
    name: str
    values: Any


@dataclass(frozen=True)
class FederationDirective:
    """A resolved federation directive, e.g. ``@key(fields: "id")``"""
    name: str
    arguments: Tuple[DirectiveArgument, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FederationDirective":
        """Build from ``{"name": ..., "arguments": [{"name": ..., "values": ...}]}``"""
        return cls(
            name=data["name"],
            arguments=tuple(
                DirectiveArgument(name=arg["name"], values=arg.get("values"))
                for arg in data.get("arguments") or ()
            ),
        )

    @classmethod
    def from_strawberry(cls, schema_directive: Any) -> "FederationDirective":
        """
        Build from a strawberry federation schema directive, e.g. ``Key(fields="id")``.

        Arguments left unset or at their declared default are omitted, as
        strawberry's own printer does.
        """
        definition = schema_directive.__strawberry_directive__
        name_converter = NameConverter()
        arguments = []
        for field in definition.fields:
            value = getattr(schema_directive, field.python_name or field.name, UNSET)
            if value is UNSET or value == field.default:
                continue
            arguments.append(
                DirectiveArgument(name=name_converter.get_graphql_name(field), values=value)
            )
        return cls(name=schema_directive.imported_from.name, arguments=tuple(arguments))


def directive(name: str, /, **arguments: Any) -> FederationDirective:
    """Shorthand: ``directive("key", fields="id")``"""
    return FederationDirective(
        name=name,
        arguments=tuple(DirectiveArgument(name=key, values=value) for key, value in arguments.items()),
    )


def federation_extensions(
    *directives: Union[FederationDirective, Mapping[str, Any]],
    extensions: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """``extensions`` mapping for a type or field carrying ``directives``"""
    return {**(extensions or {}), FEDERATION_DIRECTIVES_EXTENSION: tuple(directives)}


def strawberry_directives_of(member: DirectiveMember) -> Tuple[FederationDirective, ...]:
    """Federation directives a strawberry type or field was declared with"""
    definition = (member.extensions or {}).get(STRAWBERRY_DEFINITION_EXTENSION)
    return tuple(
        FederationDirective.from_strawberry(schema_directive)
        for schema_directive in getattr(definition, "directives", None) or ()
        if isinstance(schema_directive, StrawberryFederationDirective)
    )


def federation_directives_of(member: DirectiveMember) -> Tuple[FederationDirective, ...]:
    """
    Federation directives attached to a schema member.

    Members without the extension (or with an empty one) carry none. Members
    built by strawberry also carry the federation directives they were
    declared with, after the ones in ``extensions``.
    """
    extensions = member.extensions or {}
    attached: Iterable = extensions.get(FEDERATION_DIRECTIVES_EXTENSION) or ()
    return tuple(
        item if isinstance(item, FederationDirective) else FederationDirective.from_mapping(item)
        for item in attached
    ) + strawberry_directives_of(member)


def resolve_directive_name(
    directive_name: str, is_federation_v2: bool, link_namespace: str
) -> str:
    """Name a directive is printed under"""
    if is_federation_v2 and directive_name != INACCESSIBLE_DIRECTIVE:
        return f"{link_namespace}__{directive_name}"
    return directive_name


def build_arguments_node(arguments: Iterable[DirectiveArgument]) -> Tuple[ArgumentNode, ...]:
    return tuple(
        ArgumentNode(name=name_node(argument.name), value=value_node(argument.values))
        for argument in arguments or ()
    )


def build_directive_node(
    federation_directive: FederationDirective, context: FederationContext
) -> DirectiveNode:
    return DirectiveNode(
        name=name_node(
            resolve_directive_name(
                federation_directive.name,
                context.is_federation_v2,
                context.link_namespace,
            )
        ),
        arguments=build_arguments_node(federation_directive.arguments),
    )


def merge_directives(node: N, member: DirectiveMember, context: FederationContext) -> N:
    """Append the member's federation directives to ``node``, in order"""
    federation_directives = federation_directives_of(member)
    if not federation_directives:
        return node

    for federation_directive in federation_directives:
        node = with_directive(node, build_directive_node(federation_directive, context))

    logger.debug(
        f"Merged {len(federation_directives)} federation directive(s) into {node.name.value}"
    )
    return node
