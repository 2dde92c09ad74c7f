"""
Subgraph SDL for Apollo Federation
"""

from typing import Optional

from graphql import GraphQLSchema, print_ast
from strawberry.federation import Schema as StrawberryFederationSchema

from ..core.config import DEFAULT_LINK_NAMESPACE
from .context import FederationContext
from .directives import INACCESSIBLE_DIRECTIVE
from .document import federated_document


FEDERATION_SPEC_URL = "https://specs.apollo.dev/federation/v{version}"


def federation_2_prefix(context: FederationContext) -> str:
    """``extend schema @link(...)`` header a federation 2 subgraph starts with"""
    namespace = ""
    if context.link_namespace != DEFAULT_LINK_NAMESPACE:
        namespace = f', as: "{context.link_namespace}"'

    url = FEDERATION_SPEC_URL.format(version=context.spec_version)
    return (
        "extend schema\n"
        f'  @link(url: "{url}"{namespace}, import: ["@{INACCESSIBLE_DIRECTIVE}"])\n'
        "\n"
    )


def print_subgraph_sdl(
    schema: GraphQLSchema, context: Optional[FederationContext] = None
) -> str:
    """SDL text a subgraph reports through ``_service { sdl }``"""
    context = context or FederationContext.of(schema)
    sdl = print_ast(federated_document(schema, context))
    if context.is_federation_v2:
        return federation_2_prefix(context) + sdl
    return sdl


def strawberry_federation_version(schema: StrawberryFederationSchema) -> str:
    """
    Federation version a strawberry schema was built for.

    Current strawberry keeps it as a ``(major, minor)`` tuple in
    ``federation_version``; older releases only had the ``enable_federation_2``
    flag.
    """
    version = getattr(schema, "federation_version", None)
    if isinstance(version, tuple):
        return ".".join(str(part) for part in version)
    if version is not None:
        return str(version).lstrip("v")
    return "2" if getattr(schema, "enable_federation_2", False) else "1"


def print_strawberry_subgraph_sdl(
    schema: StrawberryFederationSchema, context: Optional[FederationContext] = None
) -> str:
    """
    Subgraph SDL of the graphql-core schema behind a strawberry federation schema

    Strawberry's federation directives on types and fields are printed like
    the ones held in ``extensions``. Its support definitions (``@key`` and
    friends, ``_FieldSet``, ``link__*``) are left out.
    """
    if context is None:
        context = FederationContext(
            version=strawberry_federation_version(schema),
            link_namespace=FederationContext.from_settings().link_namespace,
        )
    return print_subgraph_sdl(schema._schema, context)
