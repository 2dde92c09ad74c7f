"""
Apollo Federation subgraph printing
"""

from .context import FEDERATION_CONTEXT_EXTENSION, FederationContext
from .directives import (
    FEDERATION_DIRECTIVES_EXTENSION,
    INACCESSIBLE_DIRECTIVE,
    DirectiveArgument,
    FederationDirective,
    directive,
    federation_directives_of,
    federation_extensions,
    merge_directives,
    resolve_directive_name,
)
from .document import (
    FEDERATION_QUERY_FIELDS,
    FEDERATION_TYPES,
    federated_builders,
    federated_document,
    filter_type_definitions,
)
from .schema import print_strawberry_subgraph_sdl, print_subgraph_sdl

__all__ = [
    "FEDERATION_CONTEXT_EXTENSION",
    "FEDERATION_DIRECTIVES_EXTENSION",
    "FEDERATION_QUERY_FIELDS",
    "FEDERATION_TYPES",
    "INACCESSIBLE_DIRECTIVE",
    "DirectiveArgument",
    "FederationContext",
    "FederationDirective",
    "directive",
    "federated_builders",
    "federated_document",
    "federation_directives_of",
    "federation_extensions",
    "filter_type_definitions",
    "merge_directives",
    "print_strawberry_subgraph_sdl",
    "print_subgraph_sdl",
    "resolve_directive_name",
]
