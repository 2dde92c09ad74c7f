"""
Apollo Federation subgraph SDL printer
"""

from loguru import logger

from .federation import (
    FederationContext,
    FederationDirective,
    directive,
    federated_document,
    federation_extensions,
    print_strawberry_subgraph_sdl,
    print_subgraph_sdl,
)
from .printer import DocumentFromSchema, NodeBuilders

# Silent until configure_logging() enables it
logger.disable("subgraph_sdl")

__version__ = "1.0.0"

__all__ = [
    "DocumentFromSchema",
    "FederationContext",
    "FederationDirective",
    "NodeBuilders",
    "directive",
    "federated_document",
    "federation_extensions",
    "print_strawberry_subgraph_sdl",
    "print_subgraph_sdl",
]
