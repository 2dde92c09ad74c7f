"""
Federated Document from Schema

Wraps the generic node builders so the printed document is what a subgraph
publishes: federation scaffolding removed, federation directives merged in.
"""

from dataclasses import replace
from typing import List, Optional, Sequence

from graphql import (
    DocumentNode,
    FieldDefinitionNode,
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
)
from loguru import logger

from ..printer.document import DocumentFromSchema, NodeBuilders
from ..printer.nodes import without_fields
from .context import FederationContext
from .directives import merge_directives


FEDERATION_TYPES = (
    "_Any",
    "_Entity",
    "_Service",
)

FEDERATION_QUERY_FIELDS = (
    "_entities",
    "_service",
)


def is_query_type(printer: DocumentFromSchema, type_: GraphQLNamedType) -> bool:
    return type_ is printer.root_type_for_operation("query")


def has_only_federation_fields(object_type: GraphQLObjectType) -> bool:
    return all(name in FEDERATION_QUERY_FIELDS for name in object_type.fields)


def filter_type_definitions(
    printer: DocumentFromSchema, types: Sequence[GraphQLNamedType]
) -> List[GraphQLNamedType]:
    """Drop federation types, and the query root when it only holds federation fields"""
    kept = []
    for type_ in types:
        if is_query_type(printer, type_):
            keep = not has_only_federation_fields(type_)
        else:
            keep = type_.name not in FEDERATION_TYPES

        if keep:
            kept.append(type_)
        else:
            logger.debug(f"Skipping federation type {type_.name}")
    return kept


def federated_builders(
    context: FederationContext, builders: Optional[NodeBuilders] = None
) -> NodeBuilders:
    """Wrap ``builders`` so each generic node is post-processed for federation"""
    generic = builders or NodeBuilders()

    def build_object_type_node(
        printer: DocumentFromSchema, object_type: GraphQLObjectType
    ) -> ObjectTypeDefinitionNode:
        object_node = generic.object_type_node(printer, object_type)
        if is_query_type(printer, object_type):
            object_node = without_fields(object_node, FEDERATION_QUERY_FIELDS)
        return merge_directives(object_node, object_type, context)

    def build_interface_type_node(
        printer: DocumentFromSchema, interface_type: GraphQLInterfaceType
    ) -> InterfaceTypeDefinitionNode:
        interface_node = generic.interface_type_node(printer, interface_type)
        return merge_directives(interface_node, interface_type, context)

    def build_field_node(
        printer: DocumentFromSchema, name: str, field: GraphQLField
    ) -> FieldDefinitionNode:
        field_node = generic.field_node(printer, name, field)
        return merge_directives(field_node, field, context)

    def build_type_definition_nodes(
        printer: DocumentFromSchema, types: Sequence[GraphQLNamedType]
    ) -> List[TypeDefinitionNode]:
        return generic.type_definition_nodes(printer, filter_type_definitions(printer, types))

    return replace(
        generic,
        object_type_node=build_object_type_node,
        interface_type_node=build_interface_type_node,
        field_node=build_field_node,
        type_definition_nodes=build_type_definition_nodes,
    )


def federated_document(
    schema: GraphQLSchema, context: Optional[FederationContext] = None
) -> DocumentNode:
    """Subgraph-visible document of ``schema``"""
    context = context or FederationContext.of(schema)
    printer = DocumentFromSchema(schema, federated_builders(context))
    return printer.document()
