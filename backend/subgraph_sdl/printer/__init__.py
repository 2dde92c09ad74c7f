"""
Generic schema-to-document printing on top of graphql-core
"""

from .document import (
    DocumentFromSchema,
    NodeBuilders,
    build_field_node,
    build_interface_type_node,
    build_object_type_node,
    build_type_definition_node,
    build_type_definition_nodes,
    type_reference_node,
)
from .nodes import replace_node, value_node, with_directive, without_fields

__all__ = [
    "DocumentFromSchema",
    "NodeBuilders",
    "build_field_node",
    "build_interface_type_node",
    "build_object_type_node",
    "build_type_definition_node",
    "build_type_definition_nodes",
    "type_reference_node",
    "replace_node",
    "value_node",
    "with_directive",
    "without_fields",
]
