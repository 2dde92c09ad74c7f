"""
Copy-with-change helpers for graphql-core AST nodes

Nodes handed out by the printer are treated as immutable values: every helper
here returns a new node and leaves its input untouched.
"""

import math
from enum import Enum
from typing import Any, Collection, Iterable, Mapping, Optional, Tuple, TypeVar

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    DirectiveNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NameNode,
    Node,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
)

from ..core.errors import InvalidArgumentValueError


N = TypeVar("N", bound=Node)


def name_node(value: str) -> NameNode:
    return NameNode(value=value)


def description_node(description: Optional[str]) -> Optional[StringValueNode]:
    if not description:
        return None
    return StringValueNode(value=description, block=True)


def replace_node(node: N, **changes: Any) -> N:
    """Return a new node of the same class with ``changes`` applied."""
    unknown = set(changes) - set(node.keys)
    if unknown:
        raise AttributeError(
            f"{node.__class__.__name__} has no attribute(s) {', '.join(sorted(unknown))}"
        )

    values = {key: getattr(node, key, None) for key in node.keys}
    values.update(changes)
    return node.__class__(**values)


def without_fields(node: N, names: Collection[str]) -> N:
    """Drop child field nodes whose name is in ``names``, keeping the order of the rest."""
    fields = tuple(field for field in node.fields or () if field.name.value not in names)
    if len(fields) == len(node.fields or ()):
        return node
    return replace_node(node, fields=fields)


def with_directive(node: N, directive: DirectiveNode) -> N:
    """Append ``directive`` after the node's existing directives."""
    return replace_node(node, directives=(*(node.directives or ()), directive))


def directive_node(name: str, arguments: Iterable[Tuple[str, Any]] = ()) -> DirectiveNode:
    return DirectiveNode(
        name=name_node(name),
        arguments=tuple(
            ArgumentNode(name=name_node(arg_name), value=value_node(value))
            for arg_name, value in arguments
        ),
    )


def value_node(value: Any) -> ValueNode:
    """
    Literal node for a plain Python value.

    Values that already are AST value nodes are returned as they are. The
    conversion follows the Python type only; no GraphQL input type is
    consulted. Non-finite floats have no literal form and raise
    ``InvalidArgumentValueError``.
    """
    if isinstance(value, ValueNode):
        return value
    if value is None:
        return NullValueNode()
    # Enum first, str and int mixins would otherwise win
    if isinstance(value, Enum):
        return EnumValueNode(value=value.name)
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return BooleanValueNode(value=value)
    if isinstance(value, int):
        return IntValueNode(value=str(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentValueError(value)
        return FloatValueNode(value=repr(value))
    if isinstance(value, str):
        return StringValueNode(value=value)
    if isinstance(value, Mapping):
        return ObjectValueNode(
            fields=tuple(
                ObjectFieldNode(name=name_node(str(key)), value=value_node(item))
                for key, item in value.items()
            )
        )
    if isinstance(value, (list, tuple)):
        return ListValueNode(values=tuple(value_node(item) for item in value))
    return StringValueNode(value=str(value))
