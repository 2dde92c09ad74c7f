"""
Generic Document-from-Schema Printer

Builds a graphql-core ``DocumentNode`` from a ``GraphQLSchema``. Node
construction goes through a ``NodeBuilders`` strategy set, so callers can wrap
individual builders (call the generic one, post-process its node) without
subclassing the printer.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from graphql import (
    DEFAULT_DEPRECATION_REASON,
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    OperationType,
    OperationTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    Undefined,
    ast_from_value,
    get_named_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_specified_directive,
    is_specified_scalar_type,
)

from ..core.errors import UnsupportedOperationError, UnsupportedTypeError
from .nodes import description_node, directive_node, name_node


ROOT_OPERATIONS = {
    "query": OperationType.QUERY,
    "mutation": OperationType.MUTATION,
    "subscription": OperationType.SUBSCRIPTION,
}

DEFAULT_ROOT_TYPE_NAMES = {
    OperationType.QUERY: "Query",
    OperationType.MUTATION: "Mutation",
    OperationType.SUBSCRIPTION: "Subscription",
}

# Key under which strawberry keeps its own definition on graphql-core members
STRAWBERRY_DEFINITION_EXTENSION = "strawberry-definition"


def is_hidden_definition(member) -> bool:
    """
    Whether strawberry built ``member`` with ``print_definition=False``.

    Strawberry uses the flag for support definitions such as its federation
    directives, ``_FieldSet`` and the ``link__*`` types.
    """
    definition = (member.extensions or {}).get(STRAWBERRY_DEFINITION_EXTENSION)
    return getattr(definition, "print_definition", True) is False


def referenced_type_names(types: Iterable[GraphQLNamedType]) -> Set[str]:
    """Names of the types the fields, arguments and members of ``types`` point at"""
    names = set()
    for type_ in types:
        if isinstance(type_, (GraphQLObjectType, GraphQLInterfaceType)):
            names.update(interface.name for interface in type_.interfaces)
            for field in type_.fields.values():
                names.add(get_named_type(field.type).name)
                names.update(get_named_type(arg.type).name for arg in field.args.values())
        elif isinstance(type_, GraphQLInputObjectType):
            names.update(get_named_type(field.type).name for field in type_.fields.values())
        elif isinstance(type_, GraphQLUnionType):
            names.update(member.name for member in type_.types)
    return names


def type_reference_node(type_) -> TypeNode:
    """AST reference (``[Foo!]!`` and friends) for a wrapped or named type"""
    if is_non_null_type(type_):
        return NonNullTypeNode(type=type_reference_node(type_.of_type))
    if is_list_type(type_):
        return ListTypeNode(type=type_reference_node(type_.of_type))
    return NamedTypeNode(name=name_node(type_.name))


def deprecation_directives(reason: Optional[str]) -> tuple:
    if reason is None:
        return ()
    if reason == DEFAULT_DEPRECATION_REASON:
        return (directive_node("deprecated"),)
    return (directive_node("deprecated", [("reason", reason)]),)


def build_input_value_node(
    printer: "DocumentFromSchema",
    name: str,
    value: "GraphQLArgument | GraphQLInputField",
) -> InputValueDefinitionNode:
    default_value = None
    if value.default_value is not Undefined:
        default_value = ast_from_value(value.default_value, value.type)

    return InputValueDefinitionNode(
        description=description_node(value.description),
        name=name_node(name),
        type=type_reference_node(value.type),
        default_value=default_value,
        directives=deprecation_directives(getattr(value, "deprecation_reason", None)),
    )


def build_field_node(
    printer: "DocumentFromSchema", name: str, field: GraphQLField
) -> FieldDefinitionNode:
    return FieldDefinitionNode(
        description=description_node(field.description),
        name=name_node(name),
        arguments=tuple(
            build_input_value_node(printer, arg_name, arg)
            for arg_name, arg in field.args.items()
        ),
        type=type_reference_node(field.type),
        directives=deprecation_directives(field.deprecation_reason),
    )


def _field_nodes(printer: "DocumentFromSchema", fields: Dict[str, GraphQLField]) -> tuple:
    return tuple(
        printer.builders.field_node(printer, name, field) for name, field in fields.items()
    )


def build_object_type_node(
    printer: "DocumentFromSchema", object_type: GraphQLObjectType
) -> ObjectTypeDefinitionNode:
    return ObjectTypeDefinitionNode(
        description=description_node(object_type.description),
        name=name_node(object_type.name),
        interfaces=tuple(
            NamedTypeNode(name=name_node(interface.name))
            for interface in object_type.interfaces
        ),
        directives=(),
        fields=_field_nodes(printer, object_type.fields),
    )


def build_interface_type_node(
    printer: "DocumentFromSchema", interface_type: GraphQLInterfaceType
) -> InterfaceTypeDefinitionNode:
    return InterfaceTypeDefinitionNode(
        description=description_node(interface_type.description),
        name=name_node(interface_type.name),
        interfaces=tuple(
            NamedTypeNode(name=name_node(interface.name))
            for interface in interface_type.interfaces
        ),
        directives=(),
        fields=_field_nodes(printer, interface_type.fields),
    )


def build_scalar_type_node(
    printer: "DocumentFromSchema", scalar_type: GraphQLScalarType
) -> ScalarTypeDefinitionNode:
    directives = ()
    if scalar_type.specified_by_url:
        directives = (directive_node("specifiedBy", [("url", scalar_type.specified_by_url)]),)

    return ScalarTypeDefinitionNode(
        description=description_node(scalar_type.description),
        name=name_node(scalar_type.name),
        directives=directives,
    )


def build_union_type_node(
    printer: "DocumentFromSchema", union_type: GraphQLUnionType
) -> UnionTypeDefinitionNode:
    return UnionTypeDefinitionNode(
        description=description_node(union_type.description),
        name=name_node(union_type.name),
        directives=(),
        types=tuple(NamedTypeNode(name=name_node(member.name)) for member in union_type.types),
    )


def build_enum_type_node(
    printer: "DocumentFromSchema", enum_type: GraphQLEnumType
) -> EnumTypeDefinitionNode:
    return EnumTypeDefinitionNode(
        description=description_node(enum_type.description),
        name=name_node(enum_type.name),
        directives=(),
        values=tuple(
            EnumValueDefinitionNode(
                description=description_node(value.description),
                name=name_node(value_name),
                directives=deprecation_directives(value.deprecation_reason),
            )
            for value_name, value in enum_type.values.items()
        ),
    )


def build_input_object_type_node(
    printer: "DocumentFromSchema", input_type: GraphQLInputObjectType
) -> InputObjectTypeDefinitionNode:
    return InputObjectTypeDefinitionNode(
        description=description_node(input_type.description),
        name=name_node(input_type.name),
        directives=(),
        fields=tuple(
            build_input_value_node(printer, field_name, field)
            for field_name, field in input_type.fields.items()
        ),
    )


def build_type_definition_node(
    printer: "DocumentFromSchema", type_: GraphQLNamedType
) -> TypeDefinitionNode:
    """Dispatch on the kind of named type"""
    if isinstance(type_, GraphQLObjectType):
        return printer.builders.object_type_node(printer, type_)
    if isinstance(type_, GraphQLInterfaceType):
        return printer.builders.interface_type_node(printer, type_)
    if isinstance(type_, GraphQLScalarType):
        return build_scalar_type_node(printer, type_)
    if isinstance(type_, GraphQLUnionType):
        return build_union_type_node(printer, type_)
    if isinstance(type_, GraphQLEnumType):
        return build_enum_type_node(printer, type_)
    if isinstance(type_, GraphQLInputObjectType):
        return build_input_object_type_node(printer, type_)
    raise UnsupportedTypeError(type_.name, type_.__class__.__name__)


def build_type_definition_nodes(
    printer: "DocumentFromSchema", types: Sequence[GraphQLNamedType]
) -> List[TypeDefinitionNode]:
    return [printer.builders.type_definition_node(printer, type_) for type_ in types]


def build_directive_definition_node(
    printer: "DocumentFromSchema", directive: GraphQLDirective
) -> DirectiveDefinitionNode:
    return DirectiveDefinitionNode(
        description=description_node(directive.description),
        name=name_node(directive.name),
        arguments=tuple(
            build_input_value_node(printer, arg_name, arg)
            for arg_name, arg in directive.args.items()
        ),
        repeatable=directive.is_repeatable,
        locations=tuple(name_node(location.name) for location in directive.locations),
    )


@dataclass(frozen=True)
class NodeBuilders:
    """
    Replaceable node construction strategies.

    Every builder takes the printer first so that nested construction goes
    through ``printer.builders`` and picks up wrapped strategies.
    """

    object_type_node: Callable = build_object_type_node
    interface_type_node: Callable = build_interface_type_node
    field_node: Callable = build_field_node
    type_definition_node: Callable = build_type_definition_node
    type_definition_nodes: Callable = build_type_definition_nodes


class DocumentFromSchema:
    """Walks a schema top-down and builds its SDL document"""

    def __init__(
        self,
        schema: GraphQLSchema,
        builders: Optional[NodeBuilders] = None,
        *,
        include_built_in_scalars: bool = False,
        include_introspection_types: bool = False,
        include_built_in_directives: bool = False,
    ):
        self.schema = schema
        self.builders = builders or NodeBuilders()
        self.include_built_in_scalars = include_built_in_scalars
        self.include_introspection_types = include_introspection_types
        self.include_built_in_directives = include_built_in_directives

    def root_type_for_operation(self, operation: str) -> Optional[GraphQLObjectType]:
        """Root object type for ``query``, ``mutation`` or ``subscription``"""
        try:
            operation_type = ROOT_OPERATIONS[operation]
        except KeyError:
            raise UnsupportedOperationError(operation) from None

        return {
            OperationType.QUERY: self.schema.query_type,
            OperationType.MUTATION: self.schema.mutation_type,
            OperationType.SUBSCRIPTION: self.schema.subscription_type,
        }[operation_type]

    def printable_types(self) -> List[GraphQLNamedType]:
        types = []
        hidden = []
        for type_ in self.schema.type_map.values():
            if is_introspection_type(type_) and not self.include_introspection_types:
                continue
            if is_specified_scalar_type(type_) and not self.include_built_in_scalars:
                continue
            if is_hidden_definition(type_):
                hidden.append(type_)
                continue
            types.append(type_)

        # A hidden type still printed by a visible field keeps its definition
        if hidden:
            referenced = referenced_type_names(types)
            types.extend(type_ for type_ in hidden if type_.name in referenced)
        return sorted(types, key=lambda type_: type_.name)

    def printable_directives(self) -> List[GraphQLDirective]:
        return [
            directive
            for directive in self.schema.directives
            if (self.include_built_in_directives or not is_specified_directive(directive))
            and not is_hidden_definition(directive)
        ]

    def build_schema_node(
        self, printed_names: Sequence[str]
    ) -> Optional[SchemaDefinitionNode]:
        """Explicit schema definition, needed only for non-default root type names"""
        operation_types = []
        for operation_type in ROOT_OPERATIONS.values():
            root = self.root_type_for_operation(operation_type.value)
            if root is None or root.name not in printed_names:
                continue
            operation_types.append((operation_type, root))

        if all(root.name == DEFAULT_ROOT_TYPE_NAMES[op] for op, root in operation_types):
            return None

        return SchemaDefinitionNode(
            description=description_node(self.schema.description),
            directives=(),
            operation_types=tuple(
                OperationTypeDefinitionNode(
                    operation=operation_type,
                    type=NamedTypeNode(name=name_node(root.name)),
                )
                for operation_type, root in operation_types
            ),
        )

    def document(self) -> DocumentNode:
        type_nodes = self.builders.type_definition_nodes(self, self.printable_types())
        schema_node = self.build_schema_node([node.name.value for node in type_nodes])

        definitions = []
        if schema_node is not None:
            definitions.append(schema_node)
        definitions.extend(
            build_directive_definition_node(self, directive)
            for directive in self.printable_directives()
        )
        definitions.extend(type_nodes)
        return DocumentNode(definitions=tuple(definitions))
