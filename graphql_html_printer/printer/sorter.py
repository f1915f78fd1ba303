"""
Document ordering of schema declarations.
"""

from typing import Iterable, Union

from graphql import (
    GraphQLDirective,
    GraphQLNamedType,
    TypeKind,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from ..exceptions import UnsupportedShapeError

KIND_PRIORITY = (
    TypeKind.INTERFACE,
    TypeKind.OBJECT,
    TypeKind.UNION,
    TypeKind.INPUT_OBJECT,
    TypeKind.SCALAR,
    TypeKind.ENUM,
)


def get_type_kind(named_type: GraphQLNamedType) -> TypeKind:
    """Introspection kind of a named type."""
    if is_scalar_type(named_type):
        return TypeKind.SCALAR
    if is_object_type(named_type):
        return TypeKind.OBJECT
    if is_interface_type(named_type):
        return TypeKind.INTERFACE
    if is_union_type(named_type):
        return TypeKind.UNION
    if is_enum_type(named_type):
        return TypeKind.ENUM
    if is_input_object_type(named_type):
        return TypeKind.INPUT_OBJECT
    raise UnsupportedShapeError.for_object(
        "type kind", named_type, element_name=getattr(named_type, "name", None)
    )


class TypeKindSorter:
    """
    Groups types by kind and orders each group by name.

    Groups come in a fixed order (interfaces, objects, unions, inputs,
    scalars, enums) followed by all directives. Names compare by code point.
    """

    def sort(
        self,
        types: Iterable[GraphQLNamedType],
        directives: Iterable[GraphQLDirective] = (),
    ) -> list[Union[GraphQLNamedType, GraphQLDirective]]:
        groups: dict[TypeKind, list[GraphQLNamedType]] = {kind: [] for kind in KIND_PRIORITY}
        for named_type in types:
            groups[get_type_kind(named_type)].append(named_type)

        ordered: list[Union[GraphQLNamedType, GraphQLDirective]] = []
        for kind in KIND_PRIORITY:
            ordered.extend(sorted(groups[kind], key=lambda item: item.name))
        ordered.extend(sorted(directives, key=lambda item: item.name))
        return ordered
