"""
Input value rendering.
"""

from django.utils.safestring import SafeString
from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
    print_ast,
)

from ..exceptions import UnsupportedShapeError
from .markup import NBSP, join_markup, span

LEAF_VALUE_CLASSES = {
    IntValueNode: "int-literal",
    FloatValueNode: "float-literal",
    StringValueNode: "string-literal",
    EnumValueNode: "enum-literal",
    NullValueNode: "null",
}

VALUE_SEPARATOR = join_markup([span(",", "comma"), NBSP])


class ValuePrinterMixin:
    """Mixin rendering literal and composite input values."""

    def print_value(self, value: ValueNode) -> SafeString:
        """Render a value AST node, recursing into lists and input objects."""
        if isinstance(value, ListValueNode):
            return self._print_composite(
                [self.print_value(item) for item in value.values],
                span("[", "bracket-square"),
                span("]", "bracket-square"),
            )
        if isinstance(value, ObjectValueNode):
            return self._print_composite(
                [
                    join_markup([
                        span(object_field.name.value, "value-name"),
                        span(":", "colon"),
                        NBSP,
                        self.print_value(object_field.value),
                    ])
                    for object_field in value.fields
                ],
                span("{", "bracket-curly"),
                span("}", "bracket-curly"),
            )
        return self._print_leaf_value(value)

    def _print_leaf_value(self, value: ValueNode) -> SafeString:
        if isinstance(value, BooleanValueNode):
            class_name = "true" if value.value else "false"
        else:
            class_name = LEAF_VALUE_CLASSES.get(type(value))
        if class_name is None:
            raise UnsupportedShapeError.for_object("value", value)
        return span(print_ast(value), class_name)

    def _print_composite(
        self, components: list[SafeString], opening: SafeString, closing: SafeString
    ) -> SafeString:
        if not components:
            return join_markup([opening, closing])
        return join_markup([
            opening,
            span(join_markup(components, VALUE_SEPARATOR), "value"),
            closing,
        ])
