"""
Member rendering: fields, arguments, input fields, enum values and the
directive usages attached to them.
"""

import logging
from typing import Any, Mapping, Optional, Union

from django.utils.safestring import SafeString, mark_safe
from graphql import (
    GraphQLArgument,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLSchema,
    Undefined,
    ValueNode,
    ast_from_value,
)

from ..exceptions import UnsupportedShapeError
from .markup import EMPTY_LINE, NBSP, MarkupBuilder, join_markup, line, span
from .usages import DirectiveUsage, collect_directive_usages
from .values import VALUE_SEPARATOR

logger = logging.getLogger(__name__)

InputMember = Union[GraphQLArgument, GraphQLInputField]


class MemberPrinterMixin:
    """Mixin rendering the members of a declaration."""

    schema: GraphQLSchema

    def print_members(self, members: Mapping[str, Any]) -> SafeString:
        """Render members in order.

        Consecutive members are separated by an empty line only when one of
        the two has a description.
        """
        builder = MarkupBuilder()
        previous_has_description = False
        for index, (name, member) in enumerate(members.items()):
            rendered = self.render_member(name, member)
            has_description = bool(member.description)
            if index and (previous_has_description or has_description):
                builder.append(EMPTY_LINE)
            builder.open("div", "item").append(rendered).close("div")
            previous_has_description = has_description
        return builder.build()

    def print_member_list(self, members: Mapping[str, Any]) -> SafeString:
        """Render members inside an indented container."""
        return (
            MarkupBuilder()
            .open("div", "members offset-1")
            .append(self.print_members(members))
            .close("div")
            .build()
        )

    def print_arguments(self, owner: Any) -> SafeString:
        """Parenthesized argument list of a field or directive, empty without arguments."""
        if not owner.args:
            return mark_safe("")
        return (
            MarkupBuilder()
            .open("div", "arguments")
            .append(span("(", "bracket-round"))
            .append(self.print_member_list(owner.args))
            .append(span(")", "bracket-round"))
            .close("div")
            .build()
        )

    def render_member(self, name: str, member: Any) -> SafeString:
        if isinstance(member, GraphQLField):
            return self.visit_field(name, member)
        if isinstance(member, (GraphQLArgument, GraphQLInputField)):
            return self.visit_argument(name, member)
        if isinstance(member, GraphQLEnumValue):
            return self.visit_enum_value(name, member)
        raise UnsupportedShapeError.for_object("member", member, element_name=name)

    def visit_field(self, name: str, field: GraphQLField) -> SafeString:
        return MarkupBuilder(
            self.print_inline(field.description),
            line(
                span(name, "field-name"),
                self.print_arguments(field),
                span(":", "colon"),
                NBSP,
                self.type_link(field.type, "field-type"),
                self.print_directive_usages(field),
            ),
        ).build()

    def visit_argument(self, name: str, argument: InputMember) -> SafeString:
        tokens = [
            span(name, "argument-name"),
            span(":", "colon"),
            NBSP,
            self.type_link(argument.type, "argument-type"),
        ]
        default_value = self._default_value_node(name, argument)
        if default_value is not None:
            tokens.extend([
                NBSP,
                span("=", "equals"),
                NBSP,
                span(self.print_value(default_value), "argument-value"),
            ])
        tokens.append(self.print_directive_usages(argument))
        return MarkupBuilder(self.print_inline(argument.description), line(*tokens)).build()

    def visit_enum_value(self, name: str, value: GraphQLEnumValue) -> SafeString:
        return MarkupBuilder(
            self.print_inline(value.description),
            line(span(name, "enum-item"), self.print_directive_usages(value)),
        ).build()

    def print_directive_usages(self, element: Any) -> SafeString:
        usages = collect_directive_usages(element, self.schema)
        if not usages:
            return mark_safe("")
        return (
            MarkupBuilder()
            .open("span", "usage")
            .extend(self.render_directive_usage(usage) for usage in usages)
            .close("span")
            .build()
        )

    def render_directive_usage(self, usage: DirectiveUsage) -> SafeString:
        """``@name`` link followed by the arguments that differ from their defaults."""
        builder = MarkupBuilder(NBSP, self.directive_link(usage.directive))
        arguments = usage.non_default_arguments()
        if arguments:
            builder.append(span("(", "bracket-round"))
            builder.append(join_markup(
                [
                    join_markup([
                        span(name, "directive-usage-name"),
                        span(":", "colon"),
                        NBSP,
                        span(self.print_value(value), "directive-usage-value"),
                    ])
                    for name, value in arguments
                ],
                VALUE_SEPARATOR,
            ))
            builder.append(span(")", "bracket-round"))
        return builder.build()

    def _default_value_node(self, name: str, argument: InputMember) -> Optional[ValueNode]:
        ast_node = argument.ast_node
        if ast_node is not None and ast_node.default_value is not None:
            return ast_node.default_value
        if argument.default_value is Undefined:
            return None
        value_node = ast_from_value(argument.default_value, argument.type)
        if value_node is None:
            logger.debug(f"Default value of '{name}' has no literal representation")
        return value_node
