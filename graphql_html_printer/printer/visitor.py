"""
HTML rendering of top-level schema declarations.
"""

import logging
from typing import Any, Optional, Union

from django.utils.safestring import SafeString
from graphql import (
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
)

from ..exceptions import UnsupportedShapeError
from .descriptions import DescriptionFormatterMixin
from .links import LinkResolverMixin, SCHEMA_ANCHOR, directive_anchor, type_anchor
from .markup import NBSP, MarkupBuilder, join_markup, line, span
from .members import MemberPrinterMixin
from .values import ValuePrinterMixin

logger = logging.getLogger(__name__)

Declaration = Union[GraphQLSchema, GraphQLNamedType, GraphQLDirective]

AMPERSAND_SEPARATOR = join_markup([NBSP, span("&", "ampersand"), NBSP])
VERTICAL_SEPARATOR = join_markup([NBSP, span("|", "vertical-line"), NBSP])
ROOT_OPERATIONS = ("query", "mutation", "subscription")


class HtmlVisitor(
    ValuePrinterMixin,
    DescriptionFormatterMixin,
    LinkResolverMixin,
    MemberPrinterMixin,
):
    """
    Renders schema declarations into HTML fragments.

    A visitor is bound to the schema its declarations belong to (applied
    directives are resolved by name against it) and keeps no other state, so
    one instance may render any number of declarations of that schema.
    ``link_directives`` is false when directive sections are not rendered;
    directive usages then carry no ``href``.
    """

    def __init__(self, schema: GraphQLSchema, link_directives: bool = True):
        self.schema = schema
        self.link_directives = link_directives

    def render(self, declaration: Declaration) -> SafeString:
        """Render one declaration as a ``<section>`` fragment."""
        if isinstance(declaration, GraphQLSchema):
            return self.visit_schema(declaration)
        if isinstance(declaration, GraphQLObjectType):
            return self.visit_object(declaration)
        if isinstance(declaration, GraphQLInterfaceType):
            return self.visit_interface(declaration)
        if isinstance(declaration, GraphQLUnionType):
            return self.visit_union(declaration)
        if isinstance(declaration, GraphQLInputObjectType):
            return self.visit_input(declaration)
        if isinstance(declaration, GraphQLScalarType):
            return self.visit_scalar(declaration)
        if isinstance(declaration, GraphQLEnumType):
            return self.visit_enum(declaration)
        if isinstance(declaration, GraphQLDirective):
            return self.visit_directive(declaration)
        raise UnsupportedShapeError.for_object(
            "declaration", declaration, element_name=getattr(declaration, "name", None)
        )

    def visit_schema(self, schema: GraphQLSchema) -> SafeString:
        roots = {
            "query": schema.query_type,
            "mutation": schema.mutation_type,
            "subscription": schema.subscription_type,
        }
        root_lines = MarkupBuilder().open("div", "members offset-1")
        for operation in ROOT_OPERATIONS:
            root_type = roots[operation]
            if root_type is None:
                target = span("null", "null")
            else:
                target = self.type_link(root_type, "root-type", data_operation=operation)
            root_lines.append(line(span(operation, "field-name"), span(":", "colon"), NBSP, target))
        root_lines.close("div")

        header = [
            span("schema", "keyword"),
            self.print_directive_usages(schema),
            NBSP,
            span("{", "bracket-curly"),
        ]
        return self._section(SCHEMA_ANCHOR, schema.description, header, root_lines.build())

    def visit_object(self, object_type: GraphQLObjectType) -> SafeString:
        return self._visit_fields_type("type", object_type)

    def visit_interface(self, interface: GraphQLInterfaceType) -> SafeString:
        return self._visit_fields_type("interface", interface)

    def visit_union(self, union: GraphQLUnionType) -> SafeString:
        header = self._type_header("union", union)
        header.append(self.print_directive_usages(union))
        if union.types:
            header.extend([
                NBSP,
                span("=", "equals"),
                NBSP,
                join_markup(
                    [self.type_link(member, "union-type") for member in union.types],
                    VERTICAL_SEPARATOR,
                ),
            ])
        return self._section(type_anchor(union.name), union.description, header)

    def visit_input(self, input_type: GraphQLInputObjectType) -> SafeString:
        header = self._type_header("input", input_type)
        header.extend([
            self.print_directive_usages(input_type),
            NBSP,
            span("{", "bracket-curly"),
        ])
        return self._section(
            type_anchor(input_type.name),
            input_type.description,
            header,
            self.print_member_list(input_type.fields),
        )

    def visit_scalar(self, scalar: GraphQLScalarType) -> SafeString:
        header = self._type_header("scalar", scalar)
        header.append(self.print_directive_usages(scalar))
        return self._section(type_anchor(scalar.name), scalar.description, header)

    def visit_enum(self, enum: GraphQLEnumType) -> SafeString:
        header = self._type_header("enum", enum)
        header.extend([
            self.print_directive_usages(enum),
            NBSP,
            span("{", "bracket-curly"),
        ])
        return self._section(
            type_anchor(enum.name),
            enum.description,
            header,
            self.print_member_list(enum.values),
        )

    def visit_directive(self, directive: GraphQLDirective) -> SafeString:
        header = [
            span("directive", "keyword"),
            NBSP,
            span(f"@{directive.name}", "typename"),
            self.print_arguments(directive),
        ]
        if directive.is_repeatable:
            header.extend([NBSP, span("repeatable", "keyword")])
        header.extend([
            NBSP,
            span("on", "keyword"),
            NBSP,
            span(
                join_markup((location.name for location in directive.locations), VERTICAL_SEPARATOR),
                "location",
            ),
        ])
        return self._section(directive_anchor(directive.name), directive.description, header)

    def _visit_fields_type(
        self, keyword: str, named_type: Union[GraphQLObjectType, GraphQLInterfaceType]
    ) -> SafeString:
        header = self._type_header(keyword, named_type)
        interfaces = self.flatten_interfaces(named_type.interfaces)
        if interfaces:
            header.extend([
                NBSP,
                span("implements", "keyword"),
                NBSP,
                span(join_markup(interfaces, AMPERSAND_SEPARATOR), "implements"),
            ])
        header.extend([
            self.print_directive_usages(named_type),
            NBSP,
            span("{", "bracket-curly"),
        ])
        return self._section(
            type_anchor(named_type.name),
            named_type.description,
            header,
            self.print_member_list(named_type.fields),
        )

    def _type_header(self, keyword: str, named_type: GraphQLNamedType) -> list[Any]:
        return [span(keyword, "keyword"), NBSP, span(named_type.name, "typename")]

    def _section(
        self,
        anchor: str,
        description: Optional[str],
        header: list[Any],
        body: Optional[SafeString] = None,
    ) -> SafeString:
        logger.debug(f"Rendering section '{anchor}'")
        builder = MarkupBuilder().open("section", id=anchor)
        builder.append(self.print_block(description))
        builder.append(line(*header))
        if body is not None:
            builder.append(body)
            builder.append(line(span("}", "bracket-curly")))
        return builder.close("section").build()
