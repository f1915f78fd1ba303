"""
Cross-reference links between declarations.

Anchor ids are part of the public markup contract: ``graphql-schema`` for
the schema section, ``graphql-type-<name>`` for named types and
``graphql-directive-<name>`` for directives.
"""

from typing import Any, Iterable, Optional

from django.utils.html import escape
from django.utils.safestring import SafeString
from graphql import (
    GraphQLDirective,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLType,
    is_introspection_type,
    is_specified_directive,
    is_specified_scalar_type,
)

from ..exceptions import UnsupportedShapeError
from .markup import element, join_markup, span

SCHEMA_ANCHOR = "graphql-schema"


def type_anchor(name: str) -> str:
    return f"graphql-type-{name}"


def directive_anchor(name: str) -> str:
    return f"graphql-directive-{name}"


def is_builtin_type(named_type: GraphQLNamedType) -> bool:
    """Specified scalars and introspection types are never link targets."""
    return is_specified_scalar_type(named_type) or is_introspection_type(named_type)


def is_builtin_directive(directive: GraphQLDirective) -> bool:
    return is_specified_directive(directive)


class LinkResolverMixin:
    """Mixin computing links to named types and directives."""

    # When false, user directives have no section to link to.
    link_directives: bool = True

    def type_link(
        self, type_ref: GraphQLType, css_class: str = "field-type", **attributes: Any
    ) -> SafeString:
        """Link to the innermost named type, keeping ``[``, ``]`` and ``!`` glyphs."""
        display, named_type = self._unwrap_type(type_ref)
        href = None if is_builtin_type(named_type) else f"#{type_anchor(named_type.name)}"
        return self._link(display, named_type.description, css_class, href, **attributes)

    def directive_link(
        self, directive: GraphQLDirective, css_class: str = "directive-usage"
    ) -> SafeString:
        if is_builtin_directive(directive) or not self.link_directives:
            href = None
        else:
            href = f"#{directive_anchor(directive.name)}"
        return self._link(f"@{directive.name}", directive.description, css_class, href)

    def flatten_interfaces(self, interfaces: Iterable[GraphQLInterfaceType]) -> list[SafeString]:
        """Links for ``interfaces`` and everything they implement, deduplicated by name.

        Inherited interfaces come before the interface implementing them and
        the first occurrence of a name wins.
        """
        links: list[SafeString] = []
        self._collect_interface_links(interfaces, set(), links)
        return links

    def _collect_interface_links(
        self,
        interfaces: Iterable[GraphQLInterfaceType],
        seen: set[str],
        links: list[SafeString],
    ) -> None:
        for interface in interfaces:
            if interface.name in seen:
                continue
            seen.add(interface.name)
            self._collect_interface_links(interface.interfaces, seen, links)
            links.append(self.type_link(interface, "typename"))

    def _unwrap_type(self, type_ref: GraphQLType) -> tuple[SafeString, GraphQLNamedType]:
        if isinstance(type_ref, GraphQLNonNull):
            inner, named_type = self._unwrap_type(type_ref.of_type)
            return join_markup([inner, span("!", "exclamation-mark")]), named_type
        if isinstance(type_ref, GraphQLList):
            inner, named_type = self._unwrap_type(type_ref.of_type)
            return (
                join_markup([span("[", "bracket-square"), inner, span("]", "bracket-square")]),
                named_type,
            )
        if isinstance(type_ref, GraphQLNamedType):
            return escape(type_ref.name), type_ref
        raise UnsupportedShapeError.for_object("type reference", type_ref)

    def _link(
        self,
        display: Any,
        description: Optional[str],
        css_class: str,
        href: Optional[str],
        **attributes: Any,
    ) -> SafeString:
        title = description or ""
        if href is None:
            return span(display, css_class, title=title, **attributes)
        return element("a", display, css_class, href=href, title=title, **attributes)
