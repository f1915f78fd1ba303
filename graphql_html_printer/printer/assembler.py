"""
Assembly of rendered declaration fragments into one document.
"""

import re
from typing import Sequence

from django.utils.safestring import mark_safe

from .links import SCHEMA_ANCHOR
from .markup import (
    EMPTY_LINE,
    EMPTY_LINE_PLACEHOLDER,
    MarkupBuilder,
    element,
    normalize_whitespace,
)

ROOT_LINK = re.compile(
    r'<a class="root-type" href="(?P<href>[^"]*)" title="[^"]*" '
    r'data-operation="(?P<operation>query|mutation|subscription)">'
)

NAVIGATION_LABELS = {
    "query": ("Q", "Go to query"),
    "mutation": ("M", "Go to mutation"),
    "subscription": ("S", "Go to subscription"),
}
TOP_LABEL = ("^", "Go to top")


class DocumentAssembler:
    """Joins declaration fragments, adds the navigation panel and normalizes whitespace."""

    def __init__(self, include_navigation: bool = True):
        self.include_navigation = include_navigation

    def assemble(self, fragments: Sequence[str]) -> str:
        builder = MarkupBuilder()
        if self.include_navigation:
            builder.append(self.build_navigation(fragments[0] if fragments else ""))
        for index, fragment in enumerate(fragments):
            if index:
                builder.append(EMPTY_LINE)
            builder.append(mark_safe(fragment))

        document = normalize_whitespace(builder.build())
        return document.replace(EMPTY_LINE, EMPTY_LINE_PLACEHOLDER)

    def build_navigation(self, schema_fragment: str) -> str:
        """Floating panel: a go-to-top button, then one button per root operation type."""
        builder = MarkupBuilder().open("div", "floating-container")
        builder.append(self._button(f"#{SCHEMA_ANCHOR}", *TOP_LABEL))
        for match in ROOT_LINK.finditer(schema_fragment):
            label, caption = NAVIGATION_LABELS[match.group("operation")]
            builder.append(self._button(match.group("href"), label, caption))
        return builder.close("div").build()

    def _button(self, href: str, label: str, caption: str) -> str:
        return element("a", label, "floating-button", href=href, title=caption)
