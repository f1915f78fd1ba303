"""
Markup primitives shared by the printers.

Rendering happens in two phases: printers append complete tokens to a
``MarkupBuilder`` which joins them with newlines, and the document assembler
later runs ``normalize_whitespace`` over the whole document. Every token is a
Django ``SafeString``; plain strings are escaped when appended.
"""

import re
from typing import Any, Iterable, Optional

from django.utils.html import conditional_escape, format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

NBSP = mark_safe("&nbsp;")
EMPTY_LINE = mark_safe('<div class="line"></div>')
EMPTY_LINE_PLACEHOLDER = mark_safe('<div class="line">&nbsp;</div>')

_NBSP_GAP = re.compile(r">(?:\s|&nbsp;)*&nbsp;(?:\s|&nbsp;)*<")
_WHITESPACE_GAP = re.compile(r">\s+<")


def _attributes(css_class: Optional[str], attributes: dict[str, Any]) -> SafeString:
    pairs = []
    if css_class:
        pairs.append(("class", css_class))
    for name, value in attributes.items():
        if value is None:
            continue
        pairs.append((name.rstrip("_").replace("_", "-"), value))
    return format_html_join("", ' {}="{}"', pairs)


def element(
    tag: str, content: Any = "", css_class: Optional[str] = None, **attributes: Any
) -> SafeString:
    """Render a complete ``<tag>content</tag>`` token.

    ``None`` attributes are omitted, empty strings are kept. Underscores in
    attribute names become dashes (``data_operation`` -> ``data-operation``).
    """
    return format_html(
        "<{0}{1}>{2}</{0}>", tag, _attributes(css_class, attributes), content
    )


def span(content: Any, css_class: Optional[str] = None, **attributes: Any) -> SafeString:
    return element("span", content, css_class, **attributes)


def join_markup(tokens: Iterable[Any], separator: Any = "") -> SafeString:
    """Join tokens with a separator, escaping anything not already safe."""
    return mark_safe(
        conditional_escape(separator).join(conditional_escape(token) for token in tokens)
    )


class MarkupBuilder:
    """Ordered sequence of markup tokens."""

    def __init__(self, *tokens: Any):
        self._tokens: list[str] = []
        self.extend(tokens)

    def append(self, token: Any) -> "MarkupBuilder":
        # Empty fragments (absent descriptions, no usages...) leave no trace.
        if token:
            self._tokens.append(conditional_escape(token))
        return self

    def extend(self, tokens: Iterable[Any]) -> "MarkupBuilder":
        for token in tokens:
            self.append(token)
        return self

    def open(self, tag: str, css_class: Optional[str] = None, **attributes: Any) -> "MarkupBuilder":
        self._tokens.append(format_html("<{}{}>", tag, _attributes(css_class, attributes)))
        return self

    def close(self, tag: str) -> "MarkupBuilder":
        self._tokens.append(format_html("</{}>", tag))
        return self

    def __len__(self) -> int:
        return len(self._tokens)

    def build(self) -> SafeString:
        return mark_safe("\n".join(self._tokens))


def line(*tokens: Any, css_class: str = "line") -> SafeString:
    """Render one visual line container holding ``tokens``."""
    return MarkupBuilder().open("div", css_class).extend(tokens).close("div").build()


def text_line(content: Any, css_class: str = "line") -> SafeString:
    """Render a line whose content is text, kept on the same line as its tags."""
    return element("div", content, css_class)


def normalize_whitespace(markup: str) -> str:
    """Remove incidental whitespace between tags.

    Whitespace runs that contain ``&nbsp;`` collapse to exactly one
    ``&nbsp;``; all other whitespace strictly between two tags disappears.
    Running it twice yields the same result.
    """
    markup = _NBSP_GAP.sub(">&nbsp;<", markup)
    return _WHITESPACE_GAP.sub("><", markup)
