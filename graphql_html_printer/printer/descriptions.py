"""
Description rendering.
"""

import re
from typing import Optional

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from .markup import NBSP, MarkupBuilder, text_line

LINE_BREAK = re.compile(r"\r\n|\r|\n")
BLOCK_QUOTES = mark_safe('"""')


class DescriptionFormatterMixin:
    """Mixin rendering free-text descriptions as quoted lines or blocks."""

    def print_block(self, text: Optional[str]) -> SafeString:
        """Render a description as a ``\"\"\"``-delimited block, one line per source line."""
        # An empty description is treated as absent.
        if not text:
            return mark_safe("")

        builder = MarkupBuilder().open("div", "description")
        builder.append(text_line(BLOCK_QUOTES))
        for source_line in LINE_BREAK.split(text):
            source_line = source_line.rstrip()
            # Empty line containers collapse to zero height in browsers.
            builder.append(text_line(source_line or NBSP))
        builder.append(text_line(BLOCK_QUOTES))
        return builder.close("div").build()

    def print_inline(self, text: Optional[str]) -> SafeString:
        """Render a member description, switching to a block on line breaks."""
        if not text:
            return mark_safe("")
        if LINE_BREAK.search(text):
            return self.print_block(text)
        return text_line(format_html('"{}"', text), css_class="line description")
