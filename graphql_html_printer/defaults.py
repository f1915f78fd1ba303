"""
Default configuration for graphql-html-printer.

Single source of truth for every setting the library consumes. Each section
mirrors a dataclass or a concrete settings block consumed at runtime.
"""

from __future__ import annotations

from typing import Any


# --------------------------------------------------------------------------- #
# Library-wide defaults (grouped by feature area)
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "documentation": {
        # Render built-in scalars, introspection types and specified directives.
        "include_specified_definitions": False,
        "include_directives": True,
        "include_navigation": True,
        "full_page": True,
        "page_title": "GraphQL Schema",
        "stylesheet_url": None,
    },
}
