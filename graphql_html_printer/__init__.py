"""
graphql-html-printer.

Renders GraphQL schemas (graphql-core or graphene) into cross-linked HTML
documentation, with Django settings, a management command and a view.
"""

from .exceptions import SchemaRenderError, UnsupportedShapeError
from .printer import (
    DocumentationConfig,
    DocumentationGenerator,
    HtmlVisitor,
    TypeKindSorter,
    render_schema_html,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentationConfig",
    "DocumentationGenerator",
    "HtmlVisitor",
    "SchemaRenderError",
    "TypeKindSorter",
    "UnsupportedShapeError",
    "render_schema_html",
]
