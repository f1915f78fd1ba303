"""
SchemaDocumentationView implementation.
"""

import logging
from typing import Any, Optional

from django.http import HttpRequest, HttpResponse
from django.views.generic import View
from graphene_django.settings import graphene_settings

from .exceptions import SchemaRenderError
from .printer import DocumentationConfig, DocumentationGenerator

logger = logging.getLogger(__name__)


class SchemaDocumentationView(View):
    """
    View serving the HTML documentation of a GraphQL schema.

    ``schema`` may be set through ``as_view(schema=...)``; otherwise the
    project's ``GRAPHENE["SCHEMA"]`` is documented. ``schema_name`` selects
    per-schema settings from ``GRAPHQL_HTML_PRINTER_SCHEMAS``.
    """

    schema: Any = None
    schema_name: Optional[str] = None

    def get(self, request: HttpRequest) -> HttpResponse:
        """Return the rendered documentation page."""
        schema = self.get_schema()
        if schema is None:
            return HttpResponse("GraphQL schema not configured", status=503, content_type="text/plain")

        try:
            generator = DocumentationGenerator(DocumentationConfig.from_settings(self.schema_name))
            html_content = generator.generate_html_documentation(schema)
        except SchemaRenderError as e:
            logger.error(f"Error rendering schema documentation: {e}")
            return HttpResponse("Failed to render schema documentation", status=500, content_type="text/plain")

        return HttpResponse(html_content, content_type="text/html; charset=utf-8")

    def get_schema(self) -> Any:
        if self.schema is not None:
            return self.schema
        return graphene_settings.SCHEMA
