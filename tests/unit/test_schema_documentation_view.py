from unittest.mock import patch

import pytest
from django.test import RequestFactory, SimpleTestCase, override_settings
from django.urls import reverse
from graphql import build_schema

from graphql_html_printer.views import SchemaDocumentationView
from tests.unit.schemas import LIBRARY_SDL, NOT_A_SCHEMA, graphene_schema


@pytest.mark.unit
class TestSchemaDocumentationView(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_renders_configured_schema(self):
        view = SchemaDocumentationView.as_view(schema=graphene_schema)
        response = view(self.factory.get("/schema/docs/"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/html; charset=utf-8")
        content = response.content.decode("utf-8")
        self.assertTrue(content.startswith("<!DOCTYPE html>"))
        self.assertIn('<section id="graphql-type-GrapheneQuery">', content)

    def test_falls_back_to_graphene_settings(self):
        with patch("graphql_html_printer.views.graphene_settings") as mock_settings:
            mock_settings.SCHEMA = graphene_schema
            response = self.client.get(reverse("schema-docs"))

        self.assertEqual(response.status_code, 200)
        self.assertIn(b"oldHero", response.content)

    def test_schema_not_configured(self):
        with patch("graphql_html_printer.views.graphene_settings") as mock_settings:
            mock_settings.SCHEMA = None
            response = SchemaDocumentationView.as_view()(self.factory.get("/schema/docs/"))

        self.assertEqual(response.status_code, 503)

    def test_render_error(self):
        view = SchemaDocumentationView.as_view(schema=NOT_A_SCHEMA)
        with self.assertLogs("graphql_html_printer.views", level="ERROR"):
            response = view(self.factory.get("/schema/docs/"))

        self.assertEqual(response.status_code, 500)

    @override_settings(
        GRAPHQL_HTML_PRINTER_SCHEMAS={"public": {"documentation": {"page_title": "Public API"}}}
    )
    def test_schema_name_selects_settings(self):
        view = SchemaDocumentationView.as_view(schema=build_schema(LIBRARY_SDL), schema_name="public")
        response = view(self.factory.get("/schema/docs/"))

        self.assertIn(b"<title>Public API</title>", response.content)

    def test_only_get_is_allowed(self):
        view = SchemaDocumentationView.as_view(schema=graphene_schema)
        response = view(self.factory.post("/schema/docs/"))
        self.assertEqual(response.status_code, 405)
