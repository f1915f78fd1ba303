"""
URL configuration for the schema documentation page.
"""

from django.urls import path

from .views import SchemaDocumentationView

urlpatterns = [
    path("schema/docs/", SchemaDocumentationView.as_view(), name="schema-docs"),
]
