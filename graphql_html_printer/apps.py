"""
Django app configuration for graphql-html-printer.

Installing the app makes the ``render_schema_html`` management command
available and validates the ``GRAPHQL_HTML_PRINTER`` settings on startup.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for graphql-html-printer."""

    name = "graphql_html_printer"
    verbose_name = "GraphQL HTML Printer"
    label = "graphql_html_printer"

    def ready(self):
        """Validate the library configuration once Django has loaded."""
        self._validate_configuration()

    def _validate_configuration(self):
        from .config_proxy import get_settings_proxy

        results = get_settings_proxy().validate()
        for warning in results["warnings"]:
            logger.warning(f"GraphQL HTML printer configuration: {warning}")
        for error in results["errors"]:
            logger.error(f"GraphQL HTML printer configuration: {error}")
        if results["valid"]:
            logger.debug("Configuration validation completed")
