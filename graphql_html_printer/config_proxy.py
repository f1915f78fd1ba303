"""
Configuration management for graphql-html-printer.

This module provides a settings proxy that handles hierarchical configuration
resolution from schema-specific, Django global, and library default settings.
"""

from typing import Any, Optional

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS

GLOBAL_SETTINGS_NAME = "GRAPHQL_HTML_PRINTER"
SCHEMA_SETTINGS_NAME = "GRAPHQL_HTML_PRINTER_SCHEMAS"

# Runtime storage for schema settings overrides (avoids modifying Django settings)
_RUNTIME_SCHEMA_SETTINGS: dict[str, Any] = {}


class SettingsProxy:
    """
    Proxy for accessing printer settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Runtime schema-specific settings (via configure_schema_settings)
    2. Schema-specific settings (GRAPHQL_HTML_PRINTER_SCHEMAS[schema_name])
    3. Global Django settings (GRAPHQL_HTML_PRINTER)
    4. Library defaults (LIBRARY_DEFAULTS)
    """

    def __init__(self, schema_name: Optional[str] = None):
        """
        Initialize the settings proxy.

        Args:
            schema_name: Name of the schema for schema-specific settings
        """
        self.schema_name = schema_name
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value with hierarchical resolution and caching.

        Args:
            key: Setting key to retrieve (dot notation)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        cache_key = f"{self.schema_name}:{key}" if self.schema_name else f"global:{key}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        for lookup in (
            self._get_schema_setting,
            self._get_django_setting,
            self._get_library_default,
        ):
            value = lookup(key)
            if value is not None:
                self._cache[cache_key] = value
                return value

        return default

    def _get_schema_setting(self, key: str) -> Any:
        """Get setting from runtime or Django schema-specific configuration."""
        if not self.schema_name:
            return None

        runtime_settings = _RUNTIME_SCHEMA_SETTINGS.get(self.schema_name)
        if runtime_settings:
            val = self._get_nested_value(runtime_settings, key)
            if val is not None:
                return val

        schema_settings = getattr(settings, SCHEMA_SETTINGS_NAME, {})
        if self.schema_name not in schema_settings:
            return None
        return self._get_nested_value(schema_settings[self.schema_name], key)

    def _get_django_setting(self, key: str) -> Any:
        """Get setting from the global GRAPHQL_HTML_PRINTER Django setting."""
        return self._get_nested_value(getattr(settings, GLOBAL_SETTINGS_NAME, {}), key)

    def _get_library_default(self, key: str) -> Any:
        """Get setting from library defaults."""
        return self._get_nested_value(LIBRARY_DEFAULTS, key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve (supports dot notation for nested access)

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def validate(self) -> dict[str, Any]:
        """
        Validate current settings configuration.

        Returns:
            Dictionary with validation results
        """
        validation_results = {"valid": True, "errors": [], "warnings": []}

        if self.schema_name:
            schema_settings = getattr(settings, SCHEMA_SETTINGS_NAME, {})
            runtime_exists = self.schema_name in _RUNTIME_SCHEMA_SETTINGS
            django_exists = self.schema_name in schema_settings

            if not runtime_exists and not django_exists:
                validation_results["warnings"].append(
                    f"Schema '{self.schema_name}' not found in {SCHEMA_SETTINGS_NAME} or runtime settings"
                )

        global_settings = getattr(settings, GLOBAL_SETTINGS_NAME, {})
        if not isinstance(global_settings, dict):
            validation_results["errors"].append(
                f"{GLOBAL_SETTINGS_NAME} must be a dict, got {type(global_settings).__name__}"
            )
            validation_results["valid"] = False
            return validation_results

        known_keys = set(LIBRARY_DEFAULTS["documentation"])
        for key in global_settings.get("documentation", {}) or {}:
            if key not in known_keys:
                validation_results["warnings"].append(
                    f"Unknown setting 'documentation.{key}'"
                )

        page_title = self.get("documentation.page_title")
        if not isinstance(page_title, str) or not page_title.strip():
            validation_results["errors"].append(
                "Setting 'documentation.page_title' must be a non-empty string"
            )
            validation_results["valid"] = False

        return validation_results


def get_settings_proxy(schema_name: Optional[str] = None) -> SettingsProxy:
    """
    Get a settings proxy instance for the specified schema.

    Args:
        schema_name: Name of the schema for schema-specific settings

    Returns:
        SettingsProxy instance
    """
    return SettingsProxy(schema_name)


def get_setting(
    key: str, default: Any = None, schema_name: Optional[str] = None
) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found
        schema_name: Name of the schema for schema-specific settings

    Returns:
        The setting value from the highest priority source
    """
    proxy = get_settings_proxy(schema_name)
    return proxy.get(key, default)


def configure_schema_settings(
    schema_name: str, clear_existing: bool = False, **overrides: Any
) -> None:
    """
    Configure schema-specific settings overrides.

    Args:
        schema_name: Name of the schema to configure
        clear_existing: Whether to clear existing runtime settings for this schema
        **overrides: Setting sections to override for this schema
    """
    if clear_existing or schema_name not in _RUNTIME_SCHEMA_SETTINGS:
        _RUNTIME_SCHEMA_SETTINGS[schema_name] = {}

    _RUNTIME_SCHEMA_SETTINGS[schema_name].update(overrides)


def clear_runtime_settings(schema_name: Optional[str] = None) -> None:
    """
    Clear runtime settings overrides.

    Args:
        schema_name: If provided, only clear settings for this schema.
                    If None, clear all runtime settings.
    """
    if schema_name:
        _RUNTIME_SCHEMA_SETTINGS.pop(schema_name, None)
    else:
        _RUNTIME_SCHEMA_SETTINGS.clear()
