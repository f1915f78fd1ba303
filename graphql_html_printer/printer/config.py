"""
Configuration for documentation generation.
"""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class DocumentationConfig:
    """Configuration for documentation generation."""
    include_specified_definitions: bool = False
    include_directives: bool = True
    include_navigation: bool = True
    full_page: bool = True
    page_title: str = "GraphQL Schema"
    stylesheet_url: Optional[str] = None

    @classmethod
    def from_settings(cls, schema_name: Optional[str] = None) -> "DocumentationConfig":
        """Build a config from the ``documentation`` settings section."""
        from ..config_proxy import get_settings_proxy

        proxy = get_settings_proxy(schema_name)
        values = {}
        for config_field in fields(cls):
            values[config_field.name] = proxy.get(
                f"documentation.{config_field.name}", config_field.default
            )
        return cls(**values)
