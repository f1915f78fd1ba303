"""
DocumentationGenerator implementation.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from django.utils.html import format_html
from graphql import (
    GraphQLDirective,
    GraphQLNamedType,
    GraphQLSchema,
    is_specified_directive,
)

from ..exceptions import UnsupportedShapeError
from .assembler import DocumentAssembler
from .config import DocumentationConfig
from .links import is_builtin_type
from .sorter import TypeKindSorter
from .visitor import HtmlVisitor

logger = logging.getLogger(__name__)


class DocumentationGenerator:
    """
    HTML documentation generator for GraphQL schemas.

    The generator only holds configuration and collaborators; every call to
    ``render`` builds its own visitor, so one instance can serve any number
    of schemas.
    """

    def __init__(
        self,
        config: Optional[DocumentationConfig] = None,
        sorter: Optional[TypeKindSorter] = None,
        assembler: Optional[DocumentAssembler] = None,
    ):
        self.config = config or DocumentationConfig()
        self.sorter = sorter or TypeKindSorter()
        self.assembler = assembler or DocumentAssembler(
            include_navigation=self.config.include_navigation
        )

    def render(self, schema: Any) -> str:
        """Render the whole schema as one HTML fragment."""
        graphql_schema = resolve_graphql_schema(schema)
        declarations = self.collect_declarations(graphql_schema)
        logger.info(f"Rendering HTML documentation for {len(declarations)} declarations")

        visitor = HtmlVisitor(graphql_schema, link_directives=self.config.include_directives)
        fragments = [visitor.render(graphql_schema)]
        fragments.extend(visitor.render(declaration) for declaration in declarations)
        return self.assembler.assemble(fragments)

    def generate_html_documentation(
        self, schema: Any, output_path: Optional[str] = None
    ) -> str:
        """Generate the documentation, wrapped in a page when configured."""
        html_content = self.render(schema)
        if self.config.full_page:
            html_content = self.wrap_page(html_content)
        if output_path:
            Path(output_path).write_text(html_content, encoding="utf-8")
            logger.info(f"HTML documentation written to {output_path}")
        return html_content

    def collect_declarations(
        self, schema: GraphQLSchema
    ) -> list[Union[GraphQLNamedType, GraphQLDirective]]:
        """Types and directives of ``schema`` in document order."""
        types = [
            named_type
            for named_type in schema.type_map.values()
            if self.config.include_specified_definitions or not is_builtin_type(named_type)
        ]
        directives = []
        if self.config.include_directives:
            directives = [
                directive
                for directive in schema.directives
                if self.config.include_specified_definitions
                or not is_specified_directive(directive)
            ]
        return self.sorter.sort(types, directives)

    def wrap_page(self, body: str) -> str:
        """Wrap a rendered document in a minimal HTML page."""
        html_lines = [
            "<!DOCTYPE html>",
            "<html lang='en'>",
            "<head>",
            "    <meta charset='UTF-8'>",
            "    <meta name='viewport' content='width=device-width, initial-scale=1.0'>",
            format_html("    <title>{}</title>", self.config.page_title),
        ]
        if self.config.stylesheet_url:
            html_lines.append(
                format_html("    <link rel='stylesheet' href='{}'>", self.config.stylesheet_url)
            )
        html_lines.extend([
            "</head>",
            "<body>",
            "    <div class='graphql-schema-document'>",
            body,
            "    </div>",
            "</body>",
            "</html>",
        ])
        return "\n".join(html_lines)


def resolve_graphql_schema(schema: Any) -> GraphQLSchema:
    """Accept a ``GraphQLSchema`` or anything exposing one as ``graphql_schema`` (graphene)."""
    graphql_schema = getattr(schema, "graphql_schema", schema)
    if not isinstance(graphql_schema, GraphQLSchema):
        raise UnsupportedShapeError.for_object("schema", schema)
    return graphql_schema


def render_schema_html(schema: Any, config: Optional[DocumentationConfig] = None) -> str:
    """Render ``schema`` to an HTML fragment with the given or default configuration."""
    return DocumentationGenerator(config).render(schema)
