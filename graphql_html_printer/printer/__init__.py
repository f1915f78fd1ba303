"""
HTML schema printer package.

This package renders GraphQL schemas into cross-linked HTML documentation:
a declaration visitor composed from value, description, link and member
printers, a kind-based sorter and a document assembler.
"""

from .assembler import DocumentAssembler
from .config import DocumentationConfig
from .generator import DocumentationGenerator, render_schema_html, resolve_graphql_schema
from .links import SCHEMA_ANCHOR, directive_anchor, type_anchor
from .markup import normalize_whitespace
from .sorter import TypeKindSorter, get_type_kind
from .usages import DirectiveUsage, collect_directive_usages
from .visitor import HtmlVisitor

__all__ = [
    "DirectiveUsage",
    "DocumentAssembler",
    "DocumentationConfig",
    "DocumentationGenerator",
    "HtmlVisitor",
    "SCHEMA_ANCHOR",
    "TypeKindSorter",
    "collect_directive_usages",
    "directive_anchor",
    "get_type_kind",
    "normalize_whitespace",
    "render_schema_html",
    "resolve_graphql_schema",
    "type_anchor",
]
