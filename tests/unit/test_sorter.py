import pytest
from graphql import GraphQLList, build_schema

from graphql_html_printer.exceptions import UnsupportedShapeError
from graphql_html_printer.printer import TypeKindSorter, get_type_kind

KINDS_SDL = """
directive @zeta on FIELD_DEFINITION
directive @alpha on OBJECT

enum Beta { ONE }
type Alpha { id: ID }
interface Zeta { id: ID }
input Gamma { id: ID }
scalar Delta
union Eta = Alpha
type Query { alpha: Alpha }
"""


def names(declarations):
    return [declaration.name for declaration in declarations]


@pytest.mark.unit
class TestTypeKindSorter:
    def test_kinds_come_before_names(self):
        schema = build_schema(KINDS_SDL)
        types = [schema.get_type(name) for name in ("Beta", "Alpha", "Zeta")]

        assert names(TypeKindSorter().sort(types)) == ["Zeta", "Alpha", "Beta"]

    def test_full_kind_order_with_directives_last(self):
        schema = build_schema(KINDS_SDL)
        types = [schema.get_type(name) for name in ("Delta", "Query", "Eta", "Beta", "Gamma", "Alpha", "Zeta")]
        directives = [schema.get_directive("zeta"), schema.get_directive("alpha")]

        assert names(TypeKindSorter().sort(types, directives)) == [
            "Zeta",
            "Alpha",
            "Query",
            "Eta",
            "Gamma",
            "Delta",
            "Beta",
            "alpha",
            "zeta",
        ]

    def test_names_compare_by_code_point(self):
        schema = build_schema("type Query { a: b }\ntype b { id: ID }\ntype B { id: ID }")
        types = [schema.get_type(name) for name in ("b", "Query", "B")]

        assert names(TypeKindSorter().sort(types)) == ["B", "Query", "b"]

    def test_empty_input(self):
        assert TypeKindSorter().sort([]) == []

    def test_wrapped_type_is_rejected(self):
        schema = build_schema(KINDS_SDL)
        with pytest.raises(UnsupportedShapeError):
            TypeKindSorter().sort([GraphQLList(schema.get_type("Alpha"))])


@pytest.mark.unit
def test_get_type_kind(library_schema):
    assert get_type_kind(library_schema.get_type("Node")).name == "INTERFACE"
    assert get_type_kind(library_schema.get_type("BookOrder")).name == "INPUT_OBJECT"
    assert get_type_kind(library_schema.get_type("DateTime")).name == "SCALAR"
