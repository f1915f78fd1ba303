import pytest
from graphql import GraphQLList, GraphQLNonNull, GraphQLString, build_schema

from graphql_html_printer.exceptions import UnsupportedShapeError
from graphql_html_printer.printer import HtmlVisitor, normalize_whitespace
from tests.unit.schemas import DIAMOND_SDL


@pytest.mark.unit
class TestTypeLinks:
    def test_wrappers_are_displayed_in_wrap_order(self, visitor, library_schema):
        field = library_schema.get_type("Author").fields["books"]
        assert visitor.type_link(field.type) == (
            '<a class="field-type" href="#graphql-type-Book" title="">'
            '<span class="bracket-square">[</span>'
            "Book"
            '<span class="exclamation-mark">!</span>'
            '<span class="bracket-square">]</span>'
            '<span class="exclamation-mark">!</span>'
            "</a>"
        )

    def test_title_is_the_escaped_target_description(self, visitor, library_schema):
        link = visitor.type_link(library_schema.get_type("Author"), "typename")
        assert link == (
            '<a class="typename" href="#graphql-type-Author" '
            'title="A person who wrote &quot;books&quot; &amp; more">Author</a>'
        )

    def test_builtin_types_are_not_linked(self, visitor):
        link = visitor.type_link(GraphQLNonNull(GraphQLList(GraphQLString)))
        assert link.startswith('<span class="field-type" title="')
        assert "href" not in link
        assert link.endswith(
            '<span class="bracket-square">[</span>String<span class="bracket-square">]</span>'
            '<span class="exclamation-mark">!</span></span>'
        )

    def test_non_type_is_rejected(self, visitor):
        with pytest.raises(UnsupportedShapeError):
            visitor.type_link("Book")


@pytest.mark.unit
class TestDirectiveLinks:
    def test_user_directive_links_to_directive_anchor(self, visitor, library_schema):
        link = visitor.directive_link(library_schema.get_directive("contact"))
        assert link == '<a class="directive-usage" href="#graphql-directive-contact" title="">@contact</a>'

    def test_user_directive_without_section_is_not_linked(self, library_schema):
        visitor = HtmlVisitor(library_schema, link_directives=False)
        link = visitor.directive_link(library_schema.get_directive("contact"))
        assert link == '<span class="directive-usage" title="">@contact</span>'

    def test_specified_directive_is_not_linked(self, visitor, library_schema):
        link = visitor.directive_link(library_schema.get_directive("deprecated"))
        assert link.startswith('<span class="directive-usage" title="')
        assert "href" not in link
        assert link.endswith(">@deprecated</span>")


@pytest.mark.unit
class TestInterfaceFlattening:
    def test_diamond_inheritance_links_shared_interface_once(self):
        schema = build_schema(DIAMOND_SDL)
        visitor = HtmlVisitor(schema)

        links = visitor.flatten_interfaces(schema.get_type("T").interfaces)

        assert [link.split('href="#graphql-type-')[1].split('"')[0] for link in links] == ["B", "A", "C"]

    def test_object_header_lists_each_interface_once(self):
        schema = build_schema(DIAMOND_SDL)
        rendered = normalize_whitespace(HtmlVisitor(schema).render(schema.get_type("T")))

        assert rendered.count('href="#graphql-type-B"') == 1
        assert (
            '<span class="keyword">implements</span>&nbsp;<span class="implements">'
            '<a class="typename" href="#graphql-type-B" title="">B</a>'
            '&nbsp;<span class="ampersand">&amp;</span>&nbsp;'
            '<a class="typename" href="#graphql-type-A" title="">A</a>'
            '&nbsp;<span class="ampersand">&amp;</span>&nbsp;'
            '<a class="typename" href="#graphql-type-C" title="">C</a>'
            "</span>"
        ) in rendered

    def test_declared_transitive_interfaces_are_not_repeated(self, visitor, library_schema):
        links = visitor.flatten_interfaces(library_schema.get_type("Book").interfaces)
        assert len(links) == 2
        assert "graphql-type-Node" in links[0]
        assert "graphql-type-Item" in links[1]

    def test_no_interfaces(self, visitor, library_schema):
        assert visitor.flatten_interfaces(library_schema.get_type("Query").interfaces) == []
