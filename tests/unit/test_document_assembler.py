import pytest
from graphql import build_schema

from graphql_html_printer.printer import DocumentAssembler, HtmlVisitor, normalize_whitespace
from tests.unit.schemas import MINIMAL_SDL


@pytest.mark.unit
class TestNavigation:
    def test_buttons_follow_root_operation_links(self, visitor, library_schema):
        navigation = normalize_whitespace(
            DocumentAssembler().build_navigation(visitor.render(library_schema))
        )

        assert navigation == (
            '<div class="floating-container">'
            '<a class="floating-button" href="#graphql-schema" title="Go to top">^</a>'
            '<a class="floating-button" href="#graphql-type-Query" title="Go to query">Q</a>'
            '<a class="floating-button" href="#graphql-type-Mutation" title="Go to mutation">M</a>'
            "</div>"
        )

    def test_top_button_only_without_root_links(self):
        navigation = normalize_whitespace(DocumentAssembler().build_navigation("<section></section>"))
        assert navigation == (
            '<div class="floating-container">'
            '<a class="floating-button" href="#graphql-schema" title="Go to top">^</a>'
            "</div>"
        )

    def test_navigation_precedes_fragments(self):
        schema = build_schema(MINIMAL_SDL)
        document = DocumentAssembler().assemble([HtmlVisitor(schema).render(schema)])

        assert document.startswith('<div class="floating-container">')
        assert document.index("</div>") < document.index('<section id="graphql-schema">')

    def test_navigation_can_be_disabled(self):
        document = DocumentAssembler(include_navigation=False).assemble(["<section>a</section>"])
        assert document == "<section>a</section>"


@pytest.mark.unit
class TestAssembly:
    def test_fragments_are_separated_by_placeholder_lines(self):
        document = DocumentAssembler(include_navigation=False).assemble(
            ["<section>a</section>", "<section>b</section>", "<section>c</section>"]
        )
        assert document == (
            "<section>a</section>"
            '<div class="line">&nbsp;</div>'
            "<section>b</section>"
            '<div class="line">&nbsp;</div>'
            "<section>c</section>"
        )

    def test_fragment_markup_is_not_escaped(self):
        document = DocumentAssembler(include_navigation=False).assemble(['<section id="x"></section>'])
        assert document == '<section id="x"></section>'

    def test_empty_member_separators_become_placeholders(self, visitor, library_schema):
        document = DocumentAssembler(include_navigation=False).assemble(
            [visitor.render(library_schema.get_type("CacheScope"))]
        )
        assert '<div class="line"></div>' not in document
        assert '<div class="line">&nbsp;</div>' in document

    def test_no_fragments(self):
        assert DocumentAssembler(include_navigation=False).assemble([]) == ""


@pytest.mark.unit
class TestNormalizeWhitespace:
    @pytest.mark.parametrize(
        "markup, expected",
        [
            ("<a>\n  <b>", "<a><b>"),
            ("<a>\n&nbsp;\n<b>", "<a>&nbsp;<b>"),
            ("<a> &nbsp; &nbsp;\t<b>", "<a>&nbsp;<b>"),
            ("<a>&nbsp;&nbsp;</a>", "<a>&nbsp;</a>"),
            ("<a> text </a>", "<a> text </a>"),
            ("<a>x</a>", "<a>x</a>"),
        ],
    )
    def test_gaps_between_tags(self, markup, expected):
        assert normalize_whitespace(markup) == expected

    def test_is_idempotent(self, visitor, library_schema):
        once = normalize_whitespace(visitor.render(library_schema.get_type("Book")))
        assert normalize_whitespace(once) == once
