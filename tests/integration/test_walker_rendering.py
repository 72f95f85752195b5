#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_walker_rendering.py
"""Integration tests rendering document trees end to end.

Tests cover:
- Empty block elision through the walker
- Table of contents structure and heading ids
- Lists, tables, footnotes and math
- Link safety inside rendered documents
- Renderer reuse across documents
"""

import pytest
from bs4 import BeautifulSoup

from markhtml.ast import (
    AutoLink,
    BlockQuote,
    Comment,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Link,
    List,
    ListItem,
    MathBlock,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from markhtml.ast.walker import DocumentWalker
from markhtml.exceptions import RenderingError
from markhtml.options import HtmlRendererOptions
from markhtml.renderers import HtmlRenderer
from tests.utils import toc_depths


def _heading(level: int, text: str) -> Heading:
    return Heading(level=level, content=[Text(content=text)])


def _para(text: str) -> Paragraph:
    return Paragraph(content=[Text(content=text)])


def _item(text: str) -> ListItem:
    return ListItem(children=[_para(text)])


def _render(doc: Document, **options) -> str:
    return HtmlRenderer(HtmlRendererOptions(**options)).render_to_string(doc)


@pytest.mark.integration
class TestBlockElision:
    """Empty blocks leave no trace in the output."""

    @pytest.mark.parametrize(
        "empty",
        [
            Paragraph(content=[Text(content="")]),
            Paragraph(content=[Text(content="   ")]),
            Paragraph(),
            Paragraph(content=[Emphasis(content=[])]),
            List(ordered=True, items=[]),
        ],
    )
    def test_empty_block_is_byte_identical(self, empty):
        baseline = _render(Document(children=[_heading(1, "Title"), _para("Body")]))
        with_empty = _render(Document(children=[_heading(1, "Title"), empty, _para("Body")]))
        assert with_empty == baseline == "<h1>Title</h1>\n\n<p>Body</p>\n"

    def test_empty_heading_does_not_consume_toc_id(self):
        doc = Document(children=[Heading(level=1, content=[]), _heading(1, "Real")])
        html = _render(doc, include_toc=True)
        assert '<h1 id="toc_0">Real</h1>' in html
        assert toc_depths(html) == [("Real", 1)]


@pytest.mark.integration
class TestTableOfContents:
    """Headings feed the table of contents."""

    def test_nested_structure(self):
        doc = Document(children=[_heading(1, "A"), _heading(1, "B"), _heading(2, "C")])
        html = _render(doc, include_toc=True)
        soup = BeautifulSoup(html, "html.parser")

        top = soup.nav.find("ul", recursive=False)
        items = top.find_all("li", recursive=False)
        assert len(items) == 2
        assert items[1].find("ul").find("a").get_text() == "C"

        heading_ids = [h["id"] for h in soup.find_all(["h1", "h2"])]
        hrefs = [a["href"] for a in soup.nav.find_all("a")]
        assert heading_ids == ["toc_0", "toc_1", "toc_2"]
        assert hrefs == [f"#{hid}" for hid in heading_ids]

    def test_explicit_identifiers(self):
        doc = Document(children=[Heading(level=1, content=[Text(content="A")], identifier="intro"), _heading(2, "B")])
        html = _render(doc, include_toc=True)
        soup = BeautifulSoup(html, "html.parser")
        assert [a["href"] for a in soup.nav.find_all("a")] == ["#intro", "#toc_0"]

    def test_deep_first_heading(self):
        html = _render(Document(children=[_heading(3, "Deep"), _heading(1, "Top")]), include_toc=True)
        assert toc_depths(html) == [("Deep", 3), ("Top", 1)]

    def test_complete_page(self):
        doc = Document(children=[_heading(1, "A"), _para("x")])
        html = _render(doc, include_toc=True, complete_page=True, title="Doc")
        soup = BeautifulSoup(html, "html.parser")
        assert soup.title.get_text() == "Doc"
        assert soup.body.find().name == "nav"
        assert soup.body.find("h1")["id"] == "toc_0"

    def test_render_to_bytes(self):
        doc = Document(children=[_para("caf\u00e9")])
        assert HtmlRenderer().render_to_bytes(doc) == "<p>caf\u00e9</p>\n".encode("utf-8")

    def test_renderer_reuse_restarts_ids(self):
        renderer = HtmlRenderer(HtmlRendererOptions(include_toc=True))
        doc = Document(children=[_heading(1, "A"), _heading(2, "B")])
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)


@pytest.mark.integration
class TestBlocks:
    """Block constructs rendered through the walker."""

    def test_tight_list(self):
        doc = Document(children=[List(ordered=True, items=[_item("a"), _item("b")])])
        assert _render(doc) == "<ol>\n<li>a</li>\n<li>b</li>\n</ol>\n"

    def test_list_style_and_start(self):
        doc = Document(children=[List(ordered=True, items=[_item("a")], start=4, style="i")])
        assert _render(doc).startswith('<ol type="i" start="4">')

    def test_loose_list_item(self):
        item = ListItem(children=[_para("a"), _para("b")])
        soup = BeautifulSoup(_render(Document(children=[List(ordered=False, items=[item])])), "html.parser")
        assert [p.get_text() for p in soup.ul.li.find_all("p")] == ["a", "b"]

    def test_table(self):
        table = Table(
            header=TableRow(cells=[TableCell(content=[Text(content="A")], alignment="left")]),
            rows=[TableRow(cells=[TableCell(content=[Text(content="1")])])],
        )
        assert _render(Document(children=[table])) == (
            '<table>\n<thead>\n<tr>\n<th align="left">A</th>\n</tr>\n</thead>\n\n'
            "<tbody>\n<tr>\n<td>1</td>\n</tr>\n</tbody>\n</table>\n"
        )

    def test_block_quote_and_rule(self):
        doc = Document(children=[BlockQuote(children=[_para("q")]), ThematicBreak()])
        assert _render(doc) == "<blockquote>\n<p>q</p>\n</blockquote>\n\n<hr>\n"

    def test_comment(self):
        assert _render(Document(children=[Comment(content=" c ")])) == "<!-- c -->\n"

    def test_math_block_attributes(self):
        doc = Document(children=[MathBlock(content="x", identifier="eq"), MathBlock(content="y")])
        assert _render(doc) == (
            '<script id="eq" type="math/tex; mode=display"> x</script>'
            '<script type="math/tex; mode=display"> y</script>'
        )

    def test_footnotes(self):
        doc = Document(
            children=[
                Paragraph(content=[Text(content="See"), FootnoteReference(identifier="n1")]),
                FootnoteDefinition(identifier="n1", content=[_para("Note.")]),
            ]
        )
        soup = BeautifulSoup(_render(doc), "html.parser")
        assert soup.p.sup.a["href"] == "#fn:n1"
        section = soup.find("div", class_="footnotes")
        assert section.hr is not None
        item = section.ol.li
        assert item["id"] == "fn:n1"
        assert item.get_text() == "Note."

    def test_footnote_numbers_follow_first_reference(self):
        doc = Document(
            children=[
                Paragraph(
                    content=[
                        FootnoteReference(identifier="b"),
                        FootnoteReference(identifier="a"),
                        FootnoteReference(identifier="b"),
                    ]
                ),
                FootnoteDefinition(identifier="a", content=[_para("A")]),
                FootnoteDefinition(identifier="b", content=[_para("B")]),
            ]
        )
        html = _render(doc)
        soup = BeautifulSoup(html, "html.parser")

        item_ids = [li["id"] for li in soup.find("div", class_="footnotes").ol.find_all("li")]
        assert item_ids == ["fn:b", "fn:a"]

        refs = [(sup.a["href"], sup.a.get_text()) for sup in soup.p.find_all("sup")]
        assert refs == [("#fn:b", "1"), ("#fn:a", "2"), ("#fn:b", "1")]
        for href, label in refs:
            assert item_ids[int(label) - 1] == href[1:]

        assert html.count('id="fnref:b"') == 1

    def test_unreferenced_footnotes_come_last(self):
        doc = Document(
            children=[
                Paragraph(content=[Text(content="x"), FootnoteReference(identifier="a")]),
                FootnoteDefinition(identifier="c", content=[_para("C")]),
                FootnoteDefinition(identifier="a", content=[_para("A")]),
            ]
        )
        soup = BeautifulSoup(_render(doc), "html.parser")
        assert [li["id"] for li in soup.find("div", class_="footnotes").find_all("li")] == ["fn:a", "fn:c"]


@pytest.mark.integration
class TestLinkSafety:
    """Link policy applied to whole documents."""

    def test_unsafe_links_are_inert(self):
        doc = Document(
            children=[
                Paragraph(
                    content=[
                        Link(url="javascript:alert(1)", content=[Text(content="click")]),
                        AutoLink(url="javascript:evil()"),
                        Link(url="https://ok.com", content=[Text(content="ok")]),
                    ]
                )
            ]
        )
        soup = BeautifulSoup(_render(doc, safe_links_only=True), "html.parser")
        assert [a["href"] for a in soup.find_all("a")] == ["https://ok.com"]
        assert [tt.get_text() for tt in soup.find_all("tt")] == ["click", "javascript:evil()"]

    def test_absolute_prefix_and_nofollow(self):
        doc = Document(
            children=[
                Paragraph(
                    content=[
                        Link(url="a/b", content=[Text(content="rel")]),
                        Link(url="https://ext.com", content=[Text(content="ext")]),
                    ]
                )
            ]
        )
        soup = BeautifulSoup(_render(doc, absolute_prefix="http://x.com", nofollow_links=True), "html.parser")
        rel, ext = soup.find_all("a")
        assert rel["href"] == "http://x.com/a/b"
        assert not rel.has_attr("rel")
        assert ext["rel"] == ["nofollow"]


@pytest.mark.integration
class TestWalkerErrors:
    """Invalid trees are reported as RenderingError."""

    def test_non_document(self):
        with pytest.raises(RenderingError):
            DocumentWalker(HtmlRenderer()).walk(_para("x"))

    def test_non_node_child(self):
        with pytest.raises(RenderingError):
            HtmlRenderer().render_to_string(Document(children=[Paragraph(content=["raw"])]))

    def test_document_takes_only_children(self):
        with pytest.raises(TypeError):
            Document(children=[], metadata={"title": "x"})
