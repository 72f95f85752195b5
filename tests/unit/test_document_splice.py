#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_document_splice.py
"""Tests for document header/footer output and table-of-contents splicing."""

import logging

import pytest

from markhtml.constants import VERSION, XHTML_DOCTYPE
from markhtml.options import HtmlRendererOptions
from markhtml.renderers import HtmlRenderer, OutputBuffer
from tests.utils import toc_depths, write_producer

PAGE_HEAD = (
    "<!DOCTYPE html>\n<html>\n<head>\n  <title></title>\n"
    f'  <meta name="GENERATOR" content="markhtml v{VERSION}">\n'
    '  <meta charset="utf-8">\n</head>\n<body>\n'
)
PAGE_TAIL = "\n</body>\n</html>\n"
SINGLE_TOC = '<nav>\n<ul>\n<li><a href="#toc_0">A</a></li>\n</ul>\n</nav>\n'


def _render_sections(renderer: HtmlRenderer, *sections) -> str:
    """Drive header/paragraph operations between document_header and document_footer."""
    out = OutputBuffer()
    renderer.document_header(out, True)
    for kind, text, level in sections:
        if kind == "h":
            renderer.header(out, write_producer(out, text), level)
        else:
            renderer.paragraph(out, write_producer(out, text))
    renderer.document_footer(out, True)
    return out.getvalue()


@pytest.mark.unit
class TestTocSplice:
    """Tests for placing the table of contents."""

    def test_toc_before_body(self, toc_renderer):
        html = _render_sections(toc_renderer, ("h", "A", 1), ("p", "body", 0))
        assert html == SINGLE_TOC + '\n<h1 id="toc_0">A</h1>\n\n<p>body</p>\n'

    def test_omit_contents(self):
        renderer = HtmlRenderer(HtmlRendererOptions(include_toc=True, omit_contents=True))
        html = _render_sections(renderer, ("h", "A", 1), ("p", "body", 0))
        assert html == SINGLE_TOC

    def test_complete_page(self):
        renderer = HtmlRenderer(HtmlRendererOptions(include_toc=True, complete_page=True))
        html = _render_sections(renderer, ("h", "A", 1))
        assert html == PAGE_HEAD + "\n" + SINGLE_TOC + '\n<h1 id="toc_0">A</h1>\n' + PAGE_TAIL

    def test_complete_page_omit_contents(self):
        renderer = HtmlRenderer(HtmlRendererOptions(include_toc=True, complete_page=True, omit_contents=True))
        html = _render_sections(renderer, ("h", "A", 1))
        assert html == PAGE_HEAD + "\n" + SINGLE_TOC + PAGE_TAIL

    def test_nested_headings(self, toc_renderer):
        html = _render_sections(toc_renderer, ("h", "A", 1), ("h", "B", 1), ("h", "C", 2))
        assert html.startswith(
            '<nav>\n<ul>\n<li><a href="#toc_0">A</a></li>\n'
            '<li><a href="#toc_1">B</a>\n<ul>\n<li><a href="#toc_2">C</a></li>\n</ul></li>\n</ul>\n</nav>\n'
        )
        assert toc_depths(html) == [("A", 1), ("B", 1), ("C", 2)]

    def test_empty_toc(self, toc_renderer):
        html = _render_sections(toc_renderer, ("p", "body", 0))
        assert html == "<nav>\n</nav>\n\n<p>body</p>\n"

    def test_missing_marker_falls_back_to_start(self, toc_renderer, caplog):
        out = OutputBuffer()
        toc_renderer.paragraph(out, write_producer(out, "body"))
        with caplog.at_level(logging.WARNING, logger="markhtml.renderers.html"):
            toc_renderer.document_footer(out, True)
        assert out.getvalue() == "<nav>\n</nav>\n\n<p>body</p>\n"
        assert "table of contents" in caplog.text

    def test_marker_cleared_after_splice(self, toc_renderer, out):
        toc_renderer.document_header(out, True)
        assert toc_renderer.state.toc_marker == 0
        toc_renderer.document_footer(out, True)
        assert toc_renderer.state.toc_marker is None


@pytest.mark.unit
class TestMultiPart:
    """Tests for sections after the first of a multi-part document."""

    def test_header_and_footer_are_no_ops(self):
        renderer = HtmlRenderer(HtmlRendererOptions(include_toc=True, complete_page=True))
        out = OutputBuffer("<p>x</p>\n")
        renderer.document_header(out, False)
        renderer.document_footer(out, False)
        assert out.getvalue() == "<p>x</p>\n"
        assert renderer.state.toc_marker is None


@pytest.mark.unit
class TestPageHead:
    """Tests for complete-page output without a table of contents."""

    def test_title_and_css(self):
        renderer = HtmlRenderer(HtmlRendererOptions(complete_page=True, title="A & B", css="style.css"))
        html = _render_sections(renderer, ("p", "body", 0))
        assert html == (
            "<!DOCTYPE html>\n<html>\n<head>\n  <title>A &amp; B</title>\n"
            f'  <meta name="GENERATOR" content="markhtml v{VERSION}">\n'
            '  <meta charset="utf-8">\n'
            '  <link rel="stylesheet" type="text/css" href="style.css">\n'
            "</head>\n<body>\n\n<p>body</p>\n" + PAGE_TAIL
        )

    def test_xhtml(self):
        renderer = HtmlRenderer(HtmlRendererOptions(complete_page=True, use_xhtml=True))
        html = _render_sections(renderer)
        assert html.startswith(XHTML_DOCTYPE + '<html xmlns="http://www.w3.org/1999/xhtml">\n')
        assert '  <meta charset="utf-8" />\n' in html

    def test_no_creator(self):
        renderer = HtmlRenderer(HtmlRendererOptions(complete_page=True, creator=None))
        assert "GENERATOR" not in _render_sections(renderer)

    def test_fragment_has_no_page_head(self, renderer):
        assert _render_sections(renderer, ("p", "body", 0)) == "<p>body</p>\n"
