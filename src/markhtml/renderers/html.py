#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/html.py
"""HTML rendering backend.

This module provides the HtmlRenderer class, which writes HTML markup for
each document construct as a document walker reports it. Apart from plain
template emission, the renderer owns three pieces of behavior:

- Block elision: headings, paragraphs and lists are written speculatively
  and truncated away, opening tag included, when their content producer
  reports that nothing was rendered.
- Table of contents: headings are fed to a ``TocBuilder`` and the finished
  contents are spliced in after the document header when the footer is
  written.
- Link safety: unsafe or suppressed links degrade to inert ``<tt>`` text,
  and relative targets can be rewritten against an absolute prefix.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from markhtml.constants import (
    HTML_DOCTYPE,
    MAILTO_PREFIXES,
    ORDERED_LIST_TYPES,
    TOC_ID_PREFIX,
    VERSION,
    XHTML_DOCTYPE,
    LinkType,
    ListFlags,
    TableAlignment,
)
from markhtml.exceptions import ValidationError
from markhtml.options.html import HtmlRendererOptions
from markhtml.renderers.base import BaseRenderer, ContentProducer
from markhtml.renderers.state import InlineAttributes, OutputBuffer, RenderState
from markhtml.renderers.toc import TocBuilder
from markhtml.utils.escape import attr_escape, entity_escape_with_skip, find_entity_ranges
from markhtml.utils.html_utils import is_html_tag
from markhtml.utils.security import is_relative_link, is_safe_link
from markhtml.utils.text import slugify

if TYPE_CHECKING:
    from markhtml.ast.nodes import Document

logger = logging.getLogger(__name__)


def _double_space(out: OutputBuffer) -> None:
    if out:
        out.write("\n")


class HtmlRenderer(BaseRenderer):
    """Render document constructs to HTML.

    One instance holds the state of one render at a time. ``render_to_string``
    resets that state before walking a document; callers driving the
    operations directly must call ``reset()`` between documents.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Rendering a tree:

        >>> from markhtml.ast import Document, Heading, Paragraph, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")]),
        ...     Paragraph(content=[Text(content="Body")]),
        ... ])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1>Title</h1>\\n\\n<p>Body</p>\\n'

    Driving the operations directly:

        >>> renderer = HtmlRenderer()
        >>> out = OutputBuffer()
        >>> renderer.paragraph(out, lambda: False)
        >>> out.getvalue()
        ''

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.close_tag = options.close_tag
        self.state = RenderState()
        self.toc = TocBuilder(self.state)

    def reset(self) -> None:
        """Discard all per-render state so the next document starts clean."""
        self.state = RenderState()
        self.toc = TocBuilder(self.state)

    def render_to_string(self, doc: Document) -> str:
        """Render a document tree to an HTML string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML text

        """
        from markhtml.ast.walker import DocumentWalker

        self.reset()
        return DocumentWalker(self).walk(doc)

    # ------------------------------------------------------------------
    # Block-level constructs
    # ------------------------------------------------------------------

    def header(self, out: OutputBuffer, text: ContentProducer, level: int, identifier: str = "") -> None:
        """Write a heading, registering it in the table of contents when enabled.

        The heading gets ``identifier`` as its id when one is given, otherwise
        ``toc_<n>`` when the table of contents is enabled, otherwise no id.

        Raises
        ------
        ValidationError
            If ``level`` is less than 1.

        """
        if level < 1:
            raise ValidationError(
                f"Heading level must be at least 1, got {level}", parameter_name="level", parameter_value=level
            )

        marker = len(out)
        _double_space(out)

        anchor = attr_escape(identifier)
        if anchor:
            out.write(f'<h{level} id="{anchor}">')
        elif self.options.include_toc:
            # header_count advances when the heading is registered below
            out.write(f'<h{level} id="{TOC_ID_PREFIX}{self.state.header_count}">')
        else:
            out.write(f"<h{level}>")

        content_start = len(out)
        if not text():
            logger.debug("Eliding empty level %d heading", level)
            out.truncate(marker)
            return

        if self.options.include_toc:
            self.toc.register_heading(out.slice(content_start), level, anchor)

        out.write(f"</h{level}>\n")

    def paragraph(self, out: OutputBuffer, text: ContentProducer) -> None:
        marker = len(out)
        _double_space(out)

        out.write("<p>")
        if not text():
            logger.debug("Eliding empty paragraph")
            out.truncate(marker)
            return
        out.write("</p>\n")

    def list(self, out: OutputBuffer, text: ContentProducer, flags: ListFlags, start: int = 0) -> None:
        """Write an ordered or unordered list around the items ``text`` produces."""
        marker = len(out)
        _double_space(out)

        ordered = bool(flags & ListFlags.ORDERED)
        if ordered:
            attrs = ""
            for flag, list_type in ORDERED_LIST_TYPES:
                if flags & flag:
                    attrs = f' type="{list_type}"'
                    break
            if start > 1:
                attrs += f' start="{start}"'
            out.write(f"<ol{attrs}>")
        else:
            out.write("<ul>")

        if not text():
            logger.debug("Eliding empty list")
            out.truncate(marker)
            return

        out.write("</ol>\n" if ordered else "</ul>\n")

    def list_item(self, out: OutputBuffer, text: str, flags: ListFlags) -> None:
        if flags & (ListFlags.CONTAINS_BLOCK | ListFlags.BEGINNING_OF_LIST):
            _double_space(out)
        out.write("<li>")
        out.write(text)
        out.write("</li>\n")

    def block_code(self, out: OutputBuffer, text: str, lang: str = "") -> None:
        """Write a code block, turning each word of ``lang`` into a class name.

        A leading ``.`` on a language word is dropped, so ``.python`` and
        ``python`` are equivalent.
        """
        _double_space(out)

        names = [word[1:] if word.startswith(".") else word for word in lang.split()]
        names = [name for name in names if name]
        if names:
            out.write('<pre><code class="language-')
            out.write(" ".join(attr_escape(name) for name in names))
            out.write('">')
        else:
            out.write("<pre><code>")

        out.write(attr_escape(text))
        out.write("</code></pre>\n")

    def block_quote(self, out: OutputBuffer, text: str) -> None:
        _double_space(out)
        out.write("<blockquote>\n")
        out.write(text)
        out.write("</blockquote>\n")

    def aside(self, out: OutputBuffer, text: str) -> None:
        self.block_quote(out, text)

    def note(self, out: OutputBuffer, text: str) -> None:
        self.block_quote(out, text)

    def block_html(self, out: OutputBuffer, text: str) -> None:
        if self.options.skip_html:
            return
        _double_space(out)
        out.write(text)
        out.write("\n")

    def comment_html(self, out: OutputBuffer, text: str) -> None:
        self.block_html(out, text)

    def hrule(self, out: OutputBuffer) -> None:
        _double_space(out)
        out.write("<hr")
        out.write(self.close_tag)
        out.write("\n")

    def table(self, out: OutputBuffer, header: str, body: str, footer: str = "", caption: str = "") -> None:
        _double_space(out)
        out.write("<table>\n")
        if caption:
            out.write("<caption>\n")
            out.write(caption)
            out.write("\n</caption>\n")
        out.write("<thead>\n")
        out.write(header)
        out.write("</thead>\n\n<tbody>\n")
        out.write(body)
        out.write("</tbody>\n")
        if footer:
            out.write("<tfoot>\n")
            out.write(footer)
            out.write("</tfoot>\n")
        out.write("</table>\n")

    def table_row(self, out: OutputBuffer, text: str) -> None:
        _double_space(out)
        out.write("<tr>\n")
        out.write(text)
        out.write("\n</tr>\n")

    def table_header_cell(self, out: OutputBuffer, text: str, align: TableAlignment | None = None) -> None:
        self._table_cell(out, "th", text, align)

    def table_cell(self, out: OutputBuffer, text: str, align: TableAlignment | None = None) -> None:
        self._table_cell(out, "td", text, align)

    def _table_cell(self, out: OutputBuffer, tag: str, text: str, align: TableAlignment | None) -> None:
        _double_space(out)
        if align in ("left", "right", "center"):
            out.write(f'<{tag} align="{align}">')
        else:
            out.write(f"<{tag}>")
        out.write(text)
        out.write(f"</{tag}>")

    def footnotes(self, out: OutputBuffer, text: ContentProducer) -> None:
        """Write the footnote section; ``text`` produces the footnote items."""
        out.write('<div class="footnotes">\n')
        self.hrule(out)
        self.list(out, text, ListFlags.ORDERED)
        out.write("</div>\n")

    def footnote_item(self, out: OutputBuffer, name: str, text: str, flags: ListFlags) -> None:
        if flags & (ListFlags.CONTAINS_BLOCK | ListFlags.BEGINNING_OF_LIST):
            _double_space(out)

        anchor = self.options.footnote_anchor_prefix + slugify(name)
        out.write(f'<li id="fn:{anchor}">')
        out.write(text)
        if self.options.footnote_return_links:
            out.write(f' <a class="footnote-return" href="#fnref:{anchor}">')
            out.write(self.options.footnote_return_link_contents)
            out.write("</a>")
        out.write("</li>\n")

    def math(self, out: OutputBuffer, text: str, display: bool) -> None:
        """Write TeX math for client-side rendering.

        Display math carries the pending inline attributes, which are
        consumed by this call.
        """
        attr = self.inline_attr()
        self.state.inline_attr = None

        if display:
            out.write(f'<script {attr}type="math/tex; mode=display"> ')
        else:
            out.write('<script type="math/tex"> ')
        out.write(text)
        out.write("</script>")

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def auto_link(self, out: OutputBuffer, link: str, kind: LinkType = "normal") -> None:
        """Write a bare URL or email address as a hyperlink.

        Entity references already present in ``link`` are not escaped again.
        A ``mailto:`` or ``mailto://`` scheme is hidden from the visible text.
        """
        if self.options.skip_links or (
            self.options.safe_links_only and kind != "email" and not is_safe_link(link)
        ):
            logger.debug("Rendering autolink as text: %s", link)
            out.write("<tt>")
            out.write(attr_escape(link))
            out.write("</tt>")
            return

        skip_ranges = find_entity_ranges(link)

        target = link
        out.write('<a href="')
        if kind == "email":
            if not link.startswith(MAILTO_PREFIXES):
                out.write("mailto:")
                target = "mailto:" + link
        else:
            self._write_absolute_prefix(out, link)
        out.write(entity_escape_with_skip(link, skip_ranges))
        self._write_external_attributes(out, target)
        out.write('">')

        for prefix in MAILTO_PREFIXES:
            if link.startswith(prefix):
                out.write(attr_escape(link[len(prefix):]))
                break
        else:
            out.write(entity_escape_with_skip(link, skip_ranges))

        out.write("</a>")

    def link(self, out: OutputBuffer, link: str, title: str, content: str) -> None:
        if self.options.skip_links or (self.options.safe_links_only and not is_safe_link(link)):
            # keep the text, drop the hyperlink
            logger.debug("Rendering link as text: %s", link)
            out.write("<tt>")
            out.write(attr_escape(content))
            out.write("</tt>")
            return

        out.write('<a href="')
        self._write_absolute_prefix(out, link)
        out.write(attr_escape(link))
        if title:
            out.write('" title="')
            out.write(attr_escape(title))
        self._write_external_attributes(out, link)
        out.write('">')
        out.write(content)
        out.write("</a>")

    def image(self, out: OutputBuffer, link: str, title: str, alt: str) -> None:
        if self.options.skip_images:
            return

        out.write('<img src="')
        self._write_absolute_prefix(out, link)
        out.write(attr_escape(link))
        out.write('" alt="')
        out.write(attr_escape(alt))
        if title:
            out.write('" title="')
            out.write(attr_escape(title))
        out.write('"')
        out.write(self.close_tag)

    def _write_absolute_prefix(self, out: OutputBuffer, link: str) -> None:
        prefix = self.options.absolute_prefix
        if prefix and is_relative_link(link):
            out.write(prefix)
            if not link.startswith("/"):
                out.write("/")

    def _write_external_attributes(self, out: OutputBuffer, link: str) -> None:
        if is_relative_link(link):
            return
        if self.options.nofollow_links:
            out.write('" rel="nofollow')
        if self.options.href_target_blank:
            out.write('" target="_blank')

    # ------------------------------------------------------------------
    # Inline constructs
    # ------------------------------------------------------------------

    def code_span(self, out: OutputBuffer, text: str) -> None:
        out.write("<code>")
        out.write(attr_escape(text))
        out.write("</code>")

    def emphasis(self, out: OutputBuffer, text: str) -> None:
        if not text:
            return
        out.write(f"<em>{text}</em>")

    def double_emphasis(self, out: OutputBuffer, text: str) -> None:
        out.write(f"<strong>{text}</strong>")

    def triple_emphasis(self, out: OutputBuffer, text: str) -> None:
        out.write(f"<strong><em>{text}</em></strong>")

    def strike_through(self, out: OutputBuffer, text: str) -> None:
        out.write(f"<del>{text}</del>")

    def subscript(self, out: OutputBuffer, text: str) -> None:
        out.write(f"<sub>{text}</sub>")

    def superscript(self, out: OutputBuffer, text: str) -> None:
        out.write(f"<sup>{text}</sup>")

    def line_break(self, out: OutputBuffer) -> None:
        out.write("<br")
        out.write(self.close_tag)
        out.write("\n")

    def abbreviation(self, out: OutputBuffer, abbr: str, title: str) -> None:
        if title:
            out.write(f'<abbr title="{attr_escape(title)}">')
        else:
            out.write("<abbr>")
        out.write(abbr)
        out.write("</abbr>")

    def raw_html_tag(self, out: OutputBuffer, tag: str) -> None:
        options = self.options
        if options.skip_html:
            return
        if options.skip_style and is_html_tag(tag, "style"):
            return
        if options.skip_links and is_html_tag(tag, "a"):
            return
        if options.skip_images and is_html_tag(tag, "img"):
            return
        out.write(tag)

    def footnote_ref(self, out: OutputBuffer, ref: str, number: int | None = None) -> None:
        """Write a superscript reference to a footnote.

        ``number`` is the visible footnote number. When omitted, a footnote
        referenced before keeps its number and a new one takes the next value
        of the footnote counter. Only the first reference to a footnote
        carries the ``fnref`` id.
        """
        state = self.state
        anchor = self.options.footnote_anchor_prefix + slugify(ref)

        seen = state.footnote_numbers.get(anchor)
        if seen is None:
            state.footnote_count += 1
            if number is None:
                number = state.footnote_count
            state.footnote_numbers[anchor] = number
            out.write(f'<sup class="footnote-ref" id="fnref:{anchor}">')
        else:
            if number is None:
                number = seen
            out.write('<sup class="footnote-ref">')
        out.write(f'<a rel="footnote" href="#fn:{anchor}">{number}</a></sup>')

    def example(self, out: OutputBuffer, index: int) -> None:
        out.write(f"({index})")

    def entity(self, out: OutputBuffer, entity: str) -> None:
        out.write(entity)

    def normal_text(self, out: OutputBuffer, text: str) -> None:
        out.write(attr_escape(text))

    # ------------------------------------------------------------------
    # Document-level
    # ------------------------------------------------------------------

    def document_header(self, out: OutputBuffer, first: bool) -> None:
        """Write the page head and record where the table of contents goes.

        Only the first section of a multi-part document does anything here.
        """
        if not first:
            return

        if self.options.complete_page:
            self._write_page_head(out)

        if self.options.include_toc and self.state.toc_marker is None:
            self.state.toc_marker = len(out)

    def _write_page_head(self, out: OutputBuffer) -> None:
        options = self.options
        ending = " /" if options.use_xhtml else ""

        if options.use_xhtml:
            out.write(XHTML_DOCTYPE)
            out.write('<html xmlns="http://www.w3.org/1999/xhtml">\n')
        else:
            out.write(HTML_DOCTYPE)
            out.write("<html>\n")

        out.write("<head>\n")
        out.write("  <title>")
        self.normal_text(out, options.title)
        out.write("</title>\n")
        if options.creator:
            out.write(f'  <meta name="GENERATOR" content="{attr_escape(options.creator)} v{VERSION}"{ending}>\n')
        out.write(f'  <meta charset="utf-8"{ending}>\n')
        if options.css:
            out.write(f'  <link rel="stylesheet" type="text/css" href="{attr_escape(options.css)}"{ending}>\n')
        out.write("</head>\n")
        out.write("<body>\n")

    def document_footer(self, out: OutputBuffer, first: bool) -> None:
        """Splice in the table of contents and close the page.

        Only the first section of a multi-part document does anything here.
        """
        if not first:
            return

        if self.options.include_toc:
            self._splice_toc(out)

        if self.options.complete_page:
            out.write("\n</body>\n")
            out.write("</html>\n")

    def _splice_toc(self, out: OutputBuffer) -> None:
        options = self.options
        self.toc.finalize()

        marker = self.state.toc_marker
        self.state.toc_marker = None
        if marker is None or marker > len(out):
            logger.warning("No table of contents position was recorded; inserting at the start of the output")
            marker = 0

        body = out.slice(marker)
        out.truncate(marker)
        logger.debug("Splicing table of contents at offset %d ahead of %d characters", marker, len(body))

        if options.complete_page:
            out.write("\n")

        out.write("<nav>\n")
        out.write(self.toc.getvalue())
        out.write("</nav>\n")

        if not options.complete_page and not options.omit_contents:
            out.write("\n")

        if not options.omit_contents:
            out.write(body)

    # ------------------------------------------------------------------
    # Inline attributes
    # ------------------------------------------------------------------

    def set_inline_attr(self, attr: InlineAttributes | None) -> None:
        self.state.inline_attr = attr

    def inline_attr(self) -> InlineAttributes:
        """Return the pending inline attributes, or an empty set."""
        if self.state.inline_attr is None:
            return InlineAttributes()
        return self.state.inline_attr
