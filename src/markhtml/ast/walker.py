#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/walker.py
"""Drive a rendering backend from a document tree.

The ``DocumentWalker`` visits a tree in document order and calls one
``Renderer`` operation per node. It decides how content reaches each
operation:

- Headings, paragraphs, lists and the footnote section receive a content
  producer that renders their children into the current buffer when called
  and reports whether any non-whitespace markup was written.
- Every other construct receives its children already rendered, captured
  in a scratch buffer.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from markhtml.ast.nodes import (
    Abbreviation,
    AutoLink,
    BlockQuote,
    Code,
    CodeBlock,
    Comment,
    Document,
    Emphasis,
    Entity,
    ExampleReference,
    FootnoteDefinition,
    FootnoteReference,
    HTMLBlock,
    HTMLInline,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    StrongEmphasis,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from markhtml.ast.visitors import NodeVisitor
from markhtml.constants import ListFlags
from markhtml.exceptions import RenderingError
from markhtml.renderers.state import InlineAttributes, OutputBuffer

if TYPE_CHECKING:
    from markhtml.renderers.base import ContentProducer, Renderer

logger = logging.getLogger(__name__)

_LIST_STYLE_FLAGS = {
    "a": ListFlags.ALPHA_LOWER,
    "A": ListFlags.ALPHA_UPPER,
    "i": ListFlags.ROMAN_LOWER,
    "I": ListFlags.ROMAN_UPPER,
}


class DocumentWalker(NodeVisitor):
    """Walk a document tree and call a renderer's operations in order.

    Parameters
    ----------
    renderer : Renderer
        Backend receiving the operations

    Examples
    --------
        >>> from markhtml.ast import Document, Paragraph, Text
        >>> from markhtml.renderers.html import HtmlRenderer
        >>> doc = Document(children=[Paragraph(content=[Text(content="Hi")])])
        >>> DocumentWalker(HtmlRenderer()).walk(doc)
        '<p>Hi</p>\\n'

    """

    def __init__(self, renderer: Renderer):
        self.renderer = renderer
        self._out = OutputBuffer()
        self._footnotes: list[FootnoteDefinition] = []
        self._footnote_numbers: dict[str, int] = {}

    def walk(self, doc: Document) -> str:
        """Render ``doc`` and return the output.

        Raises
        ------
        RenderingError
            If ``doc`` is not a Document or the tree contains an object that
            is not a node.

        """
        if not isinstance(doc, Document):
            raise RenderingError(f"Expected a Document, got {type(doc).__name__}", rendering_stage="walk")

        self._out = OutputBuffer()
        self._footnotes = []
        self._footnote_numbers = {}
        doc.accept(self)
        return self._out.getvalue()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _visit(self, node: Node) -> None:
        if not isinstance(node, Node):
            raise RenderingError(f"Cannot render object of type {type(node).__name__}", rendering_stage="walk")
        node.accept(self)

    def _producer(self, nodes: Iterable[Node]) -> ContentProducer:
        """Return a content producer that renders ``nodes`` into the current buffer."""

        def produce() -> bool:
            out = self._out
            start = len(out)
            for node in nodes:
                self._visit(node)
            return bool(out.slice(start).strip())

        return produce

    def _capture(self, nodes: Iterable[Node]) -> str:
        """Render ``nodes`` into a scratch buffer and return the markup."""
        saved_output = self._out
        self._out = OutputBuffer()
        try:
            for node in nodes:
                self._visit(node)
            return self._out.getvalue()
        finally:
            self._out = saved_output

    def _item_content(self, children: list[Node], flags: ListFlags) -> tuple[str, ListFlags]:
        # a lone paragraph renders tight, without <p>
        if len(children) == 1 and isinstance(children[0], Paragraph):
            return self._capture(children[0].content), flags
        if not children:
            return "", flags
        return self._capture(children), flags | ListFlags.CONTAINS_BLOCK

    def _render_list_item(self, item: ListItem, flags: ListFlags) -> None:
        text, flags = self._item_content(item.children, flags)
        self.renderer.list_item(self._out, text, flags)

    def _render_row(self, row: TableRow, header: bool) -> None:
        saved_output = self._out
        self._out = OutputBuffer()
        try:
            for cell in row.cells:
                text = self._capture(cell.content)
                if header:
                    self.renderer.table_header_cell(self._out, text, cell.alignment)
                else:
                    self.renderer.table_cell(self._out, text, cell.alignment)
            cells = self._out.getvalue()
        finally:
            self._out = saved_output
        self.renderer.table_row(self._out, cells)

    def _capture_rows(self, rows: Iterable[TableRow], header: bool) -> str:
        saved_output = self._out
        self._out = OutputBuffer()
        try:
            for row in rows:
                self._render_row(row, header or row.is_header)
            return self._out.getvalue()
        finally:
            self._out = saved_output

    def _ordered_footnotes(self) -> list[FootnoteDefinition]:
        # list position must match the number shown at the reference
        numbers = self._footnote_numbers
        return sorted(
            self._footnotes,
            key=lambda footnote: (footnote.identifier not in numbers, numbers.get(footnote.identifier, 0)),
        )

    def _render_footnotes(self) -> bool:
        start = len(self._out)
        for index, footnote in enumerate(self._ordered_footnotes()):
            flags = ListFlags.BEGINNING_OF_LIST if index == 0 else ListFlags.NONE
            text, flags = self._item_content(footnote.content, flags)
            self.renderer.footnote_item(self._out, footnote.identifier, text, flags)
        return len(self._out) > start

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        renderer = self.renderer
        renderer.document_header(self._out, True)
        for child in node.children:
            self._visit(child)
        if self._footnotes:
            logger.debug("Rendering %d footnote definitions", len(self._footnotes))
            renderer.footnotes(self._out, self._render_footnotes)
        renderer.document_footer(self._out, True)

    def visit_heading(self, node: Heading) -> None:
        self.renderer.header(self._out, self._producer(node.content), node.level, node.identifier)

    def visit_paragraph(self, node: Paragraph) -> None:
        self.renderer.paragraph(self._out, self._producer(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        self.renderer.block_code(self._out, node.content, node.language)

    def visit_block_quote(self, node: BlockQuote) -> None:
        text = self._capture(node.children)
        if node.kind == "aside":
            self.renderer.aside(self._out, text)
        elif node.kind == "note":
            self.renderer.note(self._out, text)
        else:
            self.renderer.block_quote(self._out, text)

    def visit_list(self, node: List) -> None:
        flags = ListFlags.NONE
        if node.ordered:
            flags |= ListFlags.ORDERED
            if node.style is not None:
                flags |= _LIST_STYLE_FLAGS[node.style]

        def produce() -> bool:
            start = len(self._out)
            for index, item in enumerate(node.items):
                self._render_list_item(item, ListFlags.BEGINNING_OF_LIST if index == 0 else ListFlags.NONE)
            return len(self._out) > start

        self.renderer.list(self._out, produce, flags, node.start if node.ordered else 0)

    def visit_list_item(self, node: ListItem) -> None:
        self._render_list_item(node, ListFlags.NONE)

    def visit_table(self, node: Table) -> None:
        header = self._capture_rows([node.header] if node.header is not None else [], header=True)
        body = self._capture_rows(node.rows, header=False)
        footer = self._capture_rows(node.footer, header=False)
        caption = self._capture([Text(content=node.caption)]) if node.caption else ""
        self.renderer.table(self._out, header, body, footer, caption)

    def visit_table_row(self, node: TableRow) -> None:
        self._render_row(node, node.is_header)

    def visit_table_cell(self, node: TableCell) -> None:
        self.renderer.table_cell(self._out, self._capture(node.content), node.alignment)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self.renderer.hrule(self._out)

    def visit_html_block(self, node: HTMLBlock) -> None:
        self.renderer.block_html(self._out, node.content)

    def visit_comment(self, node: Comment) -> None:
        self.renderer.comment_html(self._out, f"<!--{node.content}-->")

    def visit_math_block(self, node: MathBlock) -> None:
        if node.identifier or node.classes or node.attributes:
            self.renderer.set_inline_attr(
                InlineAttributes(id=node.identifier, classes=list(node.classes), attrs=dict(node.attributes))
            )
        self.renderer.math(self._out, node.content, True)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        self._footnotes.append(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        self.renderer.normal_text(self._out, node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        self.renderer.emphasis(self._out, self._capture(node.content))

    def visit_strong(self, node: Strong) -> None:
        self.renderer.double_emphasis(self._out, self._capture(node.content))

    def visit_strong_emphasis(self, node: StrongEmphasis) -> None:
        self.renderer.triple_emphasis(self._out, self._capture(node.content))

    def visit_code(self, node: Code) -> None:
        self.renderer.code_span(self._out, node.content)

    def visit_link(self, node: Link) -> None:
        self.renderer.link(self._out, node.url, node.title, self._capture(node.content))

    def visit_auto_link(self, node: AutoLink) -> None:
        self.renderer.auto_link(self._out, node.url, "email" if node.email else "normal")

    def visit_image(self, node: Image) -> None:
        self.renderer.image(self._out, node.url, node.title, node.alt_text)

    def visit_line_break(self, node: LineBreak) -> None:
        self.renderer.line_break(self._out)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self.renderer.strike_through(self._out, self._capture(node.content))

    def visit_superscript(self, node: Superscript) -> None:
        self.renderer.superscript(self._out, self._capture(node.content))

    def visit_subscript(self, node: Subscript) -> None:
        self.renderer.subscript(self._out, self._capture(node.content))

    def visit_html_inline(self, node: HTMLInline) -> None:
        self.renderer.raw_html_tag(self._out, node.content)

    def visit_entity(self, node: Entity) -> None:
        self.renderer.entity(self._out, node.content)

    def visit_abbreviation(self, node: Abbreviation) -> None:
        self.renderer.abbreviation(self._out, self._capture(node.content), node.title)

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        # numbered on first reference, so repeats share a number
        number = self._footnote_numbers.setdefault(node.identifier, len(self._footnote_numbers) + 1)
        self.renderer.footnote_ref(self._out, node.identifier, number)

    def visit_math_inline(self, node: MathInline) -> None:
        self.renderer.math(self._out, node.content, False)

    def visit_example_reference(self, node: ExampleReference) -> None:
        self.renderer.example(self._out, node.index)
