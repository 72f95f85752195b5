#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/nodes.py
"""Document tree node definitions.

This module defines the node types a document walker can hand to a
rendering backend. Nodes are plain dataclasses that support the visitor
pattern through ``accept``; they carry no rendering logic of their own.

Node Hierarchy
--------------
- Node (abstract base)
  - Block nodes: Document, Heading, Paragraph, CodeBlock, BlockQuote, List,
    ListItem, Table, TableRow, TableCell, ThematicBreak, HTMLBlock, Comment,
    MathBlock, FootnoteDefinition
  - Inline nodes: Text, Emphasis, Strong, StrongEmphasis, Code, Link,
    AutoLink, Image, LineBreak, Strikethrough, Superscript, Subscript,
    HTMLInline, Entity, Abbreviation, FootnoteReference, MathInline,
    ExampleReference

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from markhtml.constants import TableAlignment


class Node(ABC):
    """Base class for all tree nodes.

    All nodes support the visitor pattern for traversal and rendering.
    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading level, 1 or greater
    content : list of Node, default = empty list
        Inline nodes representing heading text
    identifier : str, default = ""
        Explicit anchor id; empty to let the renderer choose one

    """

    level: int
    content: list[Node] = field(default_factory=list)
    identifier: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Code block node with an optional language string.

    Parameters
    ----------
    content : str
        Code text, unescaped
    language : str, default = ""
        Space-separated language names, e.g. ``"python"`` or ``".py .numberLines"``

    """

    content: str
    language: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node.

    ``kind`` distinguishes plain quotes from asides and notes, which some
    backends render differently.
    """

    children: list[Node] = field(default_factory=list)
    kind: Literal["quote", "aside", "note"] = "quote"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    style : {"a", "A", "i", "I"} or None, default = None
        Numbering style for ordered lists; None for decimal

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    style: Optional[Literal["a", "A", "i", "I"]] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    An item holding a single paragraph is rendered tight, without the
    paragraph wrapper.
    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table node.

    Parameters
    ----------
    header : TableRow or None, default = None
        Header row
    rows : list of TableRow, default = empty list
        Body rows
    footer : list of TableRow, default = empty list
        Footer rows
    caption : str, default = ""
        Caption text, unescaped

    """

    header: Optional[TableRow] = None
    rows: list[TableRow] = field(default_factory=list)
    footer: list[TableRow] = field(default_factory=list)
    caption: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node with inline content and optional alignment."""

    content: list[Node] = field(default_factory=list)
    alignment: Optional[TableAlignment] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule) node."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, passed through unless the backend suppresses HTML."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_block(self)


@dataclass
class Comment(Node):
    """Comment block; ``content`` is the comment text without delimiters."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_comment(self)


@dataclass
class MathBlock(Node):
    """Display math node.

    Parameters
    ----------
    content : str
        TeX source
    identifier : str, default = ""
        Element id attached to the rendered math
    classes : list of str, default = empty list
        CSS classes attached to the rendered math
    attributes : dict, default = empty dict
        Other attributes attached to the rendered math

    """

    content: str
    identifier: str = ""
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_math_block(self)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition node.

    Definitions are collected during the walk and rendered together at the
    end of the document.
    """

    identifier: str
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_footnote_definition(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node; ``content`` is unescaped."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong emphasis (bold) node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong(self)


@dataclass
class StrongEmphasis(Node):
    """Combined bold and italic node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong_emphasis(self)


@dataclass
class Code(Node):
    """Inline code node; ``content`` is unescaped."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link target
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str, default = ""
        Link title

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class AutoLink(Node):
    """Bare URL or email address rendered as a link to itself."""

    url: str
    email: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_auto_link(self)


@dataclass
class Image(Node):
    """Image node."""

    url: str
    alt_text: str = ""
    title: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Hard line break node."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_line_break(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class Superscript(Node):
    """Superscript node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_superscript(self)


@dataclass
class Subscript(Node):
    """Subscript node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_subscript(self)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML tag, e.g. ``<span class="x">``."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_inline(self)


@dataclass
class Entity(Node):
    """Character entity reference such as ``&copy;``, written verbatim."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_entity(self)


@dataclass
class Abbreviation(Node):
    """Abbreviation with an optional expansion shown as its title."""

    content: list[Node] = field(default_factory=list)
    title: str = ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_abbreviation(self)


@dataclass
class FootnoteReference(Node):
    """Reference to a footnote definition by identifier."""

    identifier: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_footnote_reference(self)


@dataclass
class MathInline(Node):
    """Inline math node; ``content`` is TeX source."""

    content: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_math_inline(self)


@dataclass
class ExampleReference(Node):
    """Reference to a numbered example, rendered as ``(index)``."""

    index: int

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_example_reference(self)
