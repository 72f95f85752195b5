#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/ast/visitors.py
"""Visitor pattern base class for tree traversal.

Visitors separate algorithms (rendering, validation) from the node
structure. Each node's ``accept`` calls the matching ``visit_*`` method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for tree visitors.

    Subclasses implement one ``visit_*`` method per node type.
    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        pass

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        pass

    @abstractmethod
    def visit_math_block(self, node: MathBlock) -> Any:
        pass

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        pass

    @abstractmethod
    def visit_strong_emphasis(self, node: StrongEmphasis) -> Any:
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        pass

    @abstractmethod
    def visit_auto_link(self, node: AutoLink) -> Any:
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        pass

    @abstractmethod
    def visit_entity(self, node: Entity) -> Any:
        pass

    @abstractmethod
    def visit_abbreviation(self, node: Abbreviation) -> Any:
        pass

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        pass

    @abstractmethod
    def visit_math_inline(self, node: MathInline) -> Any:
        pass

    @abstractmethod
    def visit_example_reference(self, node: ExampleReference) -> Any:
        pass
