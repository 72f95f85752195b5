#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document tree nodes and the walker that feeds them to a renderer."""

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
    Heading,
    HTMLBlock,
    HTMLInline,
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
from markhtml.ast.walker import DocumentWalker

__all__ = [
    "Abbreviation",
    "AutoLink",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Comment",
    "Document",
    "DocumentWalker",
    "Emphasis",
    "Entity",
    "ExampleReference",
    "FootnoteDefinition",
    "FootnoteReference",
    "HTMLBlock",
    "HTMLInline",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "MathBlock",
    "MathInline",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "StrongEmphasis",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
]
