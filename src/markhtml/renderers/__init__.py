#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/markhtml/renderers/__init__.py
"""Rendering backends.

A backend implements the ``Renderer`` protocol: one operation per document
construct, called in document order by a walker. ``HtmlRenderer`` is the
HTML backend; it also owns the table-of-contents builder and the per-render
state.

Examples
--------
Render a tree:

    >>> from markhtml.ast import Document, Heading, Text
    >>> from markhtml.options import HtmlRendererOptions
    >>> from markhtml.renderers import HtmlRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> renderer = HtmlRenderer(HtmlRendererOptions(include_toc=True))
    >>> html = renderer.render_to_string(doc)

"""

from markhtml.renderers.base import BaseRenderer, ContentProducer, Renderer
from markhtml.renderers.html import HtmlRenderer
from markhtml.renderers.state import InlineAttributes, OutputBuffer, RenderState
from markhtml.renderers.toc import TocBuilder

__all__ = [
    "BaseRenderer",
    "ContentProducer",
    "HtmlRenderer",
    "InlineAttributes",
    "OutputBuffer",
    "RenderState",
    "Renderer",
    "TocBuilder",
]
