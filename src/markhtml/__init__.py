#  Copyright (c) 2025 Tom Villani, Ph.D.
"""markhtml - HTML rendering backend for document walkers.

A document walker calls the renderer once per construct, in document order.
The HTML renderer writes templated markup into an output buffer, elides
blocks whose content turns out empty, builds a table of contents from the
headings it sees, and degrades unsafe links to inert text.

Examples
--------
    >>> from markhtml import HtmlRenderer, HtmlRendererOptions
    >>> from markhtml.ast import Document, Heading, Text
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Intro")])])
    >>> HtmlRenderer(HtmlRendererOptions(include_toc=True)).render_to_string(doc)
    '<nav>\\n<ul>\\n<li><a href="#toc_0">Intro</a></li>\\n</ul>\\n</nav>\\n\\n<h1 id="toc_0">Intro</h1>\\n'

"""

from markhtml.constants import VERSION
from markhtml.exceptions import InvalidOptionsError, MarkHtmlError, RenderingError, ValidationError
from markhtml.options import BaseRendererOptions, HtmlRendererOptions
from markhtml.renderers import BaseRenderer, HtmlRenderer, OutputBuffer, Renderer, TocBuilder

__version__ = VERSION

__all__ = [
    "BaseRenderer",
    "BaseRendererOptions",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "MarkHtmlError",
    "OutputBuffer",
    "Renderer",
    "RenderingError",
    "TocBuilder",
    "ValidationError",
    "__version__",
]
