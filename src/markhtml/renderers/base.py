#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/base.py
"""Base classes and interface for rendering backends.

A rendering backend is driven by a document walker that calls one operation
per document construct, in document order. Every operation receives the
``OutputBuffer`` to write into. Block constructs whose content is produced
lazily receive a ``ContentProducer``: a callable that writes the nested
content into the same buffer and returns whether it produced anything.

Backends satisfy the ``Renderer`` protocol structurally; no inheritance is
required. ``BaseRenderer`` supplies the options handling and the
string/bytes entry points shared by the concrete backends.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

from markhtml.constants import LinkType, ListFlags, TableAlignment
from markhtml.exceptions import InvalidOptionsError
from markhtml.options.base import BaseRendererOptions
from markhtml.renderers.state import InlineAttributes, OutputBuffer

if TYPE_CHECKING:
    from markhtml.ast.nodes import Document

ContentProducer = Callable[[], bool]


@runtime_checkable
class Renderer(Protocol):
    """Capability set every rendering backend implements.

    Block-level operations taking a ``ContentProducer`` must elide the whole
    construct, opening tag included, when the producer returns False.
    """

    # block-level
    def header(self, out: OutputBuffer, text: ContentProducer, level: int, identifier: str = "") -> None: ...

    def paragraph(self, out: OutputBuffer, text: ContentProducer) -> None: ...

    def list(self, out: OutputBuffer, text: ContentProducer, flags: ListFlags, start: int = 0) -> None: ...

    def list_item(self, out: OutputBuffer, text: str, flags: ListFlags) -> None: ...

    def block_code(self, out: OutputBuffer, text: str, lang: str = "") -> None: ...

    def block_quote(self, out: OutputBuffer, text: str) -> None: ...

    def aside(self, out: OutputBuffer, text: str) -> None: ...

    def note(self, out: OutputBuffer, text: str) -> None: ...

    def block_html(self, out: OutputBuffer, text: str) -> None: ...

    def comment_html(self, out: OutputBuffer, text: str) -> None: ...

    def hrule(self, out: OutputBuffer) -> None: ...

    def table(self, out: OutputBuffer, header: str, body: str, footer: str = "", caption: str = "") -> None: ...

    def table_row(self, out: OutputBuffer, text: str) -> None: ...

    def table_header_cell(self, out: OutputBuffer, text: str, align: TableAlignment | None = None) -> None: ...

    def table_cell(self, out: OutputBuffer, text: str, align: TableAlignment | None = None) -> None: ...

    def footnotes(self, out: OutputBuffer, text: ContentProducer) -> None: ...

    def footnote_item(self, out: OutputBuffer, name: str, text: str, flags: ListFlags) -> None: ...

    def math(self, out: OutputBuffer, text: str, display: bool) -> None: ...

    # inline
    def auto_link(self, out: OutputBuffer, link: str, kind: LinkType) -> None: ...

    def link(self, out: OutputBuffer, link: str, title: str, content: str) -> None: ...

    def image(self, out: OutputBuffer, link: str, title: str, alt: str) -> None: ...

    def code_span(self, out: OutputBuffer, text: str) -> None: ...

    def emphasis(self, out: OutputBuffer, text: str) -> None: ...

    def double_emphasis(self, out: OutputBuffer, text: str) -> None: ...

    def triple_emphasis(self, out: OutputBuffer, text: str) -> None: ...

    def strike_through(self, out: OutputBuffer, text: str) -> None: ...

    def subscript(self, out: OutputBuffer, text: str) -> None: ...

    def superscript(self, out: OutputBuffer, text: str) -> None: ...

    def line_break(self, out: OutputBuffer) -> None: ...

    def abbreviation(self, out: OutputBuffer, abbr: str, title: str) -> None: ...

    def raw_html_tag(self, out: OutputBuffer, tag: str) -> None: ...

    def footnote_ref(self, out: OutputBuffer, ref: str, number: int | None = None) -> None: ...

    def example(self, out: OutputBuffer, index: int) -> None: ...

    def entity(self, out: OutputBuffer, entity: str) -> None: ...

    def normal_text(self, out: OutputBuffer, text: str) -> None: ...

    # document-level
    def document_header(self, out: OutputBuffer, first: bool) -> None: ...

    def document_footer(self, out: OutputBuffer, first: bool) -> None: ...

    def set_inline_attr(self, attr: InlineAttributes | None) -> None: ...

    def inline_attr(self) -> InlineAttributes: ...


class BaseRenderer(ABC):
    """Abstract base class for rendering backends.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Backend-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render a document tree to a string.

        Parameters
        ----------
        doc : Document
            Document node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render a document tree to UTF-8 encoded bytes."""
        return self.render_to_string(doc).encode("utf-8")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
