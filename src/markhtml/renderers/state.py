#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/state.py
"""Per-render mutable state for the HTML backend.

This module defines the output buffer that renderer operations write into,
the pending inline attribute set, and the ``RenderState`` record that holds
the table-of-contents data and counters for a single document render.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO

from markhtml.exceptions import RenderingError
from markhtml.utils.escape import attr_escape


class OutputBuffer:
    """Append-only markup buffer that supports truncation to a prior length.

    Block operations record ``len(out)`` before writing speculatively and call
    ``truncate`` with that value to discard the write when their content turns
    out to be empty.

    Examples
    --------
        >>> out = OutputBuffer()
        >>> out.write("<p>")
        >>> marker = len(out)
        >>> out.write("text")
        >>> out.truncate(marker)
        >>> out.getvalue()
        '<p>'

    """

    def __init__(self, initial: str = "") -> None:
        self._buffer = StringIO()
        self._length = 0
        if initial:
            self.write(initial)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __repr__(self) -> str:
        return f"OutputBuffer({self.getvalue()!r})"

    def write(self, text: str) -> None:
        """Append text to the end of the buffer."""
        if text:
            self._length += self._buffer.write(text)

    def truncate(self, length: int) -> None:
        """Discard everything written after ``length``.

        Raises
        ------
        RenderingError
            If ``length`` is negative or beyond the current length.

        """
        if length < 0 or length > self._length:
            raise RenderingError(
                f"Cannot truncate buffer of length {self._length} to {length}",
                rendering_stage="truncate",
            )
        self._buffer.seek(length)
        self._buffer.truncate(length)
        self._length = length

    def slice(self, start: int, end: int | None = None) -> str:
        """Return the text between ``start`` and ``end`` (default: the end of the buffer)."""
        return self.getvalue()[start:end]

    def endswith(self, suffix: str) -> bool:
        """Check whether the buffer currently ends with ``suffix``."""
        if len(suffix) > self._length:
            return False
        self._buffer.seek(self._length - len(suffix))
        tail = self._buffer.read(len(suffix))
        self._buffer.seek(self._length)
        return tail == suffix

    def getvalue(self) -> str:
        """Return the entire buffer contents."""
        return self._buffer.getvalue()

    def clear(self) -> None:
        """Empty the buffer."""
        self.truncate(0)


@dataclass
class InlineAttributes:
    """Attribute set attached to the next inline construct that consumes it.

    Parameters
    ----------
    id : str
        Element id, omitted when empty
    classes : list of str
        CSS classes
    attrs : dict of str to str
        Any other key/value attributes, rendered in insertion order

    Examples
    --------
        >>> str(InlineAttributes(id="eq1", classes=["big"]))
        'id="eq1" class="big" '

    """

    id: str = ""
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.id or self.classes or self.attrs)

    def __str__(self) -> str:
        parts = []
        if self.id:
            parts.append(f'id="{attr_escape(self.id)}" ')
        if self.classes:
            parts.append(f'class="{attr_escape(" ".join(self.classes))}" ')
        for key, value in self.attrs.items():
            parts.append(f'{key}="{attr_escape(value)}" ')
        return "".join(parts)


@dataclass
class RenderState:
    """Mutable state for one document render.

    Attributes
    ----------
    header_count : int
        Next value for generated ``toc_<n>`` heading identifiers. Never reused
        within a render.
    current_level : int
        Nesting depth currently open in the table of contents; 0 when no list
        is open.
    toc : OutputBuffer
        In-progress table of contents markup.
    toc_marker : int or None
        Offset in the document buffer where the finished table of contents is
        spliced in. Recorded once, at document-header time.
    footnote_count : int
        Number of distinct footnotes referenced so far.
    footnote_numbers : dict of str to int
        Visible number of each footnote anchor already referenced.
    inline_attr : InlineAttributes or None
        Pending attribute set for the next consuming inline construct.

    """

    header_count: int = 0
    current_level: int = 0
    toc: OutputBuffer = field(default_factory=OutputBuffer)
    toc_marker: int | None = None
    footnote_count: int = 0
    footnote_numbers: dict[str, int] = field(default_factory=dict)
    inline_attr: InlineAttributes | None = None
