#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/escape.py
"""HTML escaping primitives.

Functions
---------
attr_escape : Escape text for use in element content or attribute values
find_entity_ranges : Locate named entity references in text
entity_escape_with_skip : Escape text while leaving selected ranges untouched

"""

from __future__ import annotations

from typing import Iterable

from markhtml.constants import HTML_ENTITY_PATTERN

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
    }
)


def attr_escape(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"``.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text, safe inside element content and double-quoted attributes

    Examples
    --------
        >>> attr_escape('<a href="x">&</a>')
        '&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;'

    """
    if not text:
        return text
    return text.translate(_ESCAPE_TABLE)


def find_entity_ranges(text: str) -> list[tuple[int, int]]:
    """Return the ``(start, end)`` spans of named entity references such as ``&amp;``."""
    return [match.span() for match in HTML_ENTITY_PATTERN.finditer(text)]


def entity_escape_with_skip(text: str, skip_ranges: Iterable[tuple[int, int]]) -> str:
    """Escape text except inside the given ranges.

    Used for autolinks so that entity references already present in the
    link survive without being double escaped.

    Parameters
    ----------
    text : str
        Text to escape
    skip_ranges : iterable of (int, int)
        Sorted, non-overlapping ``(start, end)`` spans copied verbatim

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> text = "a&amp;b<c"
        >>> entity_escape_with_skip(text, find_entity_ranges(text))
        'a&amp;b&lt;c'

    """
    parts: list[str] = []
    end = 0
    for start, stop in skip_ranges:
        parts.append(attr_escape(text[end:start]))
        parts.append(text[start:stop])
        end = stop
    parts.append(attr_escape(text[end:]))
    return "".join(parts)


__all__ = ["attr_escape", "entity_escape_with_skip", "find_entity_ranges"]
