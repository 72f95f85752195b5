"""HTML-related utility helpers."""

from __future__ import annotations

import re


def is_html_tag(tag: str, name: str) -> bool:
    """Check whether a raw HTML tag is an opening or closing ``name`` tag.

    Parameters
    ----------
    tag : str
        Raw tag text, e.g. ``<a href="x">`` or ``</STYLE>``
    name : str
        Tag name to look for

    Returns
    -------
    bool
        True if the tag's name equals ``name`` (case-insensitive)

    """
    pattern = rf"^<\s*/?\s*{re.escape(name)}(?:[\s/>]|$)"
    return re.match(pattern, tag, flags=re.IGNORECASE) is not None


__all__ = ["is_html_tag"]
