#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/utils/text.py
"""Text processing utilities.

Functions
---------
slugify : Convert a footnote name to an anchor-safe slug

Examples
--------
    >>> from markhtml.utils.text import slugify
    >>> slugify("My Note!")
    'My-Note'

"""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")


def slugify(text: str, separator: str = "-") -> str:
    """Create an anchor-safe slug from text.

    ASCII letters and digits are kept as-is (case is preserved), every run of
    other characters collapses to a single separator, and leading and trailing
    separators are stripped.

    Parameters
    ----------
    text : str
        Text to slugify (e.g., a footnote name)
    separator : str, default = "-"
        The separator between words in the slug

    Returns
    -------
    str
        Slug containing only ASCII alphanumerics and separators

    Examples
    --------
        >>> slugify("  a  b  ")
        'a-b'
        >>> slugify("fn_1.2")
        'fn-1-2'

    """
    return _NON_ALNUM.sub(separator, text).strip(separator)
