#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for markhtml.

This module centralizes the hardcoded values used across the HTML backend.

Constants are organized by category:
1. Type Definitions - Literal types and flag sets
2. Markup Fragments - Fixed strings written by the renderer
3. Link Safety - Prefixes accepted by the safe-link filter
4. Renderer Defaults - Default values for renderer options
"""

from __future__ import annotations

import re
from enum import IntFlag
from typing import Literal

VERSION = "1.0.0"

# =============================================================================
# Type Definitions
# =============================================================================

LinkType = Literal["normal", "email"]
TableAlignment = Literal["left", "right", "center"]


class ListFlags(IntFlag):
    """Flags describing a list or list item, supplied by the document walker."""

    NONE = 0
    ORDERED = 1
    ALPHA_LOWER = 2
    ALPHA_UPPER = 4
    ROMAN_LOWER = 8
    ROMAN_UPPER = 16
    CONTAINS_BLOCK = 32
    BEGINNING_OF_LIST = 64


# =============================================================================
# Markup Fragments
# =============================================================================

HTML_CLOSE = ">"
XHTML_CLOSE = " />"

XHTML_DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">\n'
)
HTML_DOCTYPE = "<!DOCTYPE html>\n"

TOC_ID_PREFIX = "toc_"
TOC_ITEM_CLOSE = "</li>\n"

ORDERED_LIST_TYPES: tuple[tuple[ListFlags, str], ...] = (
    (ListFlags.ALPHA_LOWER, "a"),
    (ListFlags.ALPHA_UPPER, "A"),
    (ListFlags.ROMAN_LOWER, "i"),
    (ListFlags.ROMAN_UPPER, "I"),
)

# =============================================================================
# Link Safety
# =============================================================================

SAFE_LINK_PATHS = ("/", "./", "../")
SAFE_LINK_SCHEMES = ("http://", "https://", "ftp://", "mailto://")
MAILTO_PREFIXES = ("mailto://", "mailto:")

URL_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
HTML_ENTITY_PATTERN = re.compile(r"&[a-z]{2,5};")

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_CREATOR = "markhtml"
DEFAULT_TITLE = ""
DEFAULT_CSS = ""
DEFAULT_FOOTNOTE_ANCHOR_PREFIX = ""
DEFAULT_FOOTNOTE_RETURN_LINK_CONTENTS = "<sup>[return]</sup>"
DEFAULT_ABSOLUTE_PREFIX = ""
