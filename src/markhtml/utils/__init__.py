#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for escaping, link checks and slugs."""

from markhtml.utils.escape import attr_escape, entity_escape_with_skip, find_entity_ranges
from markhtml.utils.html_utils import is_html_tag
from markhtml.utils.security import is_relative_link, is_safe_link
from markhtml.utils.text import slugify

__all__ = [
    "attr_escape",
    "entity_escape_with_skip",
    "find_entity_ranges",
    "is_html_tag",
    "is_relative_link",
    "is_safe_link",
    "slugify",
]
