#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer configuration options."""

from markhtml.options.base import BaseRendererOptions, CloneFrozenMixin
from markhtml.options.html import HtmlRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
]
