"""Test utilities for the markhtml test suite.

This module provides content producers for driving renderer operations
directly and helpers for inspecting rendered HTML.
"""

from bs4 import BeautifulSoup

from markhtml.renderers import OutputBuffer


def write_producer(out: OutputBuffer, text: str):
    """Return a content producer that writes ``text`` and reports whether it wrote anything."""

    def produce() -> bool:
        out.write(text)
        return bool(text)

    return produce


def toc_depths(html: str) -> list[tuple[str, int]]:
    """Return ``(link text, nesting depth)`` for every link inside the first ``<nav>``."""
    soup = BeautifulSoup(html, "html.parser")
    nav = soup.find("nav")
    if nav is None:
        return []
    return [(a.get_text(), len(a.find_parents("ul"))) for a in nav.find_all("a")]
