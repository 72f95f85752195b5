#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

Every behavior of the HTML backend that can be toggled is a named field
here. All combinations of the boolean fields are valid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from markhtml.constants import (
    DEFAULT_ABSOLUTE_PREFIX,
    DEFAULT_CSS,
    DEFAULT_FOOTNOTE_ANCHOR_PREFIX,
    DEFAULT_FOOTNOTE_RETURN_LINK_CONTENTS,
    DEFAULT_TITLE,
    HTML_CLOSE,
    XHTML_CLOSE,
)
from markhtml.options.base import BaseRendererOptions

_ATTRIBUTE_UNSAFE = re.compile(r"[\s\"'<>&]")


# src/markhtml/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for the HTML rendering backend.

    Parameters
    ----------
    skip_html : bool, default False
        Drop raw HTML blocks, comments and inline tags.
    skip_style : bool, default False
        Drop inline ``<style>`` tags.
    skip_images : bool, default False
        Drop images, including raw ``<img>`` tags.
    skip_links : bool, default False
        Render every hyperlink as inert monospace text.
    safe_links_only : bool, default False
        Render links whose target fails the safe-link check as inert text.
    nofollow_links : bool, default False
        Add ``rel="nofollow"`` to links that are not relative.
    href_target_blank : bool, default False
        Add ``target="_blank"`` to links that are not relative.
    include_toc : bool, default False
        Build a table of contents from headings and splice it in after the
        document header.
    omit_contents : bool, default False
        With ``include_toc``, emit only the table of contents.
    footnote_return_links : bool, default False
        Append a link from each footnote back to its reference.
    complete_page : bool, default False
        Wrap the output in a full document with doctype, head and body.
    use_xhtml : bool, default False
        Close singleton tags XHTML style (``<br />``).
    title : str, default ""
        Document title used with ``complete_page``.
    css : str, default ""
        Stylesheet URL linked from the head with ``complete_page``.
    footnote_anchor_prefix : str, default ""
        Prefix inserted into footnote anchor ids.
    footnote_return_link_contents : str, default "<sup>[return]</sup>"
        Markup shown inside footnote return links.
    absolute_prefix : str, default ""
        Prefix prepended to relative link and image targets.

    """

    skip_html: bool = field(default=False, metadata={"help": "Drop raw HTML blocks and tags", "importance": "core"})
    skip_style: bool = field(default=False, metadata={"help": "Drop inline <style> tags", "importance": "advanced"})
    skip_images: bool = field(default=False, metadata={"help": "Drop images", "importance": "core"})
    skip_links: bool = field(
        default=False, metadata={"help": "Render links as inert text instead of hyperlinks", "importance": "core"}
    )
    safe_links_only: bool = field(
        default=False,
        metadata={"help": "Render links with unsafe targets as inert text", "importance": "security"},
    )
    nofollow_links: bool = field(
        default=False, metadata={"help": "Add rel=nofollow to non-relative links", "importance": "advanced"}
    )
    href_target_blank: bool = field(
        default=False, metadata={"help": "Add target=_blank to non-relative links", "importance": "advanced"}
    )
    include_toc: bool = field(
        default=False, metadata={"help": "Generate a table of contents from headings", "importance": "core"}
    )
    omit_contents: bool = field(
        default=False,
        metadata={"help": "Only emit the table of contents (requires include_toc)", "importance": "advanced"},
    )
    footnote_return_links: bool = field(
        default=False, metadata={"help": "Add return links to footnotes", "importance": "advanced"}
    )
    complete_page: bool = field(
        default=False, metadata={"help": "Generate a complete HTML page with head and body", "importance": "core"}
    )
    use_xhtml: bool = field(default=False, metadata={"help": "Use XHTML-style singleton tags", "importance": "core"})
    title: str = field(default=DEFAULT_TITLE, metadata={"help": "Document title for complete pages"})
    css: str = field(default=DEFAULT_CSS, metadata={"help": "Stylesheet URL for complete pages"})
    footnote_anchor_prefix: str = field(
        default=DEFAULT_FOOTNOTE_ANCHOR_PREFIX, metadata={"help": "Prefix for footnote anchor ids"}
    )
    footnote_return_link_contents: str = field(
        default=DEFAULT_FOOTNOTE_RETURN_LINK_CONTENTS, metadata={"help": "Markup inside footnote return links"}
    )
    absolute_prefix: str = field(
        default=DEFAULT_ABSOLUTE_PREFIX, metadata={"help": "Prefix prepended to relative link targets"}
    )

    def __post_init__(self) -> None:
        """Validate string parameters.

        Raises
        ------
        ValueError
            If a string parameter cannot be written safely into an attribute.

        """
        super().__post_init__()

        # Written verbatim into id and href attributes
        if _ATTRIBUTE_UNSAFE.search(self.footnote_anchor_prefix):
            raise ValueError(
                f"footnote_anchor_prefix must not contain whitespace, quotes, '<', '>' or '&', "
                f"got {self.footnote_anchor_prefix!r}"
            )

        if any(ch.isspace() for ch in self.absolute_prefix):
            raise ValueError(f"absolute_prefix must not contain whitespace, got {self.absolute_prefix!r}")

    @property
    def close_tag(self) -> str:
        """Return the string that ends singleton tags."""
        return XHTML_CLOSE if self.use_xhtml else HTML_CLOSE
