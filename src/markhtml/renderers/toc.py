#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/renderers/toc.py
"""Incremental table-of-contents builder.

Headings are registered in document order. Each registration adjusts the
open list depth one level at a time toward the heading's level, then appends
one list item linking to the heading. ``finalize`` closes whatever is still
open, so the result is balanced for any sequence of levels.

For levels ``[1, 2]`` the builder produces::

    <ul>
    <li><a href="#toc_0">One</a>
    <ul>
    <li><a href="#toc_1">Two</a></li>
    </ul></li>
    </ul>

"""

from __future__ import annotations

import logging

from markhtml.constants import TOC_ID_PREFIX, TOC_ITEM_CLOSE
from markhtml.exceptions import ValidationError
from markhtml.renderers.state import RenderState

logger = logging.getLogger(__name__)


class TocBuilder:
    """Build nested ``<ul>`` markup from headings.

    The builder reads and writes ``current_level``, ``header_count`` and
    ``toc`` on the shared ``RenderState``; the renderer that owns the state
    uses ``header_count`` to label headings with the same identifiers.

    Parameters
    ----------
    state : RenderState
        State of the render this builder belongs to

    """

    def __init__(self, state: RenderState):
        self.state = state

    def register_heading(self, text: str, level: int, anchor: str = "") -> None:
        """Add a heading to the table of contents.

        Parameters
        ----------
        text : str
            Rendered heading content, used as the link label
        level : int
            Heading level, 1 or greater
        anchor : str, default ""
            Explicit heading identifier. When empty, the generated
            ``toc_<header_count>`` identifier is used and the counter advances.

        Raises
        ------
        ValidationError
            If ``level`` is less than 1.

        """
        if level < 1:
            raise ValidationError(
                f"Heading level must be at least 1, got {level}", parameter_name="level", parameter_value=level
            )

        state = self.state
        toc = state.toc

        while level > state.current_level:
            if toc.endswith(TOC_ITEM_CLOSE):
                # reopen the previous item so the sublist nests inside it
                toc.truncate(len(toc) - len(TOC_ITEM_CLOSE))
            elif state.current_level > 0:
                toc.write("<li>")
            if toc:
                toc.write("\n")
            toc.write("<ul>\n")
            state.current_level += 1

        while level < state.current_level:
            toc.write("</ul>")
            if state.current_level > 1:
                toc.write(TOC_ITEM_CLOSE)
            state.current_level -= 1

        if anchor:
            target = anchor
        else:
            target = f"{TOC_ID_PREFIX}{state.header_count}"
            state.header_count += 1

        toc.write(f'<li><a href="#{target}">')
        toc.write(text)
        toc.write("</a>" + TOC_ITEM_CLOSE)

    def register(self, text: str, level: int) -> None:
        """Add a heading that has no explicit identifier."""
        self.register_heading(text, level)

    def finalize(self) -> None:
        """Close every list and item still open.

        Safe to call more than once and when no heading was registered.
        """
        state = self.state
        while state.current_level > 1:
            state.toc.write("</ul>" + TOC_ITEM_CLOSE)
            state.current_level -= 1

        if state.current_level > 0:
            state.toc.write("</ul>\n")
            state.current_level = 0

        logger.debug("Finalized table of contents (%d characters)", len(state.toc))

    def getvalue(self) -> str:
        """Return the table of contents markup built so far."""
        return self.state.toc.getvalue()
