"""The decoration capability.

A decoration draws page furniture such as headers and footers. It is
called twice for every page: once while laying out, with no renderer, to
reserve room by growing the margins, and once while rendering, with a live
renderer, to draw. Both calls must return the same margins.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chord_layout.layout.session import Layout
    from chord_layout.models import Margins, TextRun


class Renderer(Protocol):
    """Drawing surface handed to decorations during the render pass."""

    def draw_text(self, run: TextRun) -> None:
        """Draw a positioned text run."""
        ...


class Decoration(Protocol):
    """Page furniture attached to a layout session."""

    def init(self) -> None:
        """Prepare for a layout run; may read the session configuration."""
        ...

    def draw_page(self, page_index: int, margins: Margins, renderer: Renderer | None = None) -> Margins:
        """Adjust the margins of a page and draw onto it if a renderer is given.

        Parameters
        ----------
        page_index : int
            Zero-based page number.
        margins : Margins
            Margins reserved so far for this page.
        renderer : Renderer | None
            None while measuring, a live renderer while drawing.

        Returns
        -------
        Margins
            The margins including the space this decoration reserves.
        """
        ...


DecorationFactory = Callable[["Layout"], Decoration]
