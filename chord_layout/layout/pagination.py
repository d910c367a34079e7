"""Page and cursor management for a layout run.

The controller owns the page list, the vertical cursor and the indent.
Margins are recomputed for every page from the configured baseline plus
whatever the attached decorations reserve.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chord_layout.models import Margins, Page, TextRun

if TYPE_CHECKING:
    from chord_layout.config import LayoutConfig
    from chord_layout.decorations.base import Decoration

logger = logging.getLogger(__name__)


class PageController:
    """Tracks the vertical cursor and opens pages as content fills them.

    Parameters
    ----------
    config : LayoutConfig
        Page geometry and font size.
    decorations : Sequence[Decoration]
        Decorations asked to adjust the margins of each new page.

    Attributes
    ----------
    pages : list[Page]
        Finished pages, plus the open page once ``finish`` is called.
    page : Page | None
        The page currently accepting text.
    y : float
        Vertical cursor in inches from the top of the page.
    indent : float
        Left indent in inches; persists until changed.
    """

    def __init__(self, config: LayoutConfig, decorations: Sequence[Decoration] = ()) -> None:
        self.config = config
        self.decorations = list(decorations)
        self.pages: list[Page] = []
        self.page: Page | None = None
        self.y = 0.0
        self.indent = 0.0

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def margins(self) -> Margins:
        if self.page is None:
            return self.config.margin
        return self.page.margins

    @property
    def line_height(self) -> float:
        return self.config.line_advance

    @property
    def content_bottom(self) -> float:
        return self.config.page_height - self.margins.bottom

    @property
    def start_x(self) -> float:
        """Left edge of body text, including the indent."""
        return self.margins.left + self.indent

    @property
    def max_x(self) -> float:
        """Right edge of the content area."""
        return self.config.page_width - self.margins.right

    @property
    def center_x(self) -> float:
        margins = self.margins
        return (self.config.page_width - margins.right - margins.left) / 2 + margins.left

    @property
    def at_top(self) -> bool:
        return math.isclose(self.y, self.margins.top)

    # ------------------------------------------------------------------
    # Page lifecycle
    # ------------------------------------------------------------------

    def page_margins(self, page_index: int) -> Margins:
        """Compute the margins of a page by running the measure pass.

        Each decoration sees the margins produced by the ones before it
        and may only enlarge them.
        """
        baseline = self.config.margin
        margins = baseline
        for decoration in self.decorations:
            margins = decoration.draw_page(page_index, margins, None).at_least(baseline)
        return margins

    def start(self) -> None:
        """Reset to a single empty page with the cursor at its top."""
        self.pages = []
        self.page = None
        self.indent = 0.0
        self.new_page()

    def new_page(self, offset: float = 0.0) -> None:
        """Close the open page and open the next one.

        Parameters
        ----------
        offset : float
            Distance below the top margin to place the cursor.
        """
        if self.page is not None:
            self.pages.append(self.page)
        index = len(self.pages)
        self.page = Page(index=index, margins=self.page_margins(index))
        self.y = self.page.margins.top + offset
        logger.debug("Opened page %d with margins %s", index, self.page.margins)

    def finish(self) -> list[Page]:
        """Close the open page and return all pages."""
        if self.page is not None:
            self.pages.append(self.page)
            self.page = None
        return self.pages

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def ensure_room(self, offset: float = 0.0) -> None:
        """Start a new page if one more line would not fit below the cursor."""
        if self.y + self.line_height > self.content_bottom:
            self.new_page(offset)

    def advance(self, lines: int = 1, offset: float = 0.0) -> None:
        """Move the cursor down and break the page if needed.

        Parameters
        ----------
        lines : int
            Number of line heights to move.
        offset : float
            Cursor offset below the top margin if a new page is opened.
        """
        self.y += lines * self.line_height
        self.ensure_room(offset)

    def emit(self, run: TextRun) -> None:
        """Append a text run to the open page."""
        if self.page is None:
            msg = "No page is open"
            raise RuntimeError(msg)
        self.page.add(run)
