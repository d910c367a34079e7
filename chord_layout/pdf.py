"""PDF output for laid out chord sheets.

This module draws the pages of a finished ``Layout`` with reportlab. For
every page the decorations run again with a live renderer, then the page's
text runs are drawn.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from reportlab.pdfgen import canvas as pdf_canvas

from chord_layout.fonts import POINTS_PER_INCH, FontSet

if TYPE_CHECKING:
    from pathlib import Path

    from chord_layout.layout.session import Layout
    from chord_layout.models import TextRun

logger = logging.getLogger(__name__)


class PageRenderer:
    """Draws text runs onto a reportlab canvas.

    Text run coordinates are inches from the top-left corner with y
    pointing down, and ``y`` marks the top of the line. Reportlab draws
    from the baseline with y pointing up, so each run is moved down by the
    font ascent.

    Parameters
    ----------
    canvas : reportlab.pdfgen.canvas.Canvas
        The canvas for the current page.
    fonts : FontSet
        Fonts for each logical weight.
    page_height : float
        Page height in inches.
    """

    def __init__(self, canvas: pdf_canvas.Canvas, fonts: FontSet, page_height: float) -> None:
        self.canvas = canvas
        self.fonts = fonts
        self.page_height = page_height

    def anchor_x(self, run: TextRun) -> float:
        """Left edge of a run in inches, after applying its alignment."""
        if run.align == "left":
            return run.x
        width = self.fonts.measure(run.text, run.weight, run.size)
        if run.align == "center":
            return run.x - width / 2
        return run.x - width

    def baseline_y(self, run: TextRun) -> float:
        """Baseline of a run in PDF points from the bottom of the page."""
        top = (self.page_height - run.y) * POINTS_PER_INCH
        return top - self.fonts.ascent(run.weight, run.size) * POINTS_PER_INCH

    def draw_text(self, run: TextRun) -> None:
        self.canvas.setFont(self.fonts.font_name(run.weight), run.size)
        self.canvas.drawString(self.anchor_x(run) * POINTS_PER_INCH, self.baseline_y(run), run.text)


def render_pdf(layout: Layout, output: str | Path | IO[bytes], fonts: FontSet | None = None) -> int:
    """Write the pages of a layout to a PDF.

    ``layout.layout()`` is called first if it has not produced pages yet.

    Parameters
    ----------
    layout : Layout
        The session to render.
    output : str | Path | IO[bytes]
        Destination file name or binary stream.
    fonts : FontSet | None
        Fonts to draw with; defaults to the session's measurer when it is
        a ``FontSet``, otherwise to the configured font files.

    Returns
    -------
    int
        Number of pages written.
    """
    if not layout.pages:
        layout.layout()

    config = layout.config
    if fonts is None:
        fonts = layout.measurer if isinstance(layout.measurer, FontSet) else FontSet(config.font_files)

    page_size = (config.page_width * POINTS_PER_INCH, config.page_height * POINTS_PER_INCH)
    target = output if hasattr(output, "write") else str(output)
    canvas = pdf_canvas.Canvas(target, pagesize=page_size)
    renderer = PageRenderer(canvas, fonts, config.page_height)

    for page in layout.pages:
        logger.debug("Page %d, %d text items", page.index, len(page))
        margins = config.margin
        for decoration in layout.decorations:
            margins = decoration.draw_page(page.index, margins, renderer).at_least(config.margin)
        for run in page:
            renderer.draw_text(run)
        canvas.showPage()

    canvas.save()
    logger.info("Saved PDF, %d page(s)", len(layout.pages))
    return len(layout.pages)
