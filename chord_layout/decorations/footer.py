"""Default footer: a justified copyright notice at the bottom of every page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_layout.decorations.justify import (
    Piece,
    TextLine,
    measure_pieces,
    place_pieces,
    split_pieces,
    wrap_pieces,
)
from chord_layout.models import Margins, TextRun

if TYPE_CHECKING:
    from chord_layout.decorations.base import Renderer
    from chord_layout.layout.session import Layout

COPYRIGHT_FONT_SIZE = 9
FOOTER_LINE_HEIGHT = 1.2


class DefaultFooter:
    """Sets ``metadata["copyrightText"]`` in small type above the bottom margin.

    The footer reserves its own height plus a spacing line of body-size type
    at a fixed 1.2 line height. Pages are left untouched when there is no
    copyright text.
    """

    def __init__(self, layout: Layout) -> None:
        self.layout = layout
        self.copyright_text = ""
        self.pieces: list[Piece] = []

    @property
    def line_advance(self) -> float:
        return COPYRIGHT_FONT_SIZE * FOOTER_LINE_HEIGHT / 72

    def init(self) -> None:
        self.copyright_text = str(self.layout.config.metadata.get("copyrightText") or "")
        self.pieces = measure_pieces(
            split_pieces(self.copyright_text),
            lambda text: self.layout.measure_text_width(text, "regular", COPYRIGHT_FONT_SIZE),
        )

    def lines(self, margins: Margins) -> list[TextLine]:
        """Wrap the copyright text to the width between the margins."""
        return wrap_pieces(self.pieces, self.max_width(margins))

    def max_width(self, margins: Margins) -> float:
        return self.layout.config.page_width - margins.right - margins.left

    def draw_page(self, page_index: int, margins: Margins, renderer: Renderer | None = None) -> Margins:
        if not self.copyright_text:
            return margins

        config = self.layout.config
        lines = self.lines(margins)
        margins = margins.grow(bottom=len(lines) * self.line_advance)

        if renderer is not None:
            max_width = self.max_width(margins)
            y = config.page_height - margins.bottom
            for line in lines:
                for text, x in place_pieces(line, margins.left, max_width, COPYRIGHT_FONT_SIZE):
                    renderer.draw_text(TextRun(text, x, y, COPYRIGHT_FONT_SIZE))
                y += self.line_advance

        return margins.grow(bottom=config.font_size * FOOTER_LINE_HEIGHT / 72)
