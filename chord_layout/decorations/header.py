"""Default header: a running title with page numbers on continuation pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_layout.models import Margins, TextRun

if TYPE_CHECKING:
    from chord_layout.decorations.base import Renderer
    from chord_layout.layout.session import Layout

HEADER_FONT_SIZE = 10
HEADER_LINE_HEIGHT = 1.2


class DefaultHeader:
    """Draws ``metadata["title"]`` on the left and "Page N" on the right.

    The first page carries the title in its body, so the header only
    appears from the second page on. It reserves one header line plus one
    body line of spacing.
    """

    def __init__(self, layout: Layout) -> None:
        self.layout = layout
        self.title = ""

    def init(self) -> None:
        self.title = str(self.layout.config.metadata.get("title") or "")

    def draw_page(self, page_index: int, margins: Margins, renderer: Renderer | None = None) -> Margins:
        if page_index == 0 or not self.title:
            return margins

        config = self.layout.config
        if renderer is not None:
            y = margins.top
            right_x = config.page_width - margins.right
            renderer.draw_text(TextRun(self.title, margins.left, y, HEADER_FONT_SIZE))
            renderer.draw_text(
                TextRun(f"Page {page_index + 1}", right_x, y, HEADER_FONT_SIZE, "regular", "right")
            )

        header_height = HEADER_FONT_SIZE * HEADER_LINE_HEIGHT / 72
        return margins.grow(top=header_height + config.line_advance)
