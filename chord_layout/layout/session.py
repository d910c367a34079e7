"""The layout session.

A ``Layout`` is built from markup and configuration, assembles its
decorations, and turns the markup into pages of positioned text runs when
``layout()`` is called.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from chord_layout.config import LayoutConfig
from chord_layout.decorations import build_decorations
from chord_layout.fonts import FontSet
from chord_layout.layout.dual_track import layout_chord_line
from chord_layout.layout.pagination import PageController
from chord_layout.layout.wrap import layout_text_line
from chord_layout.markup import classify_line, initial_key_state, resolve_tokens, split_line
from chord_layout.models import Page, Token

if TYPE_CHECKING:
    from chord_layout.decorations.base import DecorationFactory
    from chord_layout.fonts import TextMeasurer

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"\r?\n")


class Layout:
    """Lays out chord sheet markup into pages.

    Parameters
    ----------
    markup : str
        The chord sheet text.
    config : LayoutConfig | Mapping[str, Any] | None
        Options, either ready-made or as a mapping of option names.
    measurer : TextMeasurer | None
        Width measurement; defaults to a ``FontSet`` for the configured
        font files.
    decorations : Mapping[str, DecorationFactory] | None
        Additional decoration factories by name.

    Raises
    ------
    LayoutConfigError
        If the options are invalid.
    DecorationNotFoundError
        If the configuration names an unknown decoration.
    FontLoadError
        If a configured font file cannot be loaded.

    Examples
    --------
    >>> session = Layout("[C]Amazing [G]grace", {"transpose": 2})
    >>> pages = session.layout()
    >>> [run.text for run in pages[0]]
    ['D', 'Amazing', 'A', 'grace']
    """

    def __init__(
        self,
        markup: str,
        config: LayoutConfig | Mapping[str, Any] | None = None,
        *,
        measurer: TextMeasurer | None = None,
        decorations: Mapping[str, DecorationFactory] | None = None,
    ) -> None:
        if not isinstance(config, LayoutConfig):
            config = LayoutConfig.from_mapping(config)
        self.config = config
        self.markup = markup
        self.decorations = build_decorations(config.decorations, self, decorations)
        self.measurer: TextMeasurer = measurer if measurer is not None else FontSet(config.font_files)
        self.key_state = initial_key_state(config)
        self.controller = PageController(config, self.decorations)
        self.pages: list[Page] = []

    def measure_text_width(self, text: str, weight: str = "regular", size: float | None = None) -> float:
        """Width of text in inches; ``size`` defaults to the body font size."""
        return self.measurer.measure(text, weight, self.config.font_size if size is None else size)

    def resolve(self, tokens: list[Token]) -> list[Token]:
        """Resolve chord tokens, updating the session key state."""
        resolved, self.key_state = resolve_tokens(tokens, self.key_state, self.config)
        return resolved

    def chords_to_text(self, text: str) -> str:
        """Resolve the chords of a markup line and return it as flat text.

        Examples
        --------
        >>> Layout("", {"transpose": 1}).chords_to_text("Capo [C] or [G]")
        'Capo C# or G#'
        """
        return "".join(token.text for token in self.resolve(split_line(text)))

    def layout(self) -> list[Page]:
        """Lay out the whole markup.

        Running this again starts over from the initial key state and an
        empty page list, so identical sessions give identical pages.

        Returns
        -------
        list[Page]
            The laid out pages; always at least one.
        """
        for decoration in self.decorations:
            decoration.init()

        self.key_state = initial_key_state(self.config)
        self.controller.start()
        for line in LINE_BREAK_RE.split(self.markup):
            self.layout_line(line)
        self.pages = self.controller.finish()

        logger.info("Laid out %d page(s)", len(self.pages))
        return self.pages

    def layout_line(self, line: str) -> None:
        """Lay out one markup line at the cursor.

        Parameters
        ----------
        line : str
            A single line of markup, without its newline.
        """
        controller = self.controller
        controller.ensure_room()

        classified = classify_line(line)
        kind = classified.kind

        if kind == "blank":
            controller.advance()
            return
        if kind == "indent":
            controller.indent = classified.indent
            return
        if kind == "comment":
            return
        if kind == "pagebreak":
            if not controller.at_top:
                controller.new_page()
            return

        tokens = self.resolve(list(classified.tokens))

        if kind == "title":
            layout_text_line(controller, self.measurer, tokens, weight="bold", centered=True)
        elif kind == "instruct":
            layout_text_line(controller, self.measurer, tokens, weight="bold")
        elif kind == "lyric":
            layout_text_line(controller, self.measurer, tokens)
        else:
            layout_chord_line(controller, self.measurer, tokens)

        controller.y += controller.line_height
