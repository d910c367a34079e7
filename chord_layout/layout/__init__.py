"""Page layout for chord sheets.

This module turns classified markup lines into pages of positioned text
runs: word-wrapped text lines, chord/lyric row pairs, and the page
controller that decides where pages break.
"""

from chord_layout.layout.dual_track import ChordLineLayout, layout_chord_line
from chord_layout.layout.pagination import PageController
from chord_layout.layout.session import Layout
from chord_layout.layout.wrap import layout_text_line, wrap_units

__all__ = [
    "ChordLineLayout",
    "Layout",
    "PageController",
    "layout_chord_line",
    "layout_text_line",
    "wrap_units",
]
