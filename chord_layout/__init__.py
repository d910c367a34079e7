"""Chord sheet layout engine.

This library turns plain-text chord sheets, lyrics with bracketed chords,
into pages of positioned text runs ready for rendering, transposing the
chords on the way.

Examples
--------
>>> from chord_layout import Layout

>>> session = Layout("[title]Amazing Grace\\n[G]Amazing [C]grace", {"capo": 2})
>>> pages = session.layout()
>>> [run.text for run in pages[0]]
['Amazing Grace', 'F', 'Amazing', 'A#', 'grace']

>>> from chord_layout import transpose_note
>>> transpose_note("Bb", 2, flats=True)
'C'
"""

from chord_layout.config import AutoFlats, LayoutConfig
from chord_layout.decorations import DEFAULT_DECORATIONS, build_decorations
from chord_layout.errors import (
    DecorationNotFoundError,
    FontLoadError,
    LayoutConfigError,
    LayoutError,
)
from chord_layout.fonts import FontSet
from chord_layout.layout import Layout
from chord_layout.markup import resolve_chord, split_line
from chord_layout.models import ChordSymbol, KeyState, Margins, Page, TextRun, Token
from chord_layout.pitch_class import (
    chord_to_number,
    note_to_number,
    number_to_chord,
    transpose_note,
)

__all__ = [
    "DEFAULT_DECORATIONS",
    "AutoFlats",
    "ChordSymbol",
    "DecorationNotFoundError",
    "FontLoadError",
    "FontSet",
    "KeyState",
    "Layout",
    "LayoutConfig",
    "LayoutConfigError",
    "LayoutError",
    "Margins",
    "Page",
    "TextRun",
    "Token",
    "build_decorations",
    "chord_to_number",
    "note_to_number",
    "number_to_chord",
    "resolve_chord",
    "split_line",
    "transpose_note",
]
