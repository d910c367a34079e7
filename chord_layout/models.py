"""Data models for chord sheet layout.

This module defines the structures that flow through the layout engine:
markup tokens, resolved chord symbols, the tracked key state, and the
positioned text runs grouped into pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal

Weight = Literal["regular", "bold"]
Align = Literal["left", "center", "right"]


@dataclass(frozen=True)
class ChordSymbol:
    """A chord annotation split into root and pass-through suffix.

    Parameters
    ----------
    root : int | None
        Pitch class of the first chord root, or None if the text has no
        recognizable root.
    suffix : str
        Everything after the first root (e.g., "m7", "sus4/B"), untouched
        by transposition.
    escaped : bool
        True if the annotation was written with a leading "!".

    Examples
    --------
    >>> ChordSymbol(root=9, suffix="m7").root
    9
    """

    root: int | None
    suffix: str = ""
    escaped: bool = False


@dataclass(frozen=True)
class Token:
    """One piece of a markup line.

    Parameters
    ----------
    text : str
        The visible text. A bare space is a single-space token; a chord
        token's text excludes the bracket delimiters.
    is_chord : bool
        True for bracket-delimited tokens.
    original_text : str | None
        Text before chord resolution, kept for diagnostics.
    chord : ChordSymbol | None
        Parsed chord information once the token has been resolved.

    Examples
    --------
    >>> Token("Amazing").is_space
    False
    >>> Token(" ").is_space
    True
    """

    text: str
    is_chord: bool = False
    original_text: str | None = None
    chord: ChordSymbol | None = None

    @property
    def is_space(self) -> bool:
        """Whether this token is a word boundary."""
        return not self.is_chord and self.text == " "


@dataclass(frozen=True)
class KeyState:
    """The tracked musical key of a layout run.

    Parameters
    ----------
    current_key : int
        Pitch class of the current key.
    flats : bool
        Whether black keys are currently spelled with flats.
    """

    current_key: int = 0
    flats: bool = False


@dataclass(frozen=True)
class TextRun:
    """A render-ready piece of text in page-local inch coordinates.

    The origin is the top-left corner of the page with y growing downward.
    For centered and right-aligned runs, ``x`` is the anchor point.
    """

    text: str
    x: float
    y: float
    size: float
    weight: Weight = "regular"
    align: Align = "left"


@dataclass(frozen=True)
class Margins:
    """Four-sided page margins in inches.

    Examples
    --------
    >>> Margins.uniform(0.5).grow(bottom=0.25).bottom
    0.75
    """

    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def uniform(cls, value: float) -> Margins:
        return cls(value, value, value, value)

    @classmethod
    def from_sequence(cls, values: tuple[float, float, float, float]) -> Margins:
        """Build margins from a (top, right, bottom, left) sequence."""
        top, right, bottom, left = values
        return cls(top, right, bottom, left)

    def grow(
        self,
        *,
        top: float = 0.0,
        right: float = 0.0,
        bottom: float = 0.0,
        left: float = 0.0,
    ) -> Margins:
        """Return new margins enlarged by the given amounts."""
        return replace(
            self,
            top=self.top + top,
            right=self.right + right,
            bottom=self.bottom + bottom,
            left=self.left + left,
        )

    def at_least(self, minimum: Margins) -> Margins:
        """Return margins no smaller than ``minimum`` on any side."""
        return Margins(
            top=max(self.top, minimum.top),
            right=max(self.right, minimum.right),
            bottom=max(self.bottom, minimum.bottom),
            left=max(self.left, minimum.left),
        )


@dataclass
class Page:
    """An append-only list of text runs for one output page.

    Parameters
    ----------
    index : int
        Zero-based page number.
    margins : Margins
        The margins in effect for this page after decorations ran.
    runs : list[TextRun]
        Text runs in the order they were laid out.
    """

    index: int
    margins: Margins
    runs: list[TextRun] = field(default_factory=list)

    def add(self, run: TextRun) -> None:
        self.runs.append(run)

    def __iter__(self):
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    @property
    def texts(self) -> list[str]:
        """The text of each run, in order."""
        return [run.text for run in self.runs]
