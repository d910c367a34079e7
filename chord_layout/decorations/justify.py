"""Wrapping and justification for small blocks of free text.

Used by the footer to set copyright notices: text is broken into
measurable pieces, packed greedily into lines, and every line except the
last is stretched to the full width unless that would open up the
inter-word gaps too far.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

# Largest per-space stretch, as a fraction of the font size in points
MAX_STRETCH_RATIO = 0.02

BREAK_AFTER = frozenset("-/ \n")
SPACE = " "
NEWLINE = "\n"


@dataclass(frozen=True)
class Piece:
    """A measured fragment: a word, a single space or a newline."""

    text: str
    width: float


@dataclass
class TextLine:
    """A wrapped line of pieces.

    Parameters
    ----------
    pieces : list[Piece]
        Pieces in order.
    width : float
        Natural width of the pieces.
    justify : bool
        Whether the line should be stretched to the full width.
    """

    pieces: list[Piece] = field(default_factory=list)
    width: float = 0.0
    justify: bool = True

    def add(self, piece: Piece) -> None:
        self.pieces.append(piece)
        self.width += piece.width

    @property
    def spaces(self) -> int:
        return sum(1 for piece in self.pieces if piece.text == SPACE)

    def trim(self) -> None:
        """Drop one leading and one trailing space piece."""
        if self.pieces and self.pieces[0].text == SPACE:
            self.width -= self.pieces.pop(0).width
        if self.pieces and self.pieces[-1].text == SPACE:
            self.width -= self.pieces.pop().width


def split_pieces(text: str) -> list[str]:
    """Break text into words, single spaces and newlines.

    Hyphens and slashes end a piece, so "well-known" can wrap after the
    hyphen; runs of them stay together.

    Examples
    --------
    >>> split_pieces("Public domain")
    ['Public', ' ', 'domain']
    >>> split_pieces("well-known a/b")
    ['well-', 'known', ' ', 'a/', 'b']
    >>> split_pieces("a\\nb")
    ['a', '\\n', 'b']
    """
    pieces: list[str] = []
    sofar = ""
    for index, char in enumerate(text):
        next_char = text[index + 1 : index + 2]
        if char in (SPACE, NEWLINE) and sofar:
            pieces.append(sofar)
            sofar = ""
        sofar += char
        if char in BREAK_AFTER and next_char not in ("-", "/"):
            pieces.append(sofar)
            sofar = ""
    if sofar:
        pieces.append(sofar)
    return pieces


def measure_pieces(texts: list[str], measure: Callable[[str], float]) -> list[Piece]:
    """Attach widths to pieces; newlines have no width."""
    space_width = measure(SPACE)
    pieces: list[Piece] = []
    for text in texts:
        if text == SPACE:
            pieces.append(Piece(text, space_width))
        elif text == NEWLINE:
            pieces.append(Piece(text, 0.0))
        else:
            pieces.append(Piece(text, measure(text)))
    return pieces


def wrap_pieces(pieces: list[Piece], max_width: float) -> list[TextLine]:
    """Pack pieces into lines no wider than ``max_width``.

    An explicit newline ends its line without justification, and the last
    line is never justified. Leading and trailing spaces are trimmed from
    every line.

    Parameters
    ----------
    pieces : list[Piece]
        Measured pieces.
    max_width : float
        Available width.

    Returns
    -------
    list[TextLine]
        The wrapped lines.
    """
    lines: list[TextLine] = []
    line = TextLine()
    for piece in pieces:
        if line.width + piece.width > max_width:
            lines.append(line)
            line = TextLine()
        if piece.text == NEWLINE:
            line.justify = False
            lines.append(line)
            line = TextLine()
        else:
            line.add(piece)
    if line.pieces:
        lines.append(line)

    if lines:
        lines[-1].justify = False
    for line in lines:
        line.trim()
    return lines


def space_stretch(line: TextLine, max_width: float, font_size: float) -> float:
    """Extra width to add to each space of a line.

    Returns zero for unjustified lines, lines without spaces, and lines
    whose per-space stretch would exceed ``MAX_STRETCH_RATIO * font_size``.

    Examples
    --------
    >>> line = TextLine([Piece("a", 1.0), Piece(" ", 0.1), Piece("b", 1.0)], 2.1)
    >>> round(space_stretch(line, 2.15, 9), 3)
    0.05
    >>> space_stretch(line, 3.0, 9)
    0.0
    """
    if not line.justify or not line.spaces:
        return 0.0
    stretch = (max_width - line.width) / line.spaces
    if stretch > MAX_STRETCH_RATIO * font_size:
        return 0.0
    return stretch


def place_pieces(line: TextLine, x: float, max_width: float, font_size: float) -> list[tuple[str, float]]:
    """Compute the x position of every visible piece of a line.

    Returns
    -------
    list[tuple[str, float]]
        (text, x) for each non-space piece.
    """
    stretch = space_stretch(line, max_width, font_size)
    placed: list[tuple[str, float]] = []
    for piece in line.pieces:
        if piece.text == SPACE:
            x += stretch
        else:
            placed.append((piece.text, x))
        x += piece.width
    return placed
