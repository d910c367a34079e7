"""Line classification for chord sheet markup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chord_layout.markup.tokenizer import split_line
from chord_layout.models import Token

LineKind = Literal[
    "blank",
    "comment",
    "indent",
    "pagebreak",
    "title",
    "instruct",
    "lyric",
    "chord_lyric",
]

# Bracket keywords recognized as the first token of a line (case-insensitive)
LINE_KEYWORDS: dict[str, LineKind] = {
    "title": "title",
    "instruct": "instruct",
    "pagebreak": "pagebreak",
}

INDENT_UNIT = 0.5


@dataclass(frozen=True)
class ClassifiedLine:
    """A markup line with its kind and body tokens.

    Parameters
    ----------
    kind : LineKind
        The line classification.
    tokens : tuple[Token, ...]
        Body tokens, with a leading keyword token removed.
    indent : float | None
        New indent in inches for ``indent`` lines, None otherwise.
    """

    kind: LineKind
    tokens: tuple[Token, ...] = ()
    indent: float | None = None


def indent_for(line: str) -> float:
    """Compute the indent set by a ``#*`` directive.

    Each ``*`` after the first adds half an inch; ``#*`` resets to zero.

    Examples
    --------
    >>> indent_for("#*")
    0.0
    >>> indent_for("#***")
    1.0
    """
    stars = len(line[1:]) - len(line[1:].lstrip("*"))
    return (stars - 1) * INDENT_UNIT


def classify_line(line: str) -> ClassifiedLine:
    """Classify a markup line.

    Rules apply in priority order: blank, comment (``#``) or indent
    directive (``#*``), bracket keyword (``[title]``, ``[instruct]``,
    ``[pagebreak]``), then lyric lines with or without chords.

    Parameters
    ----------
    line : str
        The raw line.

    Returns
    -------
    ClassifiedLine
        Kind and body tokens.

    Examples
    --------
    >>> classify_line("   ").kind
    'blank'
    >>> classify_line("#** verse").indent
    0.5
    >>> classify_line("[TITLE]Amazing Grace").kind
    'title'
    >>> classify_line("[G]Amazing grace").kind
    'chord_lyric'
    """
    stripped = line.strip()
    if not stripped:
        return ClassifiedLine("blank")

    if stripped.startswith("#"):
        if stripped[1:2] == "*":
            return ClassifiedLine("indent", indent=indent_for(stripped))
        return ClassifiedLine("comment")

    tokens = split_line(stripped)
    if not tokens:
        # Only empty or stray brackets
        return ClassifiedLine("lyric")

    first = tokens[0]
    if first.is_chord:
        kind = LINE_KEYWORDS.get(first.text.lower())
        if kind is not None:
            body = tokens[1:]
            while body and body[0].is_space:
                body.pop(0)
            return ClassifiedLine(kind, tuple(body))

    if any(token.is_chord for token in tokens):
        return ClassifiedLine("chord_lyric", tuple(tokens))
    return ClassifiedLine("lyric", tuple(tokens))
