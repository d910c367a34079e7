"""Chord and lyric dual-track layout.

A line with chords is laid out as a pair of rows sharing one horizontal
cursor: lyrics on the baseline and bold chord symbols one line above,
starting at the lyric position they annotate. When a chord would collide
with the previous one, the rest of the word is pushed right and the gap in
the lyric is bridged with a dash. Words that run past the right margin
move to a fresh chord/lyric row pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from chord_layout.models import TextRun, Token

if TYPE_CHECKING:
    from chord_layout.fonts import TextMeasurer
    from chord_layout.layout.pagination import PageController

DASH = "-"


@dataclass(frozen=True)
class ChordPlacement:
    """A chord waiting to be drawn with its word.

    Parameters
    ----------
    text : str
        Resolved chord text.
    x : float
        Planned left edge of the chord.
    y : float
        Vertical position of the chord row.
    padding : float
        Space inserted before the chord to clear the previous one.
    """

    text: str
    x: float
    y: float
    padding: float


@dataclass
class WordPlan:
    """Measurements for one space-delimited word of a chord line."""

    tokens: list[Token]
    chords: list[ChordPlacement] = field(default_factory=list)
    end_x: float = 0.0
    last_chord_x: float = 0.0


def split_words(tokens: list[Token]) -> list[list[Token]]:
    """Split line tokens at spaces into words of lyric and chord tokens.

    Empty chord tokens (resolved key directives) are dropped. Consecutive
    spaces yield empty words.

    Examples
    --------
    >>> words = split_words([Token("C", is_chord=True), Token("Hi"), Token(" "), Token("there")])
    >>> [[t.text for t in word] for word in words]
    [['C', 'Hi'], ['there']]
    """
    words: list[list[Token]] = []
    current: list[Token] = []
    for token in tokens:
        if token.is_space:
            words.append(current)
            current = []
        elif token.text:
            current.append(token)
    words.append(current)
    return words


class ChordLineLayout:
    """Lays out one chord line onto the pages of a controller.

    Parameters
    ----------
    controller : PageController
        Page state receiving the runs.
    measurer : TextMeasurer
        Width measurement.
    """

    def __init__(self, controller: PageController, measurer: TextMeasurer) -> None:
        self.controller = controller
        self.measurer = measurer
        self.size = controller.config.font_size
        self.dash_width = self.width(DASH, "bold")
        self.space_width = self.width(" ")

    def width(self, text: str, weight: str = "regular") -> float:
        return self.measurer.measure(text, weight, self.size)

    def plan_word(self, word: list[Token], line_x: float, last_chord_x: float) -> WordPlan:
        """Place the chords of a word without emitting anything.

        Parameters
        ----------
        word : list[Token]
            Lyric fragments and chords of one word.
        line_x : float
            Where the word starts on the lyric row.
        last_chord_x : float
            Right edge of the previous chord on this row.

        Returns
        -------
        WordPlan
            Chord placements, the right edge of the padded lyric text, and
            the right edge of the last chord.
        """
        chord_y = self.controller.y - self.controller.line_height
        plan = WordPlan(tokens=word, last_chord_x=last_chord_x)
        lyric = ""
        word_padding = 0.0

        for token in word:
            if not token.is_chord:
                lyric += token.text
                continue
            natural_x = line_x + self.width(lyric) + word_padding
            padding = max(0.0, plan.last_chord_x + self.dash_width - natural_x)
            word_padding += padding
            placement = ChordPlacement(token.text, natural_x + padding, chord_y, padding)
            plan.chords.append(placement)
            plan.last_chord_x = placement.x + self.width(token.text, "bold")

        plan.end_x = line_x + self.width(lyric) + word_padding
        return plan

    def commit_word(self, plan: WordPlan, line_x: float) -> float:
        """Emit a planned word and return the cursor after it."""
        controller = self.controller
        chords = list(plan.chords)
        # The first chord's padding shifts the whole word
        if chords and chords[0].padding > 0:
            line_x += chords[0].padding
            chords[0] = replace(chords[0], padding=0.0)

        pending = iter(chords)
        for token in plan.tokens:
            if not token.is_chord:
                controller.emit(TextRun(token.text, line_x, controller.y, self.size, "regular", "left"))
                line_x += self.width(token.text)
                continue
            chord = next(pending)
            if chord.padding > self.dash_width:
                dash_x = line_x + (chord.padding - self.dash_width) / 2
                controller.emit(TextRun(DASH, dash_x, controller.y, self.size, "regular", "left"))
            line_x += chord.padding
            controller.emit(TextRun(chord.text, line_x, chord.y, self.size, "bold", "left"))
        return line_x

    def layout(self, tokens: list[Token]) -> None:
        """Lay out a resolved chord line.

        The cursor first drops one line so the chord row fits above the
        lyric row. Each word is committed if it ends before the right
        margin or is the first word of its row; otherwise the cursor drops
        two lines to a new row pair and the word is tried again there.
        """
        controller = self.controller
        row_offset = controller.line_height
        controller.advance(offset=row_offset)

        words = split_words(tokens)
        line_x = controller.start_x
        last_chord_x = 0.0
        first_on_row = True
        index = 0

        while index < len(words):
            plan = self.plan_word(words[index], line_x, last_chord_x)
            if first_on_row or plan.end_x < controller.max_x:
                line_x = self.commit_word(plan, line_x) + self.space_width
                last_chord_x = plan.last_chord_x
                first_on_row = False
                index += 1
            else:
                controller.advance(2, offset=row_offset)
                line_x = controller.start_x
                last_chord_x = 0.0
                first_on_row = True


def layout_chord_line(controller: PageController, measurer: TextMeasurer, tokens: list[Token]) -> None:
    """Lay out a resolved chord line; see ``ChordLineLayout.layout``."""
    ChordLineLayout(controller, measurer).layout(tokens)
