"""Greedy word wrap for lines without a chord row.

Titles, instructions and plain lyric lines are laid out here. Chord tokens
on such lines are flattened into the text.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from chord_layout.models import TextRun, Token, Weight

if TYPE_CHECKING:
    from chord_layout.fonts import TextMeasurer
    from chord_layout.layout.pagination import PageController


def split_units(tokens: Iterable[Token]) -> list[str]:
    """Join tokens into the space-delimited units that wrap as a whole.

    Consecutive spaces produce empty units, which keeps the spacing when
    the units are joined back with single spaces.

    Examples
    --------
    >>> split_units([Token("a"), Token(" "), Token("G", is_chord=True), Token("b")])
    ['a', 'Gb']
    """
    units: list[str] = []
    current = ""
    for token in tokens:
        if token.is_space:
            units.append(current)
            current = ""
        else:
            current += token.text
    units.append(current)
    return units


def wrap_units(
    units: list[str],
    fits: Callable[[str], bool],
) -> list[str]:
    """Greedily pack units into lines.

    The first unit of each line is always accepted, so a single unit wider
    than the page overflows instead of looping forever.

    Parameters
    ----------
    units : list[str]
        Space-delimited units.
    fits : Callable[[str], bool]
        Whether a candidate line fits the available width.

    Returns
    -------
    list[str]
        The wrapped lines; an empty input yields no lines.

    Examples
    --------
    >>> wrap_units(["aa", "bb", "cc"], lambda line: len(line) < 6)
    ['aa bb', 'cc']
    """
    lines: list[str] = []
    line: str | None = None
    for unit in units:
        if line is None:
            line = unit
            continue
        candidate = f"{line} {unit}"
        if fits(candidate):
            line = candidate
        else:
            lines.append(line)
            line = unit
    if line:
        lines.append(line)
    return lines


def layout_text_line(
    controller: PageController,
    measurer: TextMeasurer,
    tokens: Iterable[Token],
    *,
    weight: Weight = "regular",
    centered: bool = False,
) -> list[TextRun]:
    """Word-wrap a line of text onto the page.

    Every wrapped line but the last advances the cursor by one line height;
    the caller advances past the last one.

    Parameters
    ----------
    controller : PageController
        Page state receiving the runs.
    measurer : TextMeasurer
        Width measurement.
    tokens : Iterable[Token]
        Resolved line tokens.
    weight : Weight
        Font weight for every run.
    centered : bool
        Center each line between the margins instead of aligning left.

    Returns
    -------
    list[TextRun]
        The runs that were emitted.
    """
    size = controller.config.font_size
    start_x = controller.start_x
    max_x = controller.max_x

    def fits(candidate: str) -> bool:
        return start_x + measurer.measure(candidate, weight, size) < max_x

    emitted: list[TextRun] = []
    lines = wrap_units(split_units(tokens), fits)
    for number, text in enumerate(lines):
        if number:
            controller.advance()
        if centered:
            run = TextRun(text, controller.center_x, controller.y, size, weight, "center")
        else:
            run = TextRun(text, controller.start_x, controller.y, size, weight, "left")
        controller.emit(run)
        emitted.append(run)
    return emitted
