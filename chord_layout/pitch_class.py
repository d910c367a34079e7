"""Pitch class operations for chord transposition.

This module converts chord root names to pitch classes (0-11) and back,
so that chord symbols can be transposed by simple modular arithmetic.
"""

from __future__ import annotations

import re

# Natural note letter to pitch class (0-11, where C=0)
LETTER_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

SHARP_GLYPHS = ("#", "♯")
FLAT_GLYPHS = ("b", "♭")

# Root letter with an optional accidental, anchored
NOTE_RE = re.compile(r"^([A-G])([#♯b♭]?)$")

# Pitch class to (sharp spelling, flat spelling); "#"/"b" are placeholders
PC_TO_NAMES: list[tuple[str, str]] = [
    ("C", "C"),
    ("C#", "Db"),
    ("D", "D"),
    ("D#", "Eb"),
    ("E", "E"),
    ("F", "F"),
    ("F#", "Gb"),
    ("G", "G"),
    ("G#", "Ab"),
    ("A", "A"),
    ("A#", "Bb"),
    ("B", "B"),
]

# Keys spelled with flats on the circle of fifths: F Bb Eb Ab Db
FLAT_KEYS: frozenset[int] = frozenset({5, 10, 3, 8, 1})

# F#/Gb sits on both sides of the circle
AMBIGUOUS_KEY = 6


def chord_to_number(root: str, accidental: str = "") -> int | None:
    """Convert a root letter and accidental to a pitch class.

    Parameters
    ----------
    root : str
        Note letter, "A" through "G".
    accidental : str
        Optional accidental glyph: "#", "♯", "b" or "♭".

    Returns
    -------
    int | None
        Pitch class (0-11), or None if the letter or accidental is not
        recognized.

    Examples
    --------
    >>> chord_to_number("F", "#")
    6
    >>> chord_to_number("C", "b")
    11
    >>> chord_to_number("H") is None
    True
    """
    if root not in LETTER_TO_PC:
        return None
    number = LETTER_TO_PC[root]
    if accidental in SHARP_GLYPHS:
        number += 1
    elif accidental in FLAT_GLYPHS:
        number -= 1
    elif accidental:
        return None
    return number % 12


def note_to_number(note: str) -> int | None:
    """Convert a note name such as "Bb" or "F♯" to a pitch class.

    Examples
    --------
    >>> note_to_number("Bb")
    10
    >>> note_to_number("Bbb") is None
    True
    """
    match = NOTE_RE.match(note)
    if not match:
        return None
    return chord_to_number(match.group(1), match.group(2))


def number_to_chord(
    number: int,
    flats: bool = False,
    *,
    current_key: int | None = None,
    fancy: bool = False,
) -> str:
    """Spell a pitch class as a note name.

    Parameters
    ----------
    number : int
        Any integer; it is reduced modulo 12.
    flats : bool
        Spell black keys with flats instead of sharps.
    current_key : int | None
        Pitch class of the tracked key, or None when key tracking is off.
        In F#/Gb (6) the diatonic spellings E# and Cb are used.
    fancy : bool
        Use the "♯"/"♭" glyphs instead of "#"/"b".

    Returns
    -------
    str
        The note name.

    Examples
    --------
    >>> number_to_chord(13)
    'C#'
    >>> number_to_chord(-2, flats=True)
    'Bb'
    >>> number_to_chord(5, current_key=6)
    'E#'
    """
    number %= 12
    sharp = "♯" if fancy else "#"
    flat = "♭" if fancy else "b"

    if current_key == AMBIGUOUS_KEY:
        if number == 5 and not flats:
            return "E" + sharp
        if number == 11 and flats:
            return "C" + flat

    sharp_name, flat_name = PC_TO_NAMES[number]
    name = flat_name if flats else sharp_name
    return name.replace("#", sharp) if not flats else name.replace("b", flat)


def key_prefers_flats(key: int, favor_flats: bool = False) -> bool:
    """Decide whether a key is spelled with flats.

    Examples
    --------
    >>> key_prefers_flats(10)
    True
    >>> key_prefers_flats(7)
    False
    >>> key_prefers_flats(6, favor_flats=True)
    True
    """
    key %= 12
    if key == AMBIGUOUS_KEY:
        return favor_flats
    return key in FLAT_KEYS


def transpose_note(note: str, semitones: int, flats: bool = False, *, fancy: bool = False) -> str:
    """Transpose a single note name by a number of semitones.

    Unrecognized note names are returned unchanged.

    Examples
    --------
    >>> transpose_note("C", 2)
    'D'
    >>> transpose_note("A", 1, flats=True)
    'Bb'
    >>> transpose_note("X", 3)
    'X'
    """
    number = note_to_number(note)
    if number is None:
        return note
    return number_to_chord(number + semitones, flats, fancy=fancy)
