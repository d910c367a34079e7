"""Chord sheet markup handling.

This module provides the tokenizer, chord resolution and line
classification used by the layout engine.
"""

from chord_layout.markup.chords import (
    initial_key_state,
    parse_chord_symbol,
    resolve_chord,
    resolve_tokens,
)
from chord_layout.markup.classifier import ClassifiedLine, LineKind, classify_line
from chord_layout.markup.tokenizer import join_tokens, split_line

__all__ = [
    "ClassifiedLine",
    "LineKind",
    "classify_line",
    "initial_key_state",
    "join_tokens",
    "parse_chord_symbol",
    "resolve_chord",
    "resolve_tokens",
    "split_line",
]
