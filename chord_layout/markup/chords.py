"""Chord token resolution.

This module rewrites chord tokens for the configured transposition and
tracks ``@key`` directives. Key state is passed in and returned rather
than stored, so a caller owns it for the duration of a layout run.
"""

from __future__ import annotations

import re

from chord_layout.config import LayoutConfig
from chord_layout.models import ChordSymbol, KeyState, Token
from chord_layout.pitch_class import (
    chord_to_number,
    key_prefers_flats,
    number_to_chord,
)

# Key directive: [@key F#]
KEY_DIRECTIVE_RE = re.compile(r"^@key\s?([A-G])([#♯b♭]?)\s*$")

# Any chord root inside a chord token; quality text around it is kept
CHORD_ROOT_RE = re.compile(r"([A-G])([#♯b♭]?)")

ESCAPE_MARKER = "!"


def parse_chord_symbol(text: str) -> ChordSymbol:
    """Split chord text into its first root and the remaining suffix.

    Parameters
    ----------
    text : str
        Chord token text, optionally starting with "!".

    Returns
    -------
    ChordSymbol
        The parsed symbol. ``root`` is None when no root is found.

    Examples
    --------
    >>> parse_chord_symbol("Bbm7")
    ChordSymbol(root=10, suffix='m7', escaped=False)
    >>> parse_chord_symbol("!riff").root is None
    True
    """
    escaped = text.startswith(ESCAPE_MARKER)
    body = text[1:] if escaped else text
    match = CHORD_ROOT_RE.match(body)
    if not match:
        return ChordSymbol(root=None, suffix=body, escaped=escaped)
    return ChordSymbol(
        root=chord_to_number(match.group(1), match.group(2)),
        suffix=body[match.end() :],
        escaped=escaped,
    )


def initial_key_state(config: LayoutConfig) -> KeyState:
    """Return the key state a layout run starts from."""
    return KeyState(current_key=0, flats=config.flats)


def resolve_chord(token: Token, key_state: KeyState, config: LayoutConfig) -> tuple[Token, KeyState]:
    """Resolve one token for display.

    Non-chord tokens pass through unchanged. Chord tokens are handled in
    this order:

    1. A key directive (``@key <root>``) becomes an empty placeholder.
       With auto-flats enabled it also sets the current key (shifted by the
       effective transpose) and the flats preference for that key.
    2. A leading "!" is stripped and the rest is returned verbatim.
    3. With no effective transpose and ``transform_all_chords`` off, the
       token is returned unchanged.
    4. Otherwise every chord root in the text is transposed and respelled;
       all other characters are left untouched.

    Parameters
    ----------
    token : Token
        The token to resolve.
    key_state : KeyState
        Key state before this token.
    config : LayoutConfig
        Session configuration.

    Returns
    -------
    tuple[Token, KeyState]
        The resolved token and the key state after it.

    Examples
    --------
    >>> config = LayoutConfig(transpose=2)
    >>> token, _ = resolve_chord(Token("C/G", is_chord=True), KeyState(), config)
    >>> token.text
    'D/A'
    """
    if not token.is_chord:
        return token, key_state

    text = token.text
    directive = KEY_DIRECTIVE_RE.match(text)
    if directive:
        if config.auto_flats.enabled:
            key = (chord_to_number(directive.group(1), directive.group(2)) + config.effective_transpose) % 12
            key_state = KeyState(
                current_key=key,
                flats=key_prefers_flats(key, config.auto_flats.favor_flats),
            )
        return Token("", is_chord=True, original_text=text), key_state

    symbol = parse_chord_symbol(text)
    if symbol.escaped:
        return Token(text[1:], is_chord=True, original_text=text, chord=symbol), key_state

    transpose = config.effective_transpose
    if transpose == 0 and not config.transform_all_chords:
        return token, key_state

    current_key = key_state.current_key if config.auto_flats.enabled else None

    def respell(match: re.Match[str]) -> str:
        number = chord_to_number(match.group(1), match.group(2))
        return number_to_chord(
            number + transpose,
            key_state.flats,
            current_key=current_key,
            fancy=config.use_fancy_symbols,
        )

    resolved = CHORD_ROOT_RE.sub(respell, text)
    return Token(resolved, is_chord=True, original_text=text, chord=symbol), key_state


def resolve_tokens(
    tokens: list[Token], key_state: KeyState, config: LayoutConfig
) -> tuple[list[Token], KeyState]:
    """Resolve every token of a line, threading the key state through.

    Returns
    -------
    tuple[list[Token], KeyState]
        Resolved tokens and the key state after the line.
    """
    resolved: list[Token] = []
    for token in tokens:
        token, key_state = resolve_chord(token, key_state, config)
        resolved.append(token)
    return resolved, key_state
