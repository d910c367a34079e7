"""Bracket-aware tokenizer for chord sheet markup.

Splits one line of markup into word fragments, single spaces, and
bracket-delimited chord tokens.
"""

from chord_layout.models import Token


def split_line(line: str) -> list[Token]:
    """Tokenize a markup line.

    ``[`` opens a chord token and ``]`` closes it. Outside brackets, each
    space becomes its own single-space token and every other run of
    characters becomes a word fragment. Inside brackets spaces are kept as
    part of the chord text. An unterminated bracket is flushed as a chord
    token at the end of the line.

    Parameters
    ----------
    line : str
        The line to tokenize, without its newline.

    Returns
    -------
    list[Token]
        Tokens in left-to-right order.

    Examples
    --------
    >>> [(t.text, t.is_chord) for t in split_line("[C]Amazing grace")]
    [('C', True), ('Amazing', False), (' ', False), ('grace', False)]

    >>> [t.text for t in split_line("[@key F#]")]
    ['@key F#']
    """
    tokens: list[Token] = []
    sofar = ""
    in_bracket = False

    for char in line:
        if char == "[":
            # Text before "[" is a fragment, even inside an unclosed chord
            if sofar:
                tokens.append(Token(sofar))
            sofar = ""
            in_bracket = True
        elif char == "]":
            if sofar:
                tokens.append(Token(sofar, is_chord=in_bracket))
            sofar = ""
            in_bracket = False
        elif char == " " and not in_bracket:
            if sofar:
                tokens.append(Token(sofar))
            tokens.append(Token(" "))
            sofar = ""
        else:
            sofar += char

    if sofar:
        tokens.append(Token(sofar, is_chord=in_bracket))

    return tokens


def join_tokens(tokens: list[Token]) -> str:
    """Reassemble markup from tokens, restoring chord brackets.

    Examples
    --------
    >>> join_tokens(split_line("[G]Hello [D7]world"))
    '[G]Hello [D7]world'
    """
    return "".join(f"[{t.text}]" if t.is_chord else t.text for t in tokens)
