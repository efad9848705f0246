from __future__ import annotations

import re

from sq1vis.errors import UnrecognizedTokenError

_SLICE_MARKS = re.compile(r"[/\\]")
_PARENS = re.compile(r"[()]")
_WHITESPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"[0-9]+")


def flatten_notation(scramble: str) -> str:
    """Slashes become spaces, parentheses go away, whitespace runs collapse.

    Leading and trailing spaces survive: they mark a swap at either end.
    """
    text = _SLICE_MARKS.sub(" ", scramble)
    text = _PARENS.sub("", text)
    return _WHITESPACE.sub(" ", text)


def _is_numeric_move(token: str) -> bool:
    return bool(_DIGITS.fullmatch(token.replace("-", "", 1)))


def _split_numeric_move(token: str, position: int) -> str:
    negative = token.startswith("-")
    length = len(token)
    if length == 1:
        return f"{token},0"
    if length == 2:
        return f"{token},0" if negative else f"{token[0]},{token[1]}"
    if length == 3:
        return f"{token[:2]},{token[2]}" if negative else f"{token[0]},{token[1:]}"
    if length == 4:
        return f"{token[:2]},{token[2:]}"
    raise UnrecognizedTokenError(token, position)


def insert_commas(scramble: str) -> str:
    """Turns compact numeric moves into explicit pairs: ``-23`` -> ``-2,3``, ``10`` -> ``1,0``."""
    tokens = scramble.split(" ")
    for index, token in enumerate(tokens):
        if token and _is_numeric_move(token):
            tokens[index] = _split_numeric_move(token, index)
    return " ".join(tokens)
