from __future__ import annotations

import re

from sq1vis.models import LayerSwap, Move, Turn

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_SWAP = "/"

# A parenthesized group, or a bare comma-joined run such as "1,0" or "-2,3".
_TURN_GROUP = re.compile(r"\(([^()]*)\)|([^\s()/]*,[^\s()/]*)")


def _parse_int(text: str) -> int | None:
    value = text.strip()
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def _negate_value(text: str) -> str:
    value = _parse_int(text)
    if value is None:
        return text.strip()
    return str(-value)


def _negate_group(match: re.Match[str]) -> str:
    body = match.group(1)
    if body is not None:
        return "(" + ",".join(_negate_value(part) for part in body.split(",")) + ")"
    return ",".join(_negate_value(part) for part in match.group(2).split(","))


class ScrambleParser:
    """Canonical scramble text -> ordered Turn/LayerSwap sequence.

    Deliberately lenient: tokens that are neither ``/`` nor an ``int,int`` pair
    (optionally parenthesized) are dropped instead of rejected, so scrambles with
    stray punctuation keep working.
    """

    @classmethod
    def parse(cls, scramble: str) -> list[Move]:
        moves: list[Move] = []
        for token in cls._tokenize(scramble):
            if token == _SWAP:
                moves.append(LayerSwap())
                continue
            turn = cls.parse_turn(token)
            if turn is not None:
                moves.append(turn)
        return moves

    @classmethod
    def parse_turn(cls, token: str) -> Turn | None:
        if "," not in token:
            return None
        halves = token.replace("(", "").replace(")", "").split(",")
        if len(halves) != 2:
            return None
        top, bottom = (_parse_int(half) for half in halves)
        if top is None or bottom is None:
            return None
        return Turn(top=top, bottom=bottom)

    @classmethod
    def invert(cls, scramble: str) -> str:
        """Reverses swap-delimited fragments and negates every turn group.

        Only meaningful for already expanded scrambles (numeric pairs and
        parenthesized turns); shorthand and letter turns pass through unchanged.
        """
        text = scramble.strip()
        if not text:
            return text
        fragments = [fragment.strip() for fragment in text.split(_SWAP)]
        inverted = [_TURN_GROUP.sub(_negate_group, fragment) for fragment in reversed(fragments)]
        return _SWAP.join(inverted)

    @staticmethod
    def _tokenize(scramble: str) -> list[str]:
        return scramble.replace(_SWAP, f" {_SWAP} ").split()
