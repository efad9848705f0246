from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from sq1vis.errors import MalformedStateError
from sq1vis.models import LayerSwap, Move, Turn

LAYER_SLOTS = 12
HALF_SLOTS = LAYER_SLOTS // 2

SOLVED_TOP = "011233455677"
SOLVED_BOTTOM = "998bbaddcffe"

STATE_SEPARATORS = ("|", "/")

_HEX_LAYER = re.compile(r"[0-9a-fA-F]{12}")


def rotate_left(layer: str, places: int) -> str:
    """Cyclic left rotation; any integer is normalized into [0, 12)."""
    normalized = ((places % LAYER_SLOTS) + LAYER_SLOTS) % LAYER_SLOTS
    return layer[normalized:] + layer[:normalized]


def swap_halves(top: str, bottom: str) -> tuple[str, str]:
    if len(top) != LAYER_SLOTS or len(bottom) != LAYER_SLOTS:
        raise MalformedStateError(
            f"Layers must contain exactly {LAYER_SLOTS} slots, got {len(top)} and {len(bottom)}"
        )
    return top[:HALF_SLOTS] + bottom[:HALF_SLOTS], top[HALF_SLOTS:] + bottom[HALF_SLOTS:]


@dataclass(frozen=True)
class PuzzleState:
    top: str = SOLVED_TOP
    bottom: str = SOLVED_BOTTOM

    def __post_init__(self) -> None:
        for name, layer in (("top", self.top), ("bottom", self.bottom)):
            if len(layer) != LAYER_SLOTS:
                raise MalformedStateError(
                    f"{name} layer must contain exactly {LAYER_SLOTS} slots, got {len(layer)}"
                )

    @classmethod
    def solved(cls) -> PuzzleState:
        return cls(top=SOLVED_TOP, bottom=SOLVED_BOTTOM)

    @classmethod
    def parse(cls, raw: str) -> PuzzleState:
        """Parses the wire form: 24 hex digits with an optional ``|`` or ``/`` separator."""
        text = raw.strip()
        # Only the first separator is dropped, the same way the renderer reads it.
        for index, char in enumerate(text):
            if char in STATE_SEPARATORS:
                text = text[:index] + text[index + 1 :]
                break

        if len(text) != 2 * LAYER_SLOTS:
            raise MalformedStateError(
                f"State must be {2 * LAYER_SLOTS} data characters (plus optional | separator), "
                f"got {len(text)}"
            )
        top, bottom = text[:LAYER_SLOTS], text[LAYER_SLOTS:]
        for layer in (top, bottom):
            if not _HEX_LAYER.fullmatch(layer):
                raise MalformedStateError(f"State layer '{layer}' must contain only hex digits")
        return cls(top=top.lower(), bottom=bottom.lower())

    def apply(self, move: Move) -> PuzzleState:
        if isinstance(move, LayerSwap):
            top, bottom = swap_halves(self.top, self.bottom)
            return PuzzleState(top=top, bottom=bottom)
        if isinstance(move, Turn):
            return PuzzleState(
                top=rotate_left(self.top, move.top),
                bottom=rotate_left(self.bottom, move.bottom),
            )
        raise TypeError(f"Unsupported move: {move!r}")

    def to_string(self, separator: str = "|") -> str:
        if separator not in STATE_SEPARATORS:
            raise ValueError(f"separator must be one of {STATE_SEPARATORS}")
        return f"{self.top}{separator}{self.bottom}"

    def __str__(self) -> str:
        return self.to_string()


def apply_moves(moves: Iterable[Move], start: PuzzleState | None = None) -> PuzzleState:
    state = start if start is not None else PuzzleState.solved()
    # Strictly left to right: turns and swaps do not commute.
    for move in moves:
        state = state.apply(move)
    return state


def state_string_from_moves(moves: Iterable[Move], separator: str = "|") -> str:
    return apply_moves(moves).to_string(separator)


def solved_state_string(separator: str = "|") -> str:
    return PuzzleState.solved().to_string(separator)
