from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Turn:
    """Rotate the top layer by ``top`` slots and the bottom layer by ``bottom`` slots."""

    top: int
    bottom: int


@dataclass(frozen=True)
class LayerSwap:
    """Exchange the six equator-side slots of both layers (the ``/`` move)."""


Move = Union[Turn, LayerSwap]


@dataclass(frozen=True)
class AlignmentState:
    top: bool = False
    bottom: bool = False

    def advance(self, turn: Turn) -> AlignmentState:
        return AlignmentState(
            top=self.top ^ (turn.top % 3 != 0),
            bottom=self.bottom ^ (turn.bottom % 3 != 0),
        )

    @property
    def suffix(self) -> str:
        # Shorthand table keys: "1"/"0" for the top layer, "-1"/"0" for the bottom.
        return ("1" if self.top else "0") + ("-1" if self.bottom else "0")
