from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from sq1vis.formula import ScrambleParser
from sq1vis.rewrite import KARN_TABLE, rewrite
from sq1vis.shorthand import expand_shorthands
from sq1vis.state import STATE_SEPARATORS, PuzzleState, apply_moves
from sq1vis.utils import flatten_notation, insert_commas

logger = logging.getLogger(__name__)

InputMode = Literal["scramble", "inverse", "hex"]
INPUT_MODES = ("scramble", "inverse", "hex")


@dataclass(frozen=True)
class CompilerConfig:
    separator: str = "|"

    def __post_init__(self) -> None:
        if self.separator not in STATE_SEPARATORS:
            raise ValueError(f"separator must be one of {STATE_SEPARATORS}")


DEFAULT_CONFIG = CompilerConfig()


def expand_scramble(scramble: str) -> str:
    """Raw scramble (pairs, compact numbers, Karnaukh, shorthands) -> canonical ``a,b/c,d/...``."""
    text = insert_commas(flatten_notation(scramble))
    text = rewrite(text, KARN_TABLE)
    expanded = expand_shorthands(text)
    logger.debug("Expanded scramble %r -> %r", scramble, expanded)
    return expanded


def invert_scramble(scramble: str) -> str:
    """Inverse at the notation level.

    The input must already be expanded (see :func:`expand_scramble`); letter
    turns and shorthands are not inverted. :func:`compile_inverse` takes care
    of that for raw input.
    """
    return ScrambleParser.invert(scramble)


def compile_scramble(
    scramble: str,
    start: PuzzleState | None = None,
    config: CompilerConfig = DEFAULT_CONFIG,
) -> PuzzleState:
    moves = ScrambleParser.parse(expand_scramble(scramble))
    state = apply_moves(moves, start=start)
    logger.debug("Compiled %d moves into %s", len(moves), state.to_string(config.separator))
    return state


def compile_inverse(
    scramble: str,
    start: PuzzleState | None = None,
    config: CompilerConfig = DEFAULT_CONFIG,
) -> PuzzleState:
    """State reached by the inverse of ``scramble``, i.e. the case it solves."""
    inverted = invert_scramble(expand_scramble(scramble))
    return compile_scramble(inverted, start=start, config=config)


def resolve_state(
    text: str,
    mode: InputMode = "scramble",
    config: CompilerConfig = DEFAULT_CONFIG,
) -> PuzzleState:
    if mode == "hex":
        return PuzzleState.parse(text)
    if mode == "inverse":
        return compile_inverse(text, config=config)
    if mode == "scramble":
        return compile_scramble(text, config=config)
    raise ValueError(f"mode must be one of {INPUT_MODES}, got '{mode}'")


def state_string(
    text: str,
    mode: InputMode = "scramble",
    config: CompilerConfig = DEFAULT_CONFIG,
) -> str:
    """Wire form of :func:`resolve_state`, e.g. ``011233455677|998bbaddcffe``."""
    return resolve_state(text, mode=mode, config=config).to_string(config.separator)
