from sq1vis.compiler import (
    CompilerConfig,
    compile_inverse,
    compile_scramble,
    expand_scramble,
    invert_scramble,
    resolve_state,
    state_string,
)
from sq1vis.errors import MalformedStateError, ScrambleError, UnknownMacroError, UnrecognizedTokenError
from sq1vis.formula import ScrambleParser
from sq1vis.models import AlignmentState, LayerSwap, Move, Turn
from sq1vis.pieces import PieceToken, parse_layer, parse_state_pieces, sticker_color
from sq1vis.rewrite import KARN_TABLE, RewriteTable, rewrite
from sq1vis.shorthand import SHORTHAND_TABLE, ShorthandTable, expand_shorthands, primitive_turns_of
from sq1vis.state import PuzzleState, rotate_left, solved_state_string, state_string_from_moves, swap_halves

__all__ = [
    "AlignmentState",
    "CompilerConfig",
    "KARN_TABLE",
    "LayerSwap",
    "MalformedStateError",
    "Move",
    "PieceToken",
    "PuzzleState",
    "RewriteTable",
    "SHORTHAND_TABLE",
    "ScrambleError",
    "ScrambleParser",
    "ShorthandTable",
    "Turn",
    "UnknownMacroError",
    "UnrecognizedTokenError",
    "compile_inverse",
    "compile_scramble",
    "expand_scramble",
    "expand_shorthands",
    "invert_scramble",
    "parse_layer",
    "parse_state_pieces",
    "primitive_turns_of",
    "resolve_state",
    "rewrite",
    "rotate_left",
    "solved_state_string",
    "state_string",
    "state_string_from_moves",
    "sticker_color",
    "swap_halves",
]
