from __future__ import annotations

import pytest

from sq1vis.compiler import (
    CompilerConfig,
    compile_inverse,
    compile_scramble,
    expand_scramble,
    invert_scramble,
    resolve_state,
    state_string,
)
from sq1vis.errors import ScrambleError, UnknownMacroError, UnrecognizedTokenError
from sq1vis.state import SOLVED_BOTTOM, PuzzleState


def test_empty_scramble_is_solved() -> None:
    assert str(compile_scramble("")) == "011233455677|998bbaddcffe"


def test_single_top_turn_leaves_bottom_alone() -> None:
    state = compile_scramble("(3,0)")
    assert state.top == "233455677011"
    assert state.bottom == SOLVED_BOTTOM


def test_single_swap_has_fixed_output() -> None:
    assert str(compile_scramble("/")) == "011233998bba|455677ddcffe"


def test_negative_two_digit_token_splits_after_first_digit() -> None:
    assert expand_scramble("-23") == "-2,3"
    assert str(compile_scramble("-23")) == "770112334556|bbaddcffe998"


def test_turns_and_swaps_fold_in_order() -> None:
    assert str(compile_scramble("(3,0)/(0,3)")) == "233455998bba|011ddcffe677"


def test_expand_joins_every_token_with_a_swap() -> None:
    assert expand_scramble("(3,0) (0,3)") == "3,0/0,3"
    assert expand_scramble("U/D") == "3,0/0,3"
    assert expand_scramble("/(1,0)/(3,3)/") == "/1,0/3,3/"
    assert expand_scramble("10 bpj") == "1,0/-1,2/-2,-2/3,0/"


def test_letter_turns_compile_like_numeric_pairs() -> None:
    assert compile_scramble("U D") == compile_scramble("(3,0)/(0,3)")
    assert compile_scramble("U2D") == compile_scramble("(6,3)")


def test_inverse_returns_to_solved() -> None:
    state = compile_scramble("(3,0)/(0,3)")
    inverse = invert_scramble("(3,0)/(0,3)")
    assert inverse == "(0,-3)/(-3,0)"
    assert compile_scramble(inverse, start=state) == PuzzleState.solved()


@pytest.mark.parametrize(
    "scramble",
    ["1,0 bpj", "1,1 jr U2D", "/(1,0)/(3,3)/(-1,0)/", "bjj fjj", "0,1 fpj 23 -1,0"],
)
def test_compile_inverse_undoes_compile(scramble: str) -> None:
    state = compile_scramble(scramble)
    assert compile_inverse(scramble, start=state) == PuzzleState.solved()


def test_compile_inverse_expands_before_inverting() -> None:
    assert compile_inverse("(3,0)") == compile_scramble("(-3,0)")
    assert compile_inverse("U") == compile_scramble("(-3,0)")


def test_errors_propagate_as_scramble_errors() -> None:
    with pytest.raises(UnknownMacroError):
        compile_scramble("bpj")
    with pytest.raises(UnrecognizedTokenError):
        compile_scramble("12345")
    with pytest.raises(ScrambleError):
        resolve_state("0112", mode="hex")


def test_resolve_state_modes() -> None:
    swapped = compile_scramble("/")
    assert resolve_state("011233998bba|455677ddcffe", mode="hex") == swapped
    assert resolve_state("/", mode="scramble") == swapped
    assert resolve_state("/", mode="inverse") == swapped
    with pytest.raises(ValueError, match="mode"):
        resolve_state("/", mode="bogus")  # type: ignore[arg-type]


def test_state_string_uses_configured_separator() -> None:
    config = CompilerConfig(separator="/")
    assert state_string("/", config=config) == "011233998bba/455677ddcffe"
    assert state_string("") == "011233455677|998bbaddcffe"


def test_config_rejects_unknown_separator() -> None:
    with pytest.raises(ValueError):
        CompilerConfig(separator="-")
