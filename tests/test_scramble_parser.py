from __future__ import annotations

from sq1vis.formula import ScrambleParser
from sq1vis.models import LayerSwap, Turn


def test_parse_pairs_and_swaps() -> None:
    assert ScrambleParser.parse("(3,0)/(0,3)") == [Turn(3, 0), LayerSwap(), Turn(0, 3)]
    assert ScrambleParser.parse("1,0/ -2,3 /") == [Turn(1, 0), LayerSwap(), Turn(-2, 3), LayerSwap()]
    assert ScrambleParser.parse("(+1,-4)") == [Turn(1, -4)]


def test_parse_empty_and_bare_swaps() -> None:
    assert ScrambleParser.parse("") == []
    assert ScrambleParser.parse("//") == [LayerSwap(), LayerSwap()]


def test_parse_silently_drops_unrecognized_tokens() -> None:
    moves = ScrambleParser.parse("(3,0) foo / (x,1) 1,2,3 U")
    assert moves == [Turn(3, 0), LayerSwap()]


def test_parse_turn_requires_two_integers() -> None:
    assert ScrambleParser.parse_turn("(-5,6)") == Turn(-5, 6)
    assert ScrambleParser.parse_turn("5") is None
    assert ScrambleParser.parse_turn("a,1") is None


def test_invert_reverses_fragments_and_negates_turns() -> None:
    assert ScrambleParser.invert("(3,0)/(0,3)") == "(0,-3)/(-3,0)"
    assert ScrambleParser.invert("1,0/-3,0") == "3,0/-1,0"
    assert ScrambleParser.invert("(1,0)/(-2, 3)/") == "/(2,-3)/(-1,0)"


def test_invert_keeps_zero_and_non_numeric_tokens() -> None:
    assert ScrambleParser.invert("0,0") == "0,0"
    assert ScrambleParser.invert("(3,0) U /") == "/(-3,0) U"
    assert ScrambleParser.invert("") == ""
