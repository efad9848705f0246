from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping

from sq1vis.state import PuzzleState

PieceKind = Literal["edge", "corner"]

CORNER_PIECES = frozenset("13579bdf")
SCHEME_FACES = (
    "top",
    "bottom",
    "front",
    "right",
    "back",
    "left",
    "border",
    "divider",
    "circle",
    "slice",
)
TRANSPARENT = "transparent"

DEFAULT_COLOR_SCHEME: Mapping[str, str | None] = MappingProxyType(
    {
        "top": "#4D4D4D",
        "bottom": "#FFFFFF",
        "front": "#CC0000",
        "right": "#00AA00",
        "back": "#FF8C00",
        "left": "#0066CC",
        "border": "#000000",
        "divider": "#7A0000",
        "circle": TRANSPARENT,
        # None: no slice line is drawn.
        "slice": None,
    }
)

# Sticker name -> face for every piece id; edges are even hex digits, corners odd.
EDGE_STICKERS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "0": MappingProxyType({"inner": "top", "outer": "back"}),
        "2": MappingProxyType({"inner": "top", "outer": "left"}),
        "4": MappingProxyType({"inner": "top", "outer": "front"}),
        "6": MappingProxyType({"inner": "top", "outer": "right"}),
        "8": MappingProxyType({"inner": "bottom", "outer": "right"}),
        "a": MappingProxyType({"inner": "bottom", "outer": "front"}),
        "c": MappingProxyType({"inner": "bottom", "outer": "left"}),
        "e": MappingProxyType({"inner": "bottom", "outer": "back"}),
    }
)

CORNER_STICKERS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "1": MappingProxyType({"top": "top", "left": "back", "right": "left"}),
        "3": MappingProxyType({"top": "top", "left": "left", "right": "front"}),
        "5": MappingProxyType({"top": "top", "left": "front", "right": "right"}),
        "7": MappingProxyType({"top": "top", "left": "right", "right": "back"}),
        "9": MappingProxyType({"top": "bottom", "left": "back", "right": "right"}),
        "b": MappingProxyType({"top": "bottom", "left": "right", "right": "front"}),
        "d": MappingProxyType({"top": "bottom", "left": "front", "right": "left"}),
        "f": MappingProxyType({"top": "bottom", "left": "left", "right": "back"}),
    }
)


@dataclass(frozen=True)
class PieceToken:
    piece: str
    kind: PieceKind
    position: int  # 1-based first slot

    @property
    def span(self) -> int:
        return 2 if self.kind == "corner" else 1


def parse_layer(layer: str) -> list[PieceToken]:
    """Splits one 12-slot layer into pieces; a corner occupies two slots."""
    tokens: list[PieceToken] = []
    slot = 1
    index = 0
    while index < len(layer):
        piece = layer[index].lower()
        if piece in CORNER_PIECES:
            tokens.append(PieceToken(piece=piece, kind="corner", position=slot))
            slot += 2
            index += 2
        else:
            tokens.append(PieceToken(piece=piece, kind="edge", position=slot))
            slot += 1
            index += 1
    return tokens


def parse_state_pieces(raw: str | PuzzleState) -> dict[str, list[PieceToken]]:
    state = raw if isinstance(raw, PuzzleState) else PuzzleState.parse(raw)
    return {"top": parse_layer(state.top), "bottom": parse_layer(state.bottom)}


def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    color = hex_color.strip()
    if color.startswith("#"):
        color = color[1:]
    if len(color) != 6:
        raise ValueError(f"Invalid color '{hex_color}' (expected #RRGGBB)")
    try:
        return (int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16))
    except ValueError as exc:
        raise ValueError(f"Invalid color '{hex_color}' (expected #RRGGBB)") from exc


def _check_color(color: str | None) -> None:
    if color is None or color == TRANSPARENT:
        return
    _hex_to_rgb(color)


def validate_color_scheme(scheme: Mapping[str, str | None]) -> None:
    """Faces must be known; colours are ``#RRGGBB``, ``"transparent"`` or ``None``."""
    unknown = sorted(set(scheme) - set(SCHEME_FACES))
    if unknown:
        raise ValueError(f"Unknown scheme faces: {', '.join(unknown)}")
    for color in scheme.values():
        _check_color(color)


def parse_sticker_id(sticker_id: str) -> tuple[str, str]:
    """``"4 outer"`` -> ``("4", "outer")``; rejects ids that name no sticker."""
    parts = sticker_id.split(" ")
    if len(parts) != 2:
        raise ValueError(f"piece id {sticker_id} is not valid.")
    piece, sticker = parts[0].lower(), parts[1]
    stickers = CORNER_STICKERS.get(piece) or EDGE_STICKERS.get(piece)
    if stickers is None or sticker not in stickers:
        raise ValueError(f"piece id {sticker_id} is not valid.")
    return piece, sticker


def sticker_color(
    sticker_id: str,
    scheme: Mapping[str, str | None] | None = None,
    overrides: Mapping[str, str] | None = None,
) -> str:
    """Resolves a sticker to a colour.

    ``overrides`` maps sticker ids to either a ``#RRGGBB`` colour or a face name
    from the scheme; ``scheme`` is merged over :data:`DEFAULT_COLOR_SCHEME`.
    """
    piece, sticker = parse_sticker_id(sticker_id)
    if scheme:
        validate_color_scheme(scheme)
    colors = {**DEFAULT_COLOR_SCHEME, **(scheme or {})}

    value = None
    if overrides:
        value = overrides.get(f"{piece} {sticker}")
    if value is None:
        table = CORNER_STICKERS if piece in CORNER_PIECES else EDGE_STICKERS
        value = table[piece][sticker]

    if value.startswith("#"):
        _hex_to_rgb(value)
        return value
    if value not in SCHEME_FACES:
        raise ValueError(f"Sticker colour '{value}' is neither #RRGGBB nor a scheme face")
    color = colors[value]
    if color is None:
        raise ValueError(f"Scheme face '{value}' has no colour")
    return color
