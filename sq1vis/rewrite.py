from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterator, Mapping

MAX_REWRITE_PASSES = 64


class RewriteTable(Mapping[str, str]):
    """Immutable token -> replacement table for :func:`rewrite`.

    Keys carry a leading and a trailing space so they only ever match whole
    tokens. The alternation is built longest key first, so a short key can
    never pre-empt a longer one starting at the same position.
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        for key in entries:
            if len(key) < 3 or not key.startswith(" ") or not key.endswith(" "):
                raise ValueError(f"Rewrite key must be space-padded, got {key!r}")
        self._entries = MappingProxyType(dict(entries))
        ordered = sorted(self._entries, key=len, reverse=True)
        self.pattern: re.Pattern[str] | None = (
            re.compile("|".join(re.escape(key) for key in ordered)) if ordered else None
        )

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def has_token(self, token: str) -> bool:
        return f" {token} " in self._entries


def rewrite(text: str, table: RewriteTable, max_passes: int = MAX_REWRITE_PASSES) -> str:
    """Replaces table tokens until a full pass changes nothing.

    A match consumes its trailing space, so adjacent tokens only get picked up
    on the next pass; replacements may also introduce further table tokens.
    """
    if table.pattern is None:
        return text

    subject = f" {text} "
    for _ in range(max_passes):
        replaced = table.pattern.sub(lambda match: table[match.group(0)], subject)
        if replaced == subject:
            return subject[1:-1]
        subject = replaced
    raise RuntimeError(f"Rewrite table did not converge within {max_passes} passes")


# Letter-named turns (Karnaukh notation) down to numeric top,bottom pairs.
# Compound names expand into simpler names, which the next passes resolve.
KARN_TABLE = RewriteTable(
    {
        " U4 ": " U U' U U' ",
        " U4' ": " U' U U' U ",
        " D4 ": " D D' D D' ",
        " D4' ": " D' D D' D ",
        " u4 ": " u u' u u' ",
        " u4' ": " u' u u' u ",
        " d4 ": " d d' d d' ",
        " d4' ": " d' d d' d ",
        " U3 ": " U U' U ",
        " U3' ": " U' U U' ",
        " D3 ": " D D' D ",
        " D3' ": " D' D D' ",
        " u3 ": " u u' u ",
        " u3' ": " u' u u' ",
        " d3 ": " d d' d ",
        " d3' ": " d' d d' ",
        " F3 ": " F F' F ",
        " F3' ": " F' F F' ",
        " f3 ": " f f' f ",
        " f3' ": " f' f f' ",
        " W ": " U U' ",
        " W' ": " U' U ",
        " B ": " D D' ",
        " B' ": " D' D ",
        " w ": " u u' ",
        " w' ": " u' u ",
        " b ": " d d' ",
        " b' ": " d' d ",
        " F2 ": " F F' ",
        " F2' ": " F' F ",
        " f2 ": " f f' ",
        " f2' ": " f' f ",
        " UU ": " U U ",
        " UU' ": " U' U' ",
        " DD ": " D D ",
        " DD' ": " D' D' ",
        " U2 ": " 6,0 ",
        " U2D ": " 6,3 ",
        " U2D' ": " 6,-3 ",
        " U2D2 ": " 6,6 ",
        " D2 ": " 0,6 ",
        " UD2 ": " 3,6 ",
        " U'D2 ": " -3,6 ",
        " U ": " 3,0 ",
        " U' ": " -3,0 ",
        " D ": " 0,3 ",
        " D' ": " 0,-3 ",
        " E ": " 3,-3 ",
        " E' ": " -3,3 ",
        " e ": " 3,3 ",
        " e' ": " -3,-3 ",
        " u ": " 2,-1 ",
        " u' ": " -2,1 ",
        " d ": " -1,2 ",
        " d' ": " 1,-2 ",
        " F ": " 4,1 ",
        " F' ": " -4,-1 ",
        " f ": " 1,4 ",
        " f' ": " -1,-4 ",
        " T ": " 2,-4 ",
        " T' ": " -2,4 ",
        " t ": " 4,-2 ",
        " t' ": " -4,2 ",
        " m ": " 2,2 ",
        " m' ": " -2,-2 ",
        " M ": " 1,1 ",
        " M' ": " -1,-1 ",
        " u2 ": " 5,-1 ",
        " u2' ": " -5,1 ",
        " d2 ": " -1,5 ",
        " d2' ": " 1,-5 ",
        " K ": " 5,2 ",
        " K' ": " -5,-2 ",
        " k ": " 2,5 ",
        " k' ": " -2,-5 ",
    }
)
