from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, ItemsView, Mapping

from sq1vis.errors import UnknownMacroError
from sq1vis.formula import ScrambleParser
from sq1vis.models import AlignmentState, Turn
from sq1vis.rewrite import KARN_TABLE, RewriteTable, rewrite

ALIGNMENT_FREE = ""
ALIGNMENT_SUFFIXES = ("00", "10", "0-1", "1-1")

_SLASH_PADDING = re.compile(r" */ *")


class ShorthandTable:
    """Composite macro name + alignment suffix -> Karnaukh fragment.

    Fragments are wrapped in slashes: a macro always starts and ends on a
    layer swap.
    """

    def __init__(self, entries: Mapping[tuple[str, str], str]) -> None:
        for name, suffix in entries:
            if suffix != ALIGNMENT_FREE and suffix not in ALIGNMENT_SUFFIXES:
                raise ValueError(f"Invalid alignment suffix '{suffix}' for shorthand '{name}'")
        self._entries = MappingProxyType(dict(entries))
        self.alignment_free = frozenset(
            name for name, suffix in self._entries if suffix == ALIGNMENT_FREE
        )

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> ItemsView[tuple[str, str], str]:
        return self._entries.items()

    def lookup(self, name: str, alignment: AlignmentState) -> str:
        key = name.lower()
        if key in self.alignment_free:
            return self._entries[(key, ALIGNMENT_FREE)]
        fragment = self._entries.get((key, alignment.suffix))
        if fragment is None:
            raise UnknownMacroError(name, alignment.suffix)
        return fragment


SHORTHAND_TABLE = ShorthandTable(
    {
        ("bjj", ALIGNMENT_FREE): "/U' e D'/",
        ("fjj", ALIGNMENT_FREE): "/U e' D/",
        ("nn", ALIGNMENT_FREE): "/E E'/",
        ("bpj", "10"): "/d m' U/",
        ("bpj", "0-1"): "/u' m D'/",
        ("fpj", "10"): "/u m' D/",
        ("fpj", "0-1"): "/d' m U'/",
        ("aa", "10"): "/u m' u T'/",
        ("aa", "0-1"): "/U m' U t'/",
        ("fadj", "10"): "/D M' d'/",
        ("dadj", "10"): "/D M' d'/",
        ("fadj", "0-1"): "/U' M u/",
        ("u'adj", "0-1"): "/U' M u/",
        ("badj", "10"): "/U M u'/",
        ("uadj", "10"): "/U M u'/",
        ("badj", "0-1"): "/D' M d/",
        ("d'adj", "0-1"): "/D' M d/",
        ("bb", "10"): "/T u' e U'/",
        ("bb", "0-1"): "/t d e' D/",
        ("fdd", "10"): "/D e' d t/",
        ("fdd", "0-1"): "/U' e u' T/",
        ("bdd", "10"): "/U e' u T'/",
        ("bdd", "0-1"): "/D' e d' t'/",
        ("ff", "10"): "/d m' d M E/",
        ("fv", "10"): "/d4/",
        ("fv", "0-1"): "/d4'/",
        ("vf", "10"): "/u4/",
        ("vf", "0-1"): "/u4'/",
        ("jf", "10"): "/w D' u T'/",
        ("jf", "0-1"): "/w' D u' T/",
        ("fj", "10"): "/b U' d t/",
        ("fj", "0-1"): "/b' U d' t'/",
        ("jr", "00"): "/e' w e/",
        ("jr", "10"): "/e' b e/",
        ("jr", "0-1"): "/e' w' e/",
        ("jr", "1-1"): "/e' b' e/",
        ("rj", "00"): "/e b' e'/",
        ("rj", "10"): "/e w e'/",
        ("rj", "0-1"): "/e b' e'/",
        ("rj", "1-1"): "/e w e'/",
        ("jv", "10"): "/b D d d2'/",
        ("jv", "0-1"): "/b' D' d' d2/",
        ("vj", "10"): "/w U u u2'/",
        ("vj", "0-1"): "/w' U' u' u2/",
        ("kk", "10"): "/u m' U E'/",
        ("kk", "0-1"): "/U m' u E'/",
        ("opp", "10"): "/u2 u2'/",
        ("opp", "0-1"): "/u2' u2/",
        ("pn", "10"): "/T T'/",
        ("pn", "0-1"): "/t t'/",
        ("px", "10"): "/f' d3' f'/",
        ("px", "0-1"): "/f d3 f/",
        ("xp", "10"): "/F' u3' F'/",
        ("xp", "0-1"): "/F u3 F/",
        ("tt", "10"): "/d m' F' u2'/",
        ("fss", "10"): "/u M D' E'/",
        ("fss", "0-1"): "/D' M u E'/",
        ("bss", "10"): "/D M' u' E/",
        ("bss", "0-1"): "/U' M d E/",
        ("vv", "10"): "/u M u m' E'/",
        ("zz", "10"): "/u M t' M D'/",
        ("zz", "0-1"): "/D' M t' M u/",
    }
)


def primitive_turns_of(fragment: str, table: RewriteTable = KARN_TABLE) -> list[Turn]:
    """Canonical turns inside a notation fragment, in order; swaps are skipped."""
    flattened = " ".join(fragment.replace("/", " ").split())
    canonical = rewrite(flattened, table)
    return [move for move in ScrambleParser.parse(canonical) if isinstance(move, Turn)]


def track_alignment(turns: Iterable[Turn], start: AlignmentState | None = None) -> AlignmentState:
    alignment = start if start is not None else AlignmentState()
    for turn in turns:
        alignment = alignment.advance(turn)
    return alignment


def _needs_alignment(tokens: list[str], rewrite_table: RewriteTable) -> bool:
    return any(token and "," not in token and not rewrite_table.has_token(token) for token in tokens)


def _canonicalize(scramble: str, rewrite_table: RewriteTable) -> str:
    return rewrite(scramble, rewrite_table).replace(" ", "/")


def expand_shorthands(
    scramble: str,
    table: ShorthandTable = SHORTHAND_TABLE,
    rewrite_table: RewriteTable = KARN_TABLE,
) -> str:
    """Expands composite macros and returns ``/``-joined numeric pairs.

    ``scramble`` is flattened, space-separated notation (see
    :func:`sq1vis.utils.flatten_notation`). Every token boundary becomes a
    layer swap. Macros that have alignment variants are resolved against the
    parity of the turns executed so far.
    """
    tokens = scramble.split(" ")
    if not _needs_alignment(tokens, rewrite_table):
        return _canonicalize(scramble, rewrite_table)

    alignment = AlignmentState()
    for index, token in enumerate(tokens):
        if not token:
            continue
        if "," in token:
            turn = ScrambleParser.parse_turn(token)
            if turn is not None:
                alignment = alignment.advance(turn)
            continue
        if rewrite_table.has_token(token):
            alignment = track_alignment(primitive_turns_of(token, rewrite_table), alignment)
            continue
        fragment = table.lookup(token, alignment)
        tokens[index] = fragment
        alignment = track_alignment(primitive_turns_of(fragment, rewrite_table), alignment)

    expanded = _SLASH_PADDING.sub("/", " ".join(tokens))
    # Back-to-back macros meet on two swaps; keep them apart with a null turn.
    expanded = expanded.replace("//", "/0,0/").replace("/", " ")
    return _canonicalize(expanded, rewrite_table)
