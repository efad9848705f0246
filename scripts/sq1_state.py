#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sq1vis.compiler import CompilerConfig, expand_scramble, state_string
from sq1vis.errors import ScrambleError


def _resolve_mode(args: argparse.Namespace) -> tuple[str, str]:
    if args.scramble is not None:
        return "scramble", args.scramble
    if args.alg is not None:
        return "inverse", args.alg
    return "hex", args.hex


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compile a Square-1 scramble into its 24-digit state encoding."
    )

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument("--scramble", help="Scramble to apply (pairs, Karnaukh or shorthands)")
    source_group.add_argument("--alg", help="Algorithm; shows the case it solves (inverse)")
    source_group.add_argument("--hex", help="State encoding, e.g. 011233455677|998bbaddcffe")

    parser.add_argument("--separator", default="|", choices=("|", "/"), help="Layer separator in the output")
    parser.add_argument("--expanded", action="store_true", help="Also print the expanded scramble")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = CompilerConfig(separator=args.separator)
    mode, text = _resolve_mode(args)

    try:
        if args.expanded and mode != "hex":
            print(f"Expanded: {expand_scramble(text)}")
        print(state_string(text, mode=mode, config=config))
    except ScrambleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
