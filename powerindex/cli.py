"""Command line entry point for Banzhaf power index analysis."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from powerindex.analysis import banzhaf
from powerindex.display import render_text


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="powerindex",
        description="Compute the Banzhaf power index of a weighted voting game.",
    )
    parser.add_argument("quota", type=int, help="votes needed to win (K)")
    parser.add_argument("weights", type=int, nargs="+", help="votes of each voter")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analysis and print the report; returns the exit status."""
    args = _parser().parse_args(argv)
    if args.quota <= 0:
        print("Error: K debe ser mayor que 0", file=sys.stderr)
        return 1
    try:
        result = banzhaf(args.weights, args.quota)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(render_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())