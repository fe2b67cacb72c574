"""Command-line entry point: print the moves that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.sorting import solve
from pushswap.validation import InputError, parse_arguments


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the integers given, write the sorting moves, return the exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    if not values:
        return 1
    for move in solve(values):
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())