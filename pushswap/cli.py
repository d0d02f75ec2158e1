"""Command line: print the instructions that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.algorithm import solve
from pushswap.parsing import InputError, parse_arguments


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on ``argv`` (default: the process arguments); return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        moves = solve(values)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if moves:
        sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())