"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve
from pushswap.stacks import Operation


def run(args: Sequence[str]) -> list[Operation]:
    """Parse the arguments and return the operations that sort them.

    Malformed, duplicate or already sorted numbers raise InputError.
    """
    return solve(parse_arguments(args))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as Error on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        operations = run(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())