"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, parse_arguments, validate_numbers
from pushswap.stacks import Operation, Stacks

_OK = "OK"
_KO = "KO"

# Longest mnemonics first, so that "rra" is not taken for "rr".
_BY_LENGTH = sorted(Operation, key=lambda op: len(op.value), reverse=True)


def _match(line: str) -> Operation | None:
    """The operation whose mnemonic begins the line, preferring the longest."""
    for op in _BY_LENGTH:
        if line.startswith(op.value):
            return op
    return None


def is_valid_instruction(line: str) -> bool:
    """Tell whether the line begins with the name of an operation."""
    return _match(line) is not None


def read_instructions(text: str) -> list[str]:
    """Split text into lines and keep those that name an operation."""
    return [line for line in text.splitlines() if is_valid_instruction(line)]


def apply_instruction(stacks: Stacks, instruction: str) -> Operation:
    """Carry out the operation the instruction names and return it.

    An instruction naming no operation raises ValueError; pushing from an
    empty stack raises IndexError.
    """
    op = _match(instruction)
    if op is None:
        raise ValueError(f"unknown instruction: {instruction!r}")
    return stacks.apply(op)


def check(values: Sequence[int], instructions: Iterable[str]) -> bool:
    """Tell whether the instructions leave a sorted and b empty.

    A sequence that pushes from an empty stack does not sort.
    """
    stacks = Stacks.from_values(values)
    try:
        for instruction in instructions:
            apply_instruction(stacks, instruction)
    except IndexError:
        return False
    return not stacks.b and stacks.is_sorted()


def run_checker(args: Sequence[str], text: str) -> str | None:
    """Check the instructions in text against the numbers in args.

    Returns "OK" or "KO", or None when the arguments hold no numbers.
    Malformed, duplicate or already sorted numbers raise InputError.
    """
    values = validate_numbers(parse_arguments(args))
    if not values:
        return None
    return _OK if check(values, read_instructions(text)) else _KO


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from stdin and print OK or KO; Error on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("Error\n")
        return 1
    text = sys.stdin.read()
    try:
        verdict = run_checker(args, text)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if verdict is not None:
        sys.stdout.write(f"{verdict}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())