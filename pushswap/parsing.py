"""Parsing and validation of the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_INT_BITS = 32
_WHITESPACE_AND_DIGITS = re.compile(r"[\t\n\r\v\f ]*([+-]?)([0-9]*)")
_NUMBER = re.compile(r"[+-]?[0-9]*")


class InputError(ValueError):
    """Raised when the input numbers are missing, malformed or unusable."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, wrapping around."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def parse_int(text: str) -> int:
    """Read a leading integer from text, as a 32-bit signed value.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0.
    Values outside the 32-bit range wrap around.
    """
    match = _WHITESPACE_AND_DIGITS.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    magnitude = _wrap_int32(int(digits))
    return _wrap_int32(-magnitude if sign == "-" else magnitude)


def is_number(text: str) -> bool:
    """Tell whether text is an optional sign followed only by digits."""
    return text != "" and _NUMBER.fullmatch(text) is not None


def has_space(text: str) -> bool:
    """Tell whether text holds at least one space."""
    return " " in text


def split_words(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers they hold.

    Each argument is either a single number or a space-separated list of
    numbers. Any other argument, or no argument at all, raises InputError.
    """
    args = list(args)
    if not args:
        raise InputError()
    values: list[int] = []
    for arg in args:
        if is_number(arg):
            values.append(parse_int(arg))
        elif has_space(arg):
            values.extend(parse_int(word) for word in split_words(arg, " "))
        else:
            raise InputError()
    return values


def has_duplicates(values: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether values are in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def validate_numbers(values: Sequence[int]) -> list[int]:
    """Check that there is sorting to do and return the values.

    An empty list passes. A list already in order (a single number
    included) or one holding a duplicate raises InputError.
    """
    values = list(values)
    if values and (is_sorted(values) or has_duplicates(values)):
        raise InputError()
    return values