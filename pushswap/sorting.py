"""Strategies that sort stack a using only the puzzle's operations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.parsing import validate_numbers
from pushswap.stacks import Node, Operation, Stacks

_SQRT_LIMIT = 46341


def int_sqrt(n: int) -> int:
    """Integer square root as the chunk sizing uses it.

    A perfect square gives its root. Otherwise the search stops at the
    first root whose square exceeds n; that root is returned when it
    divides n, the one below it when it does not. Non-positive input
    gives 1, and values past the 32-bit square limit give 0.
    """
    root = 1
    if n > 0:
        while root * root <= n or root >= _SQRT_LIMIT:
            if root * root == n:
                return root
            if root >= _SQRT_LIMIT:
                return 0
            root += 1
    return root if n % root == 0 else root - 1


def distance_to(stack: Iterable[Node], index: int) -> int:
    """Count the nodes above the first one of the given rank.

    When no node has that rank, the size of the stack is returned.
    """
    count = 0
    for node in stack:
        if node.index == index:
            break
        count += 1
    return count


def sort_three(stacks: Stacks) -> None:
    """Sort the three numbers on stack a, which must not be in order."""
    a = stacks.a
    first, second, third = a[0].index, a[1].index, a[2].index
    if first > second and first > third:
        stacks.apply(Operation.RA)
        if a[0].index > a[1].index:
            stacks.apply(Operation.SA)
    elif second > first > third:
        stacks.apply(Operation.RRA)
    elif second < first < third:
        stacks.apply(Operation.SA)
    elif first < second and first < third:
        stacks.apply(Operation.RRA)
        stacks.apply(Operation.SA)


def _largest_to_top(stacks: Stacks) -> None:
    """Bring the largest number of a five-or-fewer stack a to the top."""
    a = stacks.a
    largest = max(node.data for node in a)
    if a[2].data == largest:
        stacks.apply(Operation.RA)
        stacks.apply(Operation.RA)
    elif len(a) == 5 and a[3].data == largest:
        stacks.apply(Operation.RRA)
        stacks.apply(Operation.RRA)
    elif a[-1].data == largest:
        stacks.apply(Operation.RRA)
    elif a[1].data == largest:
        stacks.apply(Operation.SA)


def sort_four(stacks: Stacks) -> None:
    """Sort the four numbers on stack a, parking the largest on b."""
    _largest_to_top(stacks)
    stacks.apply(Operation.PB)
    if not stacks.is_sorted():
        sort_three(stacks)
    stacks.apply(Operation.PA)
    stacks.apply(Operation.RA)


def sort_five(stacks: Stacks) -> None:
    """Sort the five numbers on stack a, parking the largest on b."""
    _largest_to_top(stacks)
    stacks.apply(Operation.PB)
    if not stacks.is_sorted():
        sort_four(stacks)
    stacks.apply(Operation.PA)
    stacks.apply(Operation.RA)


def fill_b(stacks: Stacks, length: int) -> None:
    """Move every number from a to b in rank-ordered chunks.

    Numbers ranked at or below the count already moved go to the bottom
    of b; those within the chunk range above it stay on top of b; the
    rest are rotated past on a.
    """
    moved = 0
    chunk = (int_sqrt(length) - 1) * 14 // 10
    while stacks.a:
        index = stacks.a[0].index
        if index <= moved:
            stacks.apply(Operation.PB)
            stacks.apply(Operation.RB)
            moved += 1
        elif index <= moved + chunk:
            stacks.apply(Operation.PB)
            moved += 1
        else:
            stacks.apply(Operation.RA)


def drain_b(stacks: Stacks, length: int) -> None:
    """Push the numbers back to a from the largest rank down.

    Each wanted number is brought to the top of b by the shorter way
    round. A rank missing from b raises ValueError.
    """
    while length > 0:
        wanted = length - 1
        forward = distance_to(stacks.b, wanted)
        if forward == len(stacks.b):
            raise ValueError(f"rank {wanted} is not on stack b")
        backward = (length + 3) - forward
        step = Operation.RB if forward <= backward else Operation.RRB
        while stacks.b[0].index != wanted:
            stacks.apply(step)
        stacks.apply(Operation.PA)
        length -= 1


def chunk_sort(stacks: Stacks, length: int) -> None:
    """Sort a stack of any size by filling b in chunks and draining it."""
    fill_b(stacks, length)
    drain_b(stacks, length)


def sort_stacks(stacks: Stacks, length: int) -> None:
    """Sort stack a with the strategy suited to its length."""
    if length == 2:
        stacks.apply(Operation.SA)
    elif length == 3:
        sort_three(stacks)
    elif length == 4:
        sort_four(stacks)
    elif length == 5:
        sort_five(stacks)
    else:
        chunk_sort(stacks, length)


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort the values.

    Values already in order or holding a duplicate raise InputError;
    no values need no operations.
    """
    values = validate_numbers(values)
    stacks = Stacks.from_values(values)
    sort_stacks(stacks, len(values))
    return list(stacks.history)