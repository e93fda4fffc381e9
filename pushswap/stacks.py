"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from pushswap.parsing import is_sorted as _values_sorted


@dataclass
class Node:
    """One number on a stack, with its rank among all the numbers."""

    data: int
    index: int = 0


class Operation(str, Enum):
    """The moves allowed on the stacks, named as they are written out."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def rank(values: Sequence[int]) -> list[int]:
    """Give each value the count of values strictly smaller than it."""
    ordered = sorted(values)
    positions: dict[int, int] = {}
    for position, value in enumerate(ordered):
        positions.setdefault(value, position)
    return [positions[value] for value in values]


def _swap(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _rotate(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _push(source: deque[Node], target: deque[Node]) -> None:
    if not source:
        raise IndexError("cannot push from an empty stack")
    target.appendleft(source.popleft())


@dataclass
class Stacks:
    """Stacks a and b, top first, with the operations applied so far."""

    a: deque[Node] = field(default_factory=deque)
    b: deque[Node] = field(default_factory=deque)
    history: list[Operation] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Stacks:
        """Put the values on stack a, first value on top, ranked."""
        values = list(values)
        nodes = (Node(value, index) for value, index in zip(values, rank(values)))
        return cls(a=deque(nodes))

    def apply(self, op: Operation | str) -> Operation:
        """Carry out one operation, record it and return it.

        Swaps and rotations on a stack of fewer than two numbers do
        nothing; pushing from an empty stack raises IndexError.
        """
        op = Operation(op)
        if op is Operation.SA:
            _swap(self.a)
        elif op is Operation.SB:
            _swap(self.b)
        elif op is Operation.SS:
            _swap(self.a)
            _swap(self.b)
        elif op is Operation.PA:
            _push(self.b, self.a)
        elif op is Operation.PB:
            _push(self.a, self.b)
        elif op is Operation.RA:
            _rotate(self.a)
        elif op is Operation.RB:
            _rotate(self.b)
        elif op is Operation.RR:
            _rotate(self.a)
            _rotate(self.b)
        elif op is Operation.RRA:
            _reverse_rotate(self.a)
        elif op is Operation.RRB:
            _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)
        self.history.append(op)
        return op

    def values_a(self) -> list[int]:
        """The numbers on stack a, top first."""
        return [node.data for node in self.a]

    def values_b(self) -> list[int]:
        """The numbers on stack b, top first."""
        return [node.data for node in self.b]

    def is_sorted(self) -> bool:
        """Tell whether stack a is in non-decreasing order from the top."""
        return _values_sorted(self.values_a())