# pushswap

Sort a list of integers using two stacks and a small set of operations,
and check whether a given sequence of operations sorts a list.

## The operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of stack a            |
| `sb`  | swap the top two elements of stack b            |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of b onto a                        |
| `pb`  | move the top of a onto b                        |
| `ra`  | rotate a upwards (top goes to the bottom)       |
| `rb`  | rotate b upwards                                |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate a downwards (bottom comes to the top)    |
| `rrb` | rotate b downwards                              |
| `rrr` | `rra` and `rrb` together                        |

Swaps and rotations on a stack holding fewer than two numbers do nothing.

## Installing

```
pip install .
```

## Sorting

Pass the numbers as separate arguments, as one space-separated argument,
or as a mix of both. The first number is the top of stack a.

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

One operation is printed per line on standard output. Lists of two to
five numbers are handled by dedicated short sequences; longer lists are
moved to stack b in rank-ordered chunks and brought back largest first.

`push-swap` writes `Error` to standard error and exits with status 1 when
an argument is neither a number nor a space-separated list of numbers,
when a number appears twice, or when the input is already in order (a
single number counts as in order). Run with no arguments, it exits with
status 1 and prints nothing. Numbers are read as 32-bit signed integers;
values outside that range wrap around.

## Checking

`push-swap-checker` takes the same arguments and reads operations from
standard input, one per line. It prints `OK` if they leave stack a sorted
and stack b empty, and `KO` otherwise; a sequence that pushes from an
empty stack gives `KO`. Lines that do not begin with the name of an
operation are ignored. Bad arguments, or none at all, give `Error` on
standard error and status 1.

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

## Using the library

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

ops = solve([5, 1, 4, 2, 3])
stacks = Stacks.from_values([5, 1, 4, 2, 3])
for op in ops:
    stacks.apply(op)
assert stacks.is_sorted()
```

- `pushswap.parsing`: `parse_arguments`, `validate_numbers`, `parse_int`,
  `is_number`, `has_duplicates`, `is_sorted`; bad input raises
  `InputError` (a `ValueError`).
- `pushswap.stacks`: `Stacks` (stacks `a` and `b` plus the `history` of
  applied operations), the `Operation` enum, `Node` and `rank`.
- `pushswap.sorting`: `solve`, `sort_stacks` and the individual
  strategies (`sort_three`, `sort_four`, `sort_five`, `chunk_sort`).
- `pushswap.checker`: `check`, `run_checker`, `apply_instruction`,
  `read_instructions`.

## Running the tests

```
pip install ".[test]"
pytest
```