import io

import pytest

from pushswap.checker import (
    apply_instruction,
    check,
    is_valid_instruction,
    main,
    read_instructions,
    run_checker,
)
from pushswap.parsing import InputError
from pushswap.sorting import solve
from pushswap.stacks import Operation, Stacks


@pytest.mark.parametrize(
    "line", ["pa", "pb", "ra", "rb", "rr", "sa", "sb", "ss", "rra", "rrb", "rrr"]
)
def test_every_mnemonic_is_valid(line):
    assert is_valid_instruction(line) is True


@pytest.mark.parametrize("line", ["", "p", "xx", "ab", " sa"])
def test_invalid_lines(line):
    assert is_valid_instruction(line) is False


def test_read_instructions_drops_invalid_lines():
    assert read_instructions("sa\nfoo\nrra\n\npb\n") == ["sa", "rra", "pb"]


def test_apply_prefers_longest_mnemonic():
    stacks = Stacks.from_values([3, 1, 2])
    assert apply_instruction(stacks, "rra") is Operation.RRA
    assert apply_instruction(stacks, "rrr") is Operation.RRR
    assert apply_instruction(stacks, "rr") is Operation.RR


def test_apply_swap_twice_restores_stack():
    values = [5, 9, 1, 4]
    stacks = Stacks.from_values(values)
    apply_instruction(stacks, "sa")
    assert stacks.values_a() != values
    apply_instruction(stacks, "sa")
    assert stacks.values_a() == values


def test_apply_rotations_are_inverse():
    values = [7, 3, 8, 2, 6]
    stacks = Stacks.from_values(values)
    apply_instruction(stacks, "ra")
    apply_instruction(stacks, "rra")
    assert stacks.values_a() == values


def test_apply_push_round_trip():
    values = [4, 2, 9]
    stacks = Stacks.from_values(values)
    apply_instruction(stacks, "pb")
    assert stacks.values_b() == [4]
    apply_instruction(stacks, "pa")
    assert stacks.values_a() == values
    assert stacks.values_b() == []


def test_apply_unknown_instruction_raises():
    with pytest.raises(ValueError):
        apply_instruction(Stacks.from_values([1, 2]), "xyz")


def test_apply_push_from_empty_raises():
    with pytest.raises(IndexError):
        apply_instruction(Stacks.from_values([1, 2]), "pa")


def test_check_swap_sorts_pair():
    assert check([2, 1, 3], ["sa"]) is True


def test_check_no_instructions_on_unsorted():
    assert check([2, 1, 3], []) is False


def test_check_nonempty_b_is_ko():
    assert check([1, 2, 3], ["pb"]) is False


def test_check_push_from_empty_is_ko():
    assert check([2, 1], ["pa"]) is False


@pytest.mark.parametrize(
    "values",
    [[2, 1], [3, 2, 1], [4, 1, 3, 2], [5, 2, 4, 1, 3], list(range(30, 0, -1))],
)
def test_check_accepts_solver_output(values):
    instructions = [str(op) for op in solve(values)]
    assert check(values, instructions) is True


def test_run_checker_ok_with_solver_output():
    args = ["3", "-7", "12", "0", "5", "8"]
    ops = solve([int(a) for a in args])
    text = "".join(f"{op}\n" for op in ops)
    assert run_checker(args, text) == "OK"


def test_run_checker_ko():
    assert run_checker(["2 1 3"], "ra\n") == "KO"


def test_run_checker_sorted_input_raises():
    with pytest.raises(InputError):
        run_checker(["1", "2", "3"], "")


def test_run_checker_duplicates_raise():
    with pytest.raises(InputError):
        run_checker(["3", "1", "3"], "sa\n")


def test_run_checker_bad_argument_raises():
    with pytest.raises(InputError):
        run_checker(["abc"], "")


def test_run_checker_no_numbers_gives_none():
    assert run_checker([" "], "sa\n") is None


def test_main_prints_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_prints_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["1", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments_is_error(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\n"