import random

import pytest

from pushswap.cli import main, solve
from pushswap.stacks import PushSwap


def _replay(values, instructions):
    machine = PushSwap(values, emit=lambda _name: None)
    for name in instructions:
        assert getattr(machine, name)() is True
    return machine


def test_solve_two():
    assert solve([2, 1]) == ["sa"]


def test_solve_sorted_is_empty():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []


@pytest.mark.parametrize("size", [3, 5, 8, 40])
def test_solve_sorts(size):
    values = random.Random(size).sample(range(-500, 500), size)
    machine = _replay(values, solve(values))
    assert machine.values() == sorted(values)
    assert not machine.b


def test_main_without_arguments():
    assert main([]) == -1


def test_main_single_string(capsys):
    assert main(["3 2 5 1 4"]) == 0
    lines = capsys.readouterr().out.split()
    assert _replay([3, 2, 5, 1, 4], lines).values() == [1, 2, 3, 4, 5]


def test_main_many_arguments(capsys):
    args = ["9", "-4", "0", "12", "7", "3", "-8"]
    assert main(args) == 0
    lines = capsys.readouterr().out.split()
    values = [int(arg) for arg in args]
    assert _replay(values, lines).values() == sorted(values)


def test_main_sorted_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["2147483648"], ["1 2 2"], ["1", "x2"]],
)
def test_main_rejects_bad_input(args, capsys):
    assert main(args) == 0
    assert capsys.readouterr().out == "Error\n"