"""Command that prints the instructions sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .arguments import ArgumentError, parse_arguments
from .sorting import index_stack, is_sorted, sort_stack
from .stacks import PushSwap


def solve(numbers: Iterable[int]) -> list[str]:
    """The instructions that sort ``numbers`` onto stack a."""
    instructions: list[str] = []
    machine = PushSwap(numbers, emit=instructions.append)
    index_stack(machine.a)
    if not is_sorted(machine.a):
        sort_stack(machine)
    return instructions


def main(argv: Sequence[str] | None = None) -> int:
    """Check the arguments, then print one instruction per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return -1
    try:
        numbers = parse_arguments(args)
    except ArgumentError as error:
        print(error)
        return 0
    for instruction in solve(numbers):
        print(instruction)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())