"""The two stacks of the puzzle and the instructions that act on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass

Stack = deque  # top of the stack is at the left end


@dataclass
class Element:
    """A number on a stack, with its rank once the stack has been indexed."""

    value: int
    index: int = -1


def swap(stack: Stack) -> bool:
    """Swap the two top elements. Return False when there are fewer than two."""
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def push(stack_to: Stack, stack_from: Stack) -> bool:
    """Move the top of ``stack_from`` onto ``stack_to``. Return False if empty."""
    if not stack_from:
        return False
    stack_to.appendleft(stack_from.popleft())
    return True


def rotate(stack: Stack) -> bool:
    """Move the top element to the bottom. Return False with fewer than two."""
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def reverse_rotate(stack: Stack) -> bool:
    """Move the bottom element to the top. Return False with fewer than two."""
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _print_line(name: str) -> None:
    sys.stdout.write(name + "\n")


class PushSwap:
    """Stacks ``a`` and ``b``; each successful instruction is passed to ``emit``."""

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a: Stack = deque(Element(value) for value in values)
        self.b: Stack = deque()
        self.emit = emit if emit is not None else _print_line

    def _single(self, operation: Callable[[Stack], bool], stack: Stack, name: str) -> bool:
        if not operation(stack):
            return False
        self.emit(name)
        return True

    def _both(self, operation: Callable[[Stack], bool], name: str) -> bool:
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        operation(self.a)
        operation(self.b)
        self.emit(name)
        return True

    def sa(self) -> bool:
        return self._single(swap, self.a, "sa")

    def sb(self) -> bool:
        return self._single(swap, self.b, "sb")

    def ss(self) -> bool:
        return self._both(swap, "ss")

    def pa(self) -> bool:
        if not push(self.a, self.b):
            return False
        self.emit("pa")
        return True

    def pb(self) -> bool:
        if not push(self.b, self.a):
            return False
        self.emit("pb")
        return True

    def ra(self) -> bool:
        return self._single(rotate, self.a, "ra")

    def rb(self) -> bool:
        return self._single(rotate, self.b, "rb")

    def rr(self) -> bool:
        return self._both(rotate, "rr")

    def rra(self) -> bool:
        return self._single(reverse_rotate, self.a, "rra")

    def rrb(self) -> bool:
        return self._single(reverse_rotate, self.b, "rrb")

    def rrr(self) -> bool:
        return self._both(reverse_rotate, "rrr")

    def values(self) -> list[int]:
        """Values on stack ``a`` from top to bottom."""
        return [element.value for element in self.a]