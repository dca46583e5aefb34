"""Sorting strategies for the push_swap puzzle: small hand-made sorts and radix."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .stacks import Element, PushSwap


def get_next_min(elements: Iterable[Element]) -> Element | None:
    """The smallest-valued element not yet indexed (the first one on ties)."""
    smallest: Element | None = None
    for element in elements:
        if element.index == -1 and (smallest is None or element.value < smallest.value):
            smallest = element
    return smallest


def index_stack(elements: Iterable[Element]) -> None:
    """Give every unindexed element its rank by value, starting at 0."""
    unindexed = [element for element in elements if element.index == -1]
    for rank, element in enumerate(sorted(unindexed, key=lambda item: item.value)):
        element.index = rank


def is_sorted(elements: Iterable[Element]) -> bool:
    """True when values never decrease from top to bottom."""
    items = list(elements)
    return all(upper.value <= lower.value for upper, lower in zip(items, items[1:]))


def get_min(elements: Sequence[Element], excluded: int) -> int:
    """Smallest index, starting from the top's and skipping ``excluded`` below it."""
    if not elements:
        raise ValueError("empty stack has no minimum")
    iterator = iter(elements)
    smallest = next(iterator).index
    for element in iterator:
        if element.index < smallest and element.index != excluded:
            smallest = element.index
    return smallest


def get_distance(elements: Iterable[Element], index: int) -> int:
    """Position of the element with ``index`` from the top; the size if absent."""
    distance = 0
    for element in elements:
        if element.index == index:
            break
        distance += 1
    return distance


def make_top(machine: PushSwap, distance: int) -> None:
    """Bring the element ``distance`` places down stack a to its top."""
    if distance == 0:
        return
    size = len(machine.a)
    if distance <= size // 2:
        for _ in range(distance):
            machine.ra()
    else:
        for _ in range(size - distance):
            machine.rra()


def max_bits(elements: Iterable[Element]) -> int:
    """Number of bits needed for the largest index on the stack."""
    indices = [element.index for element in elements]
    if not indices:
        raise ValueError("empty stack has no bits")
    largest = max(indices)
    if largest < 0:
        raise ValueError("stack has not been indexed")
    return largest.bit_length()


def _rotate_swap_back(machine: PushSwap) -> None:
    machine.ra()
    machine.sa()
    machine.rra()


def _swap_if_needed(machine: PushSwap, smallest: int, next_smallest: int) -> None:
    top, second = machine.a[0], machine.a[1]
    if top.index == smallest and second.index != next_smallest:
        _rotate_swap_back(machine)
    elif top.index == next_smallest:
        if second.index == smallest:
            machine.sa()
        else:
            machine.rra()
    elif second.index == smallest:
        machine.ra()
    else:
        machine.sa()
        machine.rra()


def sort_3(machine: PushSwap) -> None:
    """Sort three elements on stack a."""
    smallest = get_min(machine.a, -1)
    next_smallest = get_min(machine.a, smallest)
    if is_sorted(machine.a):
        return
    _swap_if_needed(machine, smallest, next_smallest)


def _bring_min_up(machine: PushSwap, moves: dict[int, tuple[str, ...]]) -> None:
    distance = get_distance(machine.a, get_min(machine.a, -1))
    for name in moves.get(distance, ()):
        getattr(machine, name)()


def sort_4(machine: PushSwap) -> None:
    """Sort four elements on stack a, using stack b for the smallest."""
    if is_sorted(machine.a):
        return
    _bring_min_up(machine, {1: ("ra",), 2: ("ra", "ra"), 3: ("rra",)})
    if is_sorted(machine.a):
        return
    machine.pb()
    sort_3(machine)
    machine.pa()


def sort_5(machine: PushSwap) -> None:
    """Sort five elements on stack a, using stack b for the smallest."""
    _bring_min_up(
        machine,
        {1: ("ra",), 2: ("ra", "ra"), 3: ("rra", "rra"), 4: ("rra",)},
    )
    if is_sorted(machine.a):
        return
    machine.pb()
    sort_4(machine)
    machine.pa()


def simple_sort(machine: PushSwap) -> None:
    """Sort stack a when it holds five elements or fewer."""
    size = len(machine.a)
    if is_sorted(machine.a) or size <= 1:
        return
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_3(machine)
    elif size == 4:
        sort_4(machine)
    elif size == 5:
        sort_5(machine)


def radix_sort(machine: PushSwap) -> None:
    """Binary radix sort of stack a by index, using stack b as the zero bucket."""
    size = len(machine.a)
    for bit in range(max_bits(machine.a)):
        for _ in range(size):
            if (machine.a[0].index >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while machine.b:
            machine.pa()


def sort_stack(machine: PushSwap) -> None:
    """Pick the small sort for up to five elements, radix sort otherwise."""
    if len(machine.a) <= 5:
        simple_sort(machine)
    else:
        radix_sort(machine)