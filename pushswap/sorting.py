"""Sorting strategies that solve the stacks with the puzzle's instructions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import islice

from pushswap.stacks import Stacks, is_sorted


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for left in range(end):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
        if not swapped:
            break
    return items


def get_pivot(values: Iterable[int], size: int) -> int:
    """Return the value at 70% of the first ``size`` values once sorted.

    Raises ``ValueError`` when ``size`` is not positive or there are no values.
    """
    if size <= 0:
        raise ValueError("pivot needs a positive size")
    items = bubble_sort(islice(values, size))
    if not items:
        raise ValueError("pivot needs a non-empty stack")
    return items[int(size * 0.7)]


def sort_two(stacks: Stacks) -> None:
    """Sort a two-element ``a``."""
    stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of ``a`` in ascending order."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def find_min_pos(values: Sequence[int]) -> int:
    """Return the position of the first smallest value.

    Raises ``ValueError`` on an empty sequence.
    """
    if not values:
        raise ValueError("no minimum in an empty stack")
    smallest = min(values)
    return next(pos for pos, value in enumerate(values) if value == smallest)


def _push_smallest_to_b(stacks: Stacks) -> None:
    for _ in range(2):
        min_pos = find_min_pos(stacks.a)
        if min_pos <= stacks.size_a // 2:
            for _ in range(min_pos):
                stacks.ra()
        else:
            for _ in range(stacks.size_a - min_pos):
                stacks.rra()
        stacks.pb()


def sort_five(stacks: Stacks) -> None:
    """Sort ``a`` by parking its two smallest values on ``b`` when it holds five."""
    if stacks.size_a == 5:
        _push_smallest_to_b(stacks)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def sort_three_b(stacks: Stacks) -> None:
    """Reorder the top three elements of ``b`` before they return to ``a``."""
    top, mid, bot = stacks.b[0], stacks.b[1], stacks.b[2]
    if top < mid and mid > bot and top < bot:
        stacks.rb()
    elif top > mid and mid < bot and top < bot:
        stacks.sb()
    elif top < mid and mid > bot and top > bot:
        stacks.rrb()
    elif top > mid and mid < bot and top > bot:
        stacks.sb()
        stacks.rrb()
    elif top < mid < bot:
        stacks.sb()
        stacks.rb()


def handle_small_a(stacks: Stacks, size: int) -> None:
    """Finish a partition of at most three elements on ``a``."""
    if size == 2 and stacks.a[0] > stacks.a[1]:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)


def handle_small_b(stacks: Stacks, size: int) -> None:
    """Send a partition of at most three elements from ``b`` back to ``a``."""
    if size == 1:
        stacks.pa()
    elif size == 2:
        if stacks.b[0] < stacks.b[1]:
            stacks.sb()
        stacks.pa()
        stacks.pa()
    elif size == 3:
        sort_three_b(stacks)
        stacks.pa()
        stacks.pa()
        stacks.pa()


def _partition_a(stacks: Stacks, size: int, pivot: int) -> tuple[int, int]:
    pushed = rotated = 0
    for _ in range(size):
        if not stacks.a:
            break
        if stacks.a[0] <= pivot:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()
            rotated += 1
    return pushed, rotated


def _partition_b(stacks: Stacks, size: int, pivot: int) -> tuple[int, int]:
    pushed = rotated = 0
    for _ in range(size):
        if not stacks.b:
            break
        if stacks.b[0] >= pivot:
            stacks.pa()
            pushed += 1
        else:
            stacks.rb()
            rotated += 1
    return pushed, rotated


def hybrid_sort(stacks: Stacks, size: int, is_stack_a: bool) -> None:
    """Recursively partition the top ``size`` elements of ``a`` or ``b`` around a pivot."""
    if size <= 3:
        if is_stack_a:
            handle_small_a(stacks, size)
        else:
            handle_small_b(stacks, size)
        return

    if is_stack_a:
        pivot = get_pivot(stacks.a, size)
        pushed, rotated = _partition_a(stacks, size, pivot)
        for _ in range(rotated):
            if stacks.size_a <= 1:
                break
            stacks.rra()
        hybrid_sort(stacks, rotated, True)
        hybrid_sort(stacks, pushed, False)
    else:
        pivot = get_pivot(stacks.b, size)
        pushed, rotated = _partition_b(stacks, size, pivot)
        for _ in range(rotated):
            if stacks.size_b <= 1:
                break
            stacks.rrb()
        hybrid_sort(stacks, pushed, True)
        hybrid_sort(stacks, rotated, False)


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a`` unless it already is."""
    if is_sorted(stacks.a):
        return
    hybrid_sort(stacks, stacks.size_a, True)