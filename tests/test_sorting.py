import random
from collections import Counter
from itertools import permutations

import pytest

from pushswap.stacks import Stacks
from pushswap.sorting import (
    bubble_sort,
    find_min_pos,
    get_pivot,
    handle_small_a,
    handle_small_b,
    hybrid_sort,
    sort_five,
    sort_stack,
    sort_three,
    sort_three_b,
    sort_two,
)


def _replay(values, operations):
    stacks = Stacks.from_values(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def test_bubble_sort_orders_values():
    assert bubble_sort([3, -1, 2, 0]) == [-1, 0, 2, 3]


def test_bubble_sort_keeps_input():
    values = [2, 1]
    bubble_sort(values)
    assert values == [2, 1]


def test_bubble_sort_empty():
    assert bubble_sort([]) == []


def test_get_pivot_value():
    assert get_pivot([5, 1, 4, 2, 3], 5) == 4


def test_get_pivot_is_member_of_window():
    values = [9, 40, 3, 17, 25, 1, 100]
    pivot = get_pivot(values, 5)
    assert pivot in values[:5]


@pytest.mark.parametrize("values, size", [([], 3), ([1, 2], 0), ([1], -1)])
def test_get_pivot_errors(values, size):
    with pytest.raises(ValueError):
        get_pivot(values, size)


def test_find_min_pos_first_occurrence():
    assert find_min_pos([4, 2, 7, 2]) == 1


def test_find_min_pos_empty():
    with pytest.raises(ValueError):
        find_min_pos([])


def test_sort_two():
    stacks = Stacks.from_values([2, 1])
    sort_two(stacks)
    assert list(stacks.a) == [1, 2]
    assert stacks.operations == ["sa"]


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    stacks = Stacks.from_values(values)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.operations) <= 2


@pytest.mark.parametrize("values", list(permutations([10, 20, 30, 40, 50])))
def test_sort_five_all_orders(values):
    stacks = Stacks.from_values(values)
    sort_five(stacks)
    assert list(stacks.a) == [10, 20, 30, 40, 50]
    assert stacks.size_b == 0


def test_sort_three_b_descending_branch():
    stacks = Stacks(b=[1, 3, 2])
    sort_three_b(stacks)
    assert list(stacks.b) == [3, 2, 1]
    assert stacks.operations == ["rb"]


def test_sort_three_b_already_descending():
    stacks = Stacks(b=[3, 2, 1])
    sort_three_b(stacks)
    assert list(stacks.b) == [3, 2, 1]
    assert stacks.operations == []


def test_sort_three_b_swap_branch():
    stacks = Stacks(b=[2, 1, 3])
    sort_three_b(stacks)
    assert stacks.operations == ["sb"]


def test_handle_small_a_two():
    stacks = Stacks.from_values([5, 4, 9])
    handle_small_a(stacks, 2)
    assert list(stacks.a) == [4, 5, 9]


def test_handle_small_a_one_does_nothing():
    stacks = Stacks.from_values([5, 4])
    handle_small_a(stacks, 1)
    assert list(stacks.a) == [5, 4]
    assert stacks.operations == []


def test_handle_small_b_one():
    stacks = Stacks(a=[8], b=[3])
    handle_small_b(stacks, 1)
    assert list(stacks.a) == [3, 8]
    assert stacks.size_b == 0


def test_handle_small_b_two():
    stacks = Stacks(b=[1, 2])
    handle_small_b(stacks, 2)
    assert list(stacks.a) == [1, 2]
    assert stacks.size_b == 0


def test_hybrid_sort_small_a():
    stacks = Stacks.from_values([3, 1, 2])
    hybrid_sort(stacks, 3, True)
    assert list(stacks.a) == [1, 2, 3]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_hybrid_sort_invariants(seed):
    values = list(range(-10, 15))
    random.Random(seed).shuffle(values)
    stacks = Stacks.from_values(values)
    hybrid_sort(stacks, stacks.size_a, True)
    assert stacks.size_b == 0
    assert Counter(stacks.a) == Counter(values)
    replayed = _replay(values, stacks.operations)
    assert replayed.a == stacks.a
    assert replayed.b == stacks.b


def test_sort_stack_leaves_sorted_input_alone():
    stacks = Stacks.from_values([1, 2, 3, 4, 5, 6])
    sort_stack(stacks)
    assert stacks.operations == []
    assert list(stacks.a) == [1, 2, 3, 4, 5, 6]


def test_sort_stack_sorts_three():
    stacks = Stacks.from_values([2, 3, 1])
    sort_stack(stacks)
    assert list(stacks.a) == [1, 2, 3]