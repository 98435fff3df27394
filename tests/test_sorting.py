import random

import pytest

from algokit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

CASES = [
    [8, 2, 6, 7, 2, 1, 0, 3],
    [5, 2, 6, 7, 2, 1, 0, 3],
    [5, 222, -6, 7, 2, 1, 0, 3],
    [],
    [1],
    [3, 3, 3],
    list(range(20, 0, -1)),
    list(range(20)),
]


@pytest.mark.parametrize("case", CASES)
def test_sorts_match_builtin(case):
    expected = sorted(case)
    assert bubble_sort(case) == expected
    assert insertion_sort(case) == expected
    assert merge_sort(case) == expected
    assert selection_sort(case) == expected
    assert quick_sort(case) == expected
    assert quick_sort(case, random.Random(7)) == expected


def test_input_is_not_mutated():
    original = [5, 222, -6, 7, 2, 1, 0, 3]
    values = list(original)
    assert bubble_sort(values) == sorted(original)
    assert insertion_sort(values) == sorted(original)
    assert merge_sort(values) == sorted(original)
    assert selection_sort(values) == sorted(original)
    assert quick_sort(values) == sorted(original)
    assert quick_sort(values, random.Random(7)) == sorted(original)
    assert values == original


def test_accepts_iterators():
    values = [9, -1, 4, 4, 0]
    expected = [-1, 0, 4, 4, 9]
    assert bubble_sort(iter(values)) == expected
    assert insertion_sort(iter(values)) == expected
    assert merge_sort(iter(values)) == expected
    assert selection_sort(iter(values)) == expected
    assert quick_sort(iter(values)) == expected
    assert quick_sort(iter(values), random.Random(7)) == expected


@pytest.mark.parametrize("seed", range(10))
def test_quick_sort_random_inputs(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(60)]
    assert quick_sort(values, random.Random(seed + 100)) == sorted(values)
    assert merge_sort(values) == sorted(values)