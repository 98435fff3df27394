"""Searching routines over sequences of integers."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import islice


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def first_and_last(values: Sequence[int], x: int) -> tuple[int, int]:
    """Return the first and last index of ``x`` in sorted ``values``, or (-1, -1)."""
    lo = bisect_left(values, x)
    if lo == len(values) or values[lo] != x:
        return (-1, -1)
    return (lo, bisect_right(values, x) - 1)


def values_equal_to_index(values: Iterable[int]) -> list[int]:
    """Return the values that equal their 1-based position."""
    return [value for position, value in enumerate(values, start=1) if value == position]


def search_rotated(values: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated sorted sequence; return its index or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == target:
            return mid
        if values[start] <= values[mid]:
            if values[start] <= target < values[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] < target <= values[end]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def count_squares(n: int) -> int:
    """Count the positive perfect squares strictly less than ``n``."""
    if n <= 1:
        return 0
    from math import isqrt

    return isqrt(n - 1)


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and largest value."""
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return (min(items), max(items))


def find_repeating_and_missing(values: Sequence[int]) -> tuple[int, int]:
    """For values drawn from 1..n with one repeat, return (repeating, missing)."""
    seen: set[int] = set()
    repeating = None
    for value in values:
        if value in seen:
            repeating = value
            break
        seen.add(value)
    if repeating is None:
        raise ValueError("no repeated value")
    n = len(values)
    missing = n * (n + 1) // 2 - (sum(values) - repeating)
    return (repeating, missing)


def majority_element(values: Sequence[int]) -> int:
    """Return the value occurring more than len/2 times, or -1."""
    if not values:
        return -1
    candidate = values[0]
    votes = 1
    for value in values:
        votes += 1 if value == candidate else -1
        if votes == 0:
            candidate = value
            votes = 1
    if values.count(candidate) > len(values) // 2:
        return candidate
    return -1


def search_adjacent_within_k(values: Sequence[int], x: int, k: int) -> int:
    """Search a sequence whose neighbours differ by at most ``k``; return index or -1.

    The stride is derived by dividing by ``x``, so searching for zero past a
    non-matching element raises ZeroDivisionError.
    """
    i = 0
    while i < len(values):
        value = values[i]
        if value == x:
            return i
        i += max(1, _trunc_div(value - k, x))
    return -1


def has_pair_with_difference(values: Iterable[int], difference: int) -> bool:
    """Tell whether two elements differ by exactly ``difference``."""
    ordered = sorted(values)
    start, end = 0, 1
    while start < len(ordered) and end < len(ordered):
        diff = ordered[end] - ordered[start]
        if diff == difference:
            return True
        if diff < difference:
            end += 1
        else:
            start += 1
            end = start + 1
    return False


def find_pivot(values: Sequence[int]) -> int:
    """Return the index of the largest element of a rotated sorted sequence.

    A sequence that is not rotated yields -1; a single element yields 0.
    """
    left, right = 0, len(values) - 1
    while left <= right:
        if left == right:
            return left
        middle = (left + right) // 2
        if middle < right and values[middle] > values[middle + 1]:
            return middle
        if middle > left and values[middle] < values[middle - 1]:
            return middle - 1
        if values[left] >= values[middle]:
            right = middle - 1
        else:
            left = middle + 1
    return -1


def kth_of_two_sorted(first: Sequence[int], second: Sequence[int], k: int) -> int:
    """Return the k-th (1-based) element of the union of two sorted sequences."""
    if not 1 <= k <= len(first) + len(second):
        raise ValueError(f"k must lie between 1 and {len(first) + len(second)}")
    return next(islice(heapq.merge(first, second), k - 1, None))


def in_sequence(start: int, target: int, step: int) -> bool:
    """Tell whether ``target`` appears in the sequence start, start+step, ..."""
    if step == 0:
        return start == target
    diff = target - start
    return diff % step == 0 and diff // step >= 0


def trailing_zeros_of_factorial(n: int) -> int:
    """Count the trailing zeros of n!."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def smallest_factorial_number(n: int) -> int:
    """Return the smallest m whose factorial ends in exactly ``n`` zeros."""
    if n < 1:
        raise ValueError("n must be at least 1")
    lo, hi = 0, 5 * n
    while lo < hi:
        mid = (lo + hi) // 2
        if trailing_zeros_of_factorial(mid) >= n:
            hi = mid
        else:
            lo = mid + 1
    if trailing_zeros_of_factorial(lo) != n:
        raise ValueError(f"no factorial ends in exactly {n} zeros")
    return lo