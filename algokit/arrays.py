"""Array problems: sums, products, orderings and scheduling."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence


def four_sum(values: Iterable[int], total: int) -> list[tuple[int, int, int, int]]:
    """Return the distinct sorted quadruples summing to ``total``, in order."""
    ordered = sorted(values)
    n = len(ordered)
    found: set[tuple[int, int, int, int]] = set()
    for i in range(n - 3):
        for j in range(i + 1, n - 2):
            lo, hi = j + 1, n - 1
            while lo < hi:
                quad = (ordered[i], ordered[j], ordered[lo], ordered[hi])
                s = sum(quad)
                if s == total:
                    found.add(quad)
                    lo += 1
                    hi -= 1
                elif s < total:
                    lo += 1
                else:
                    hi -= 1
    return sorted(found)


def max_non_adjacent_sum(values: Iterable[int]) -> int:
    """Largest sum of elements of which no two are adjacent (at least one taken)."""
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("max_non_adjacent_sum() of an empty sequence") from None
    before, best = 0, first
    for value in it:
        before, best = best, max(best, value + before)
    return best


def count_triplets_below(values: Iterable[int], limit: int) -> int:
    """Count index triplets whose sum is strictly less than ``limit``."""
    ordered = sorted(values)
    n = len(ordered)
    count = 0
    for i in range(n - 2):
        remaining = limit - ordered[i]
        lo, hi = i + 1, n - 1
        while lo < hi:
            if ordered[lo] + ordered[hi] < remaining:
                count += hi - lo
                lo += 1
            else:
                hi -= 1
    return count


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted iterables into one sorted list."""
    return list(heapq.merge(first, second))


def count_zero_sum_subarrays(values: Iterable[int]) -> int:
    """Count contiguous subarrays summing to zero."""
    prefix_counts = Counter({0: 1})
    running = 0
    count = 0
    for value in values:
        running += value
        count += prefix_counts[running]
        prefix_counts[running] += 1
    return count


def product_except_self(values: Iterable[int]) -> list[int]:
    """For each position, the product of every other element."""
    items = list(values)
    zeros = items.count(0)
    nonzero_product = math.prod(v for v in items if v != 0)
    total = nonzero_product if zeros == 0 else 0
    result = []
    for value in items:
        if zeros > 1:
            result.append(0)
        elif value != 0 and zeros:
            result.append(0)
        elif value == 0:
            result.append(nonzero_product)
        else:
            result.append(total // value)
    return result


def _popcount(value: int) -> int:
    return bin(value & 0xFFFFFFFF).count("1")


def sort_by_set_bits(values: Iterable[int]) -> list[int]:
    """Stable sort by number of set bits (32-bit view), most bits first."""
    return sorted(values, key=lambda v: -_popcount(v))


def min_swaps_to_sort(values: Sequence[int]) -> int:
    """Minimum number of swaps needed to sort ``values``."""
    n = len(values)
    order = sorted(range(n), key=lambda i: (values[i], i))
    visited = [False] * n
    swaps = 0
    for start in range(n):
        length = 0
        i = start
        while not visited[i]:
            visited[i] = True
            i = order[i]
            length += 1
        if length:
            swaps += length - 1
    return swaps


def max_job_profit(
    start_times: Sequence[int], end_times: Sequence[int], profits: Sequence[int]
) -> int:
    """Largest total profit from non-overlapping jobs."""
    if not len(start_times) == len(end_times) == len(profits):
        raise ValueError("start_times, end_times and profits differ in length")
    jobs = sorted(zip(start_times, end_times, profits), key=lambda job: job[1])
    ends = [end for _, end, _ in jobs]
    best: list[int] = []
    for i, (start, _, profit) in enumerate(jobs):
        compatible = bisect_right(ends, start, 0, i)
        include = profit + (best[compatible - 1] if compatible else 0)
        best.append(max(include, best[-1]) if best else include)
    return best[-1] if best else 0


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) < 2:
        return list(items), 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[int] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    return _sort_and_count(list(values))[1]