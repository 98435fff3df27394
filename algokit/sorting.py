"""Classic comparison sorts, each returning a new sorted list."""

from __future__ import annotations

import random
from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Bubble sort with early exit once a pass makes no swap."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Insertion sort shifting larger elements right."""
    items = list(values)
    for i in range(1, len(items)):
        value = items[i]
        hole = i
        while hole > 0 and items[hole - 1] > value:
            items[hole] = items[hole - 1]
            hole -= 1
        items[hole] = value
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], start: int, end: int, rng: random.Random) -> int:
    r = rng.randint(start, end)
    items[r], items[end] = items[end], items[r]
    pivot = items[end]
    pindex = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[i], items[pindex] = items[pindex], items[i]
            pindex += 1
    items[pindex], items[end] = items[end], items[pindex]
    return pindex


def quick_sort(values: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Quicksort with a randomly chosen pivot."""
    items = list(values)
    rng = rng or random.Random()
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pindex = _partition(items, start, end, rng)
        pending.append((start, pindex - 1))
        pending.append((pindex + 1, end))
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Selection sort that swaps each smaller element into place."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items