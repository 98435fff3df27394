"""Query-style problems over sorted data, with a command-line front end."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence

_MAX_DISTANCE = 10**9


def soldiers_beaten(powers: Iterable[int], strength: int) -> tuple[int, int]:
    """Return how many soldiers ``strength`` defeats and their summed power.

    A soldier is defeated when his power does not exceed ``strength``.
    """
    ordered = sorted(powers)
    beaten = ordered[: bisect_right(ordered, strength)]
    return (len(beaten), sum(beaten))


def merge_ranges(ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort inclusive ranges and merge those that overlap."""
    merged: list[tuple[int, int]] = []
    for low, high in sorted(ranges):
        if merged and merged[-1][1] >= low:
            last_low, last_high = merged[-1]
            merged[-1] = (last_low, max(last_high, high))
        else:
            merged.append((low, high))
    return merged


def kth_smallest_in_ranges(ranges: Iterable[tuple[int, int]], k: int) -> int:
    """Return the k-th smallest distinct number covered by the ranges, or -1."""
    if k < 1:
        raise ValueError("k must be at least 1")
    for low, high in merge_ranges(ranges):
        width = high - low + 1
        if width >= k:
            return low + k - 1
        k -= width
    return -1


def _can_place(positions: Sequence[int], cows: int, gap: int) -> bool:
    placed = 1
    previous = positions[0]
    if placed == cows:
        return True
    for position in positions[1:]:
        if position - previous >= gap:
            placed += 1
            previous = position
            if placed == cows:
                return True
    return False


def largest_minimum_distance(stalls: Iterable[int], cows: int) -> int:
    """Largest minimum gap achievable when placing ``cows`` into ``stalls``.

    Gaps are searched between 1 and 10**9; 0 means the cows do not fit.
    """
    positions = sorted(stalls)
    if not positions:
        raise ValueError("at least one stall is required")
    low, high, best = 1, _MAX_DISTANCE, 0
    while low <= high:
        mid = (low + high) // 2
        if _can_place(positions, cows, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _run_soldiers(numbers: Iterator[int]) -> None:
    count = next(numbers)
    powers = [next(numbers) for _ in range(count)]
    for _ in range(next(numbers)):
        strength = next(numbers)
        if powers:
            beaten, total = soldiers_beaten(powers, strength)
            print(beaten, total)


def _run_kth(numbers: Iterator[int]) -> None:
    for _ in range(next(numbers)):
        count, queries = next(numbers), next(numbers)
        ranges = [(next(numbers), next(numbers)) for _ in range(count)]
        merged = merge_ranges(ranges)
        for _ in range(queries):
            print(kth_smallest_in_ranges(merged, next(numbers)))


def _run_cows(numbers: Iterator[int]) -> None:
    for _ in range(next(numbers)):
        count, cows = next(numbers), next(numbers)
        stalls = [next(numbers) for _ in range(count)]
        print(largest_minimum_distance(stalls, cows))


_HANDLERS = {
    "soldiers": _run_soldiers,
    "kth": _run_kth,
    "cows": _run_cows,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="algokit-problems",
        description="Answer a query problem read from standard input.",
    )
    sub = parser.add_subparsers(dest="problem", required=True)
    sub.add_parser("soldiers", help="soldiers beaten and their total power per query")
    sub.add_parser("kth", help="k-th smallest number covered by ranges")
    sub.add_parser("cows", help="largest minimum distance between placed cows")
    args = parser.parse_args(argv)

    try:
        numbers = iter([int(token) for token in sys.stdin.read().split()])
    except ValueError as exc:
        parser.error(f"input holds a value that is not an integer: {exc}")
    try:
        _HANDLERS[args.problem](numbers)
    except StopIteration:
        parser.error("input ended early")
    except ValueError as exc:
        parser.error(str(exc))
    return 0