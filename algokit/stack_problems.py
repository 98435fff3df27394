"""Problems solved with stacks and queues."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence

_OPERATORS = "+-*/"


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for char in expression:
        if char in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            if char == "+":
                stack.append(left + right)
            elif char == "-":
                stack.append(left - right)
            elif char == "*":
                stack.append(left * right)
            else:
                if right == 0:
                    raise ZeroDivisionError("division by zero in expression")
                stack.append(_trunc_div(left, right))
        elif char.isdigit() and char.isascii():
            stack.append(int(char))
        else:
            raise ValueError(f"unexpected character {char!r}")
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def sort_stack_descending(stack: Iterable[int]) -> list[int]:
    """Return the stack's items from largest to smallest."""
    return sorted(stack, reverse=True)


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Sort intervals and merge those that overlap or touch at an end point."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(tuple(interval) for interval in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def first_non_repeating(stream: str) -> str:
    """For each prefix of ``stream``, its first non-repeating character or '#'."""
    counts: Counter[str] = Counter()
    waiting: deque[str] = deque()
    answer = []
    for char in stream:
        counts[char] += 1
        if counts[char] == 1:
            waiting.append(char)
        while waiting and counts[waiting[0]] != 1:
            waiting.popleft()
        answer.append(waiting[0] if waiting else "#")
    return "".join(answer)


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """For each element, the next larger element to its right, or -1."""
    result = [-1] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(index)
    return result