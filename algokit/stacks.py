"""Bounded stacks and queues, including several stacks sharing one store."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class CapacityError(Exception):
    """Raised when adding to a container that is already full."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


class Stack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 1000) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, item: int) -> None:
        """Push ``item``; raise CapacityError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise CapacityError("stack overflow")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class BoundedQueue:
    """A FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[int] = deque()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: int) -> None:
        """Append ``item`` at the rear; raise CapacityError when full."""
        if self.is_full():
            raise CapacityError("queue is full")
        self._items.append(item)

    def dequeue(self) -> int:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def front(self) -> int:
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def rear(self) -> int:
        if not self._items:
            raise IndexError("rear of an empty queue")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class TwoStacks:
    """Two stacks sharing a store of ``size`` slots."""

    def __init__(self, size: int) -> None:
        _check_capacity(size)
        self.size = size
        self._first: list[int] = []
        self._second: list[int] = []

    def _ensure_room(self) -> None:
        if len(self._first) + len(self._second) >= self.size:
            raise CapacityError("no free slot left")

    def push1(self, item: int) -> None:
        self._ensure_room()
        self._first.append(item)

    def push2(self, item: int) -> None:
        self._ensure_room()
        self._second.append(item)

    def pop1(self) -> int:
        if not self._first:
            raise IndexError("first stack is empty")
        return self._first.pop()

    def pop2(self) -> int:
        if not self._second:
            raise IndexError("second stack is empty")
        return self._second.pop()


class MiddleStack:
    """A stack that also reports its middle element.

    With an even number of items the middle is the upper of the two central ones.
    """

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, item: int) -> None:
        self._items.append(item)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def middle(self) -> int:
        if not self._items:
            raise IndexError("middle of an empty stack")
        return self._items[len(self._items) // 2]

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class KStacks:
    """``k`` stacks sharing a store of ``n`` slots."""

    def __init__(self, k: int, n: int) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        _check_capacity(n)
        self.capacity = n
        self._stacks: list[list[int]] = [[] for _ in range(k)]
        self._used = 0

    def _stack(self, stack_number: int) -> list[int]:
        if not 0 <= stack_number < len(self._stacks):
            raise IndexError(f"no stack numbered {stack_number}")
        return self._stacks[stack_number]

    def is_full(self) -> bool:
        return self._used >= self.capacity

    def is_empty(self, stack_number: int) -> bool:
        return not self._stack(stack_number)

    def push(self, item: int, stack_number: int) -> None:
        """Push onto a stack; raise CapacityError when every slot is taken."""
        stack = self._stack(stack_number)
        if self.is_full():
            raise CapacityError("stack overflow")
        stack.append(item)
        self._used += 1

    def pop(self, stack_number: int) -> int:
        """Pop from a stack; raise IndexError when that stack is empty."""
        stack = self._stack(stack_number)
        if not stack:
            raise IndexError("stack underflow")
        self._used -= 1
        return stack.pop()