"""Stacks with min/max tracking, and stacks and queues built from each other."""

from __future__ import annotations

from collections import deque


class MinStack:
    """A stack that reports its smallest value in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._mins: list[int] = []

    def push(self, val: int) -> None:
        """Push val onto the stack."""
        self._items.append(val)
        self._mins.append(min(val, self._mins[-1]) if self._mins else val)

    def pop(self) -> None:
        """Remove the top value; does nothing on an empty stack."""
        if self._items:
            self._items.pop()
            self._mins.pop()

    def top(self) -> int:
        """Return the top value, or 0 on an empty stack."""
        return self._items[-1] if self._items else 0

    def get_min(self) -> int:
        """Return the smallest value, or 0 on an empty stack."""
        return self._mins[-1] if self._mins else 0

    def __len__(self) -> int:
        return len(self._items)


class QueueStack:
    """A last-in first-out stack kept in a single queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Push x so that it becomes the front of the queue."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top value."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._queue


class StackQueue:
    """A first-in first-out queue kept in two stacks."""

    def __init__(self) -> None:
        self._incoming: list[int] = []
        self._outgoing: list[int] = []

    def push(self, x: int) -> None:
        """Add x to the back of the queue."""
        self._incoming.append(x)

    def _refill(self) -> None:
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        if not self._outgoing:
            raise IndexError("the queue is empty")

    def pop(self) -> int:
        """Remove and return the front value."""
        self._refill()
        return self._outgoing.pop()

    def peek(self) -> int:
        """Return the front value."""
        self._refill()
        return self._outgoing[-1]

    def empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._incoming and not self._outgoing


class MaxStack:
    """A stack that can report and remove its largest value."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._maxes: list[int] = []

    def push(self, x: int) -> None:
        """Push x onto the stack."""
        self._items.append(x)
        self._maxes.append(max(x, self._maxes[-1]) if self._maxes else x)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._maxes.pop()
        return self._items.pop()

    def top(self) -> int:
        """Return the top value."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def peek_max(self) -> int:
        """Return the largest value."""
        if not self._maxes:
            raise IndexError("max of an empty stack")
        return self._maxes[-1]

    def pop_max(self) -> int:
        """Remove and return the largest value nearest the top."""
        largest = self.peek_max()
        above = []
        while self.top() != largest:
            above.append(self.pop())
        self.pop()
        for value in reversed(above):
            self.push(value)
        return largest

    def __len__(self) -> int:
        return len(self._items)