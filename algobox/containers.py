"""Bounded queues, a k-th largest tracker, an indexed list and a randomized set."""

from __future__ import annotations

import heapq
import random
from collections import deque
from typing import Iterable, Optional


class CircularQueue:
    """A first-in first-out queue holding at most k values."""

    def __init__(self, k: int) -> None:
        self.capacity = k
        self._items: deque[int] = deque()

    def enqueue(self, val: int) -> bool:
        """Append val; return False when the queue is full."""
        if self.is_full():
            return False
        self._items.append(val)
        return True

    def dequeue(self) -> bool:
        """Drop the front value; return False when the queue is empty."""
        if not self._items:
            return False
        self._items.popleft()
        return True

    def front(self) -> int:
        """Return the front value, or -1 when empty."""
        return self._items[0] if self._items else -1

    def rear(self) -> int:
        """Return the last value, or -1 when empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the queue holds capacity values."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)


class CircularDeque:
    """A double-ended queue holding at most k values."""

    def __init__(self, k: int) -> None:
        self.capacity = k
        self._items: deque[int] = deque()

    def insert_front(self, value: int) -> bool:
        """Add value at the front; return False when full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add value at the back; return False when full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Drop the front value; return False when empty."""
        if not self._items:
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Drop the last value; return False when empty."""
        if not self._items:
            return False
        self._items.pop()
        return True

    def get_front(self) -> int:
        """Return the front value, or -1 when empty."""
        return self._items[0] if self._items else -1

    def get_rear(self) -> int:
        """Return the last value, or -1 when empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        """Return True when the deque holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when the deque holds capacity values."""
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)


class KthLargest:
    """Track the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int] = ()) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._heap: list[int] = []
        for value in nums:
            self.add(value)

    def add(self, val: int) -> int:
        """Add val to the stream and return the current k-th largest value."""
        heapq.heappush(self._heap, val)
        if len(self._heap) > self.k:
            heapq.heappop(self._heap)
        return self._heap[0]


class LinkedList:
    """An indexed list whose out-of-range operations are ignored."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def get(self, index: int) -> int:
        """Return the value at index, or -1 when the index is invalid."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return -1

    def add_at_head(self, val: int) -> None:
        """Insert val before the first value."""
        self.add_at_index(0, val)

    def add_at_tail(self, val: int) -> None:
        """Append val after the last value."""
        self.add_at_index(len(self._items), val)

    def add_at_index(self, index: int, val: int) -> None:
        """Insert val before position index; ignored when index is out of range."""
        if 0 <= index <= len(self._items):
            self._items.insert(index, val)

    def delete_at_index(self, index: int) -> None:
        """Remove the value at index; ignored when index is invalid."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


class RandomizedSet:
    """A set with constant-time insert, remove and uniform random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._positions: dict[int, int] = {}
        self._values: list[int] = []
        self._rng = rng or random.Random()

    def insert(self, val: int) -> bool:
        """Add val; return False when it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove val; return False when it was absent."""
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._values.pop()
        if last != val:
            self._values[position] = last
            self._positions[last] = position
        return True

    def get_random(self) -> int:
        """Return a uniformly chosen member."""
        if not self._values:
            raise IndexError("cannot choose from an empty set")
        return self._rng.choice(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions