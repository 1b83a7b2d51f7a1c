"""Binary search over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of target in sorted nums, or [-1, -1]."""
    first = bisect_left(nums, target)
    last = bisect_right(nums, target) - 1
    if first <= last:
        return [first, last]
    return [-1, -1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of target in sorted nums, or where it would be inserted."""
    return bisect_left(nums, target)


def _closed_search(nums: Sequence[int], target: int) -> int:
    low, high = 0, len(nums) - 1
    while low <= high:
        middle = low + ((high - low) >> 1)
        if nums[middle] == target:
            return middle
        if nums[middle] < target:
            low = middle + 1
        else:
            high = middle - 1
    return -1


def search(nums: Sequence[int], target: int) -> int:
    """Index of some occurrence of target in sorted nums, or -1."""
    return _closed_search(nums, target)


def binary_search_closed(nums: Sequence[int], target: int) -> int:
    """Like search, over a closed [low, high] interval; returns -1 when absent."""
    return _closed_search(nums, target)