"""Array algorithms: hashing, sliding windows, monotonic stacks and partitioning."""

from __future__ import annotations

from collections import deque
from typing import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices [later, earlier] of two values adding up to target, or []."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        if target - num in seen:
            return [index, seen[target - num]]
        seen[num] = index
    return []


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among nums."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start + 1
        while end in values:
            end += 1
        longest = max(longest, end - start)
    return longest


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run summing to at least target, or 0."""
    best = len(nums) + 1
    total = 0
    left = 0
    for right, num in enumerate(nums):
        total += num
        while total >= target and left <= right:
            best = min(best, right - left + 1)
            total -= nums[left]
            left += 1
    return best if best <= len(nums) else 0


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of k consecutive values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    window: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(nums):
        while window and value >= nums[window[-1]]:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index + 1 >= k:
            maxima.append(nums[window[0]])
    return maxima


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait after each day for a warmer one; 0 when none comes."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > temperatures[pending[-1]]:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    slow = 0
    for value in list(nums):
        if value != 0:
            nums[slow] = value
            slow += 1
    for index in range(slow, len(nums)):
        nums[index] = 0


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort values 0, 1 and 2 in place in a single pass."""
    zero, two = -1, len(nums)
    i = 0
    while i < two:
        if nums[i] == 1:
            i += 1
        elif nums[i] == 2:
            two -= 1
            nums[i], nums[two] = nums[two], nums[i]
        else:
            zero += 1
            nums[i], nums[zero] = nums[zero], nums[i]
            i += 1


def _count_and_sort(nums: list[int]) -> tuple[int, list[int]]:
    if len(nums) <= 1:
        return 0, nums
    half = len(nums) // 2
    left_count, left = _count_and_sort(nums[:half])
    right_count, right = _count_and_sort(nums[half:])
    count = left_count + right_count
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        count += j
    merged: list[int] = []
    p, q = 0, 0
    while p < len(left) or q < len(right):
        if p < len(left) and (q == len(right) or left[p] <= right[q]):
            merged.append(left[p])
            p += 1
        else:
            merged.append(right[q])
            q += 1
    return count, merged


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with nums[i] > 2 * nums[j]."""
    count, _ = _count_and_sort(list(nums))
    return count