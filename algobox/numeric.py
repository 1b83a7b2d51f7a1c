"""Integer and numeric algorithms."""

from __future__ import annotations

import heapq
from typing import Sequence

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def num_squares(n: int) -> int:
    """Least number of perfect squares that add up to n."""
    if n < 0:
        raise ValueError("n must not be negative")
    best = [0] * (n + 1)
    for i in range(1, n + 1):
        root = 1
        fewest = i
        while root * root <= i:
            fewest = min(fewest, best[i - root * root])
            root += 1
        best[i] = fewest + 1
    return best[n]


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of nums."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = running = nums[0]
    for value in nums[1:]:
        running = max(value, running + value)
        best = max(best, running)
    return best


def count_bits(n: int) -> list[int]:
    """Number of set bits in each integer from 0 to n."""
    if n < 0:
        raise ValueError("n must not be negative")
    bits = [0] * (n + 1)
    for i in range(1, n + 1):
        bits[i] = bits[i & (i - 1)] + 1
    return bits


def int_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed x."""
    if x < 0:
        raise ValueError("x must not be negative")
    left, right = 0, x
    result = 0
    while left <= right:
        mid = left + ((right - left) >> 1)
        if mid * mid <= x:
            result = mid
            left = mid + 1
        else:
            right = mid - 1
    return result


def divide(dividend: int, divisor: int) -> int:
    """Quotient truncated toward zero, clamped where a 32-bit result overflows."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == INT32_MIN and divisor == -1:
        return INT32_MAX
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the values of two sorted sequences; 0.0 when both are empty."""
    merged = list(heapq.merge(nums1, nums2))
    count = len(merged)
    if count == 0:
        return 0.0
    middle = count // 2
    if count % 2 == 1:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2.0