"""Enumerating combinations and subsets."""

from __future__ import annotations

from itertools import combinations, compress, product
from typing import Sequence


def combine(n: int, k: int) -> list[list[int]]:
    """All k-element combinations of 1..n, in reverse lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in reversed(list(combinations(range(1, n + 1), k)))]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """All subsets of nums, ordered by counting with nums[0] as the high bit."""
    return [
        list(compress(nums, chosen))
        for chosen in product((False, True), repeat=len(nums))
    ]