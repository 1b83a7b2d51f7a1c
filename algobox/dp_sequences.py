"""Dynamic programming over sequences: robbery, stairs and painting."""

from __future__ import annotations

from typing import Sequence


def _rob_line(nums: Sequence[int]) -> int:
    before, best = 0, 0
    for value in nums:
        before, best = best, max(before + value, best)
    return best


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values with no two adjacent ones taken."""
    return _rob_line(nums)


def rob_circular(nums: Sequence[int]) -> int:
    """Like rob, but the first and last values count as adjacent."""
    if len(nums) <= 2:
        return max(nums, default=0)
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def climb_stairs(n: int) -> int:
    """Number of ways to climb n steps taking one or two at a time."""
    if n <= 2:
        return n
    ways_before, ways = 1, 2
    for _ in range(3, n + 1):
        ways_before, ways = ways, ways_before + ways
    return ways


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1."""
    if len(cost) < 2:
        raise ValueError("at least two steps are required")
    before, last = cost[0], cost[1]
    for value in cost[2:]:
        before, last = last, min(before, last) + value
    return min(before, last)


def min_cost_paint(costs: Sequence[Sequence[int]]) -> int:
    """Cheapest way to paint houses in three colours, no neighbours alike."""
    if not costs:
        return 0
    red, blue, green = costs[0][:3]
    for row in costs[1:]:
        red, blue, green = (
            min(blue, green) + row[0],
            min(red, green) + row[1],
            min(red, blue) + row[2],
        )
    return min(red, blue, green)