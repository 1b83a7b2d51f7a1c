import pytest

from algobox.dp_sequences import (
    climb_stairs,
    min_cost_climbing_stairs,
    min_cost_paint,
    rob,
    rob_circular,
)


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 1], 4), ([2, 7, 9, 3, 1], 12), ([], 0), ([5], 5)],
)
def test_rob(nums, expected):
    assert rob(nums) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 1], 4), ([2, 7, 9, 3, 1], 11), ([], 0), ([5], 5), ([2, 3], 3), ([2, 3, 2], 3)],
)
def test_rob_circular(nums, expected):
    assert rob_circular(nums) == expected


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 2), (3, 3), (5, 8)])
def test_climb_stairs(n, expected):
    assert climb_stairs(n) == expected


def test_min_cost_climbing_stairs():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15
    assert min_cost_climbing_stairs([1, 100, 1, 1, 1, 100, 1, 1, 100, 1]) == 6


def test_min_cost_climbing_stairs_does_not_mutate():
    cost = [10, 15, 20]
    min_cost_climbing_stairs(cost)
    assert cost == [10, 15, 20]


def test_min_cost_climbing_stairs_too_short_raises():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([1])


def test_min_cost_paint():
    assert min_cost_paint([[17, 2, 17], [16, 16, 5], [14, 3, 19]]) == 10
    assert min_cost_paint([[7, 6, 2]]) == 2
    assert min_cost_paint([]) == 0