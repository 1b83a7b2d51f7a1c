import math

import pytest

from algobox.combinatorics import combine, subsets


def test_combine_pinned_order():
    assert combine(4, 2) == [[3, 4], [2, 4], [2, 3], [1, 4], [1, 3], [1, 2]]


@pytest.mark.parametrize("n, k", [(4, 2), (5, 3), (6, 1), (6, 6), (3, 0)])
def test_combine_count_and_shape(n, k):
    result = combine(n, k)
    assert len(result) == math.comb(n, k)
    assert len({tuple(c) for c in result}) == len(result)
    for combo in result:
        assert len(combo) == k
        assert combo == sorted(combo)
        assert all(1 <= value <= n for value in combo)


def test_combine_k_larger_than_n_is_empty():
    assert combine(2, 3) == []


def test_combine_k_zero_gives_empty_combination():
    assert combine(3, 0) == [[]]


def test_combine_negative_k_is_empty():
    assert combine(3, -1) == []


def test_subsets_pinned_order():
    assert subsets([1, 2, 3]) == [[], [3], [2], [2, 3], [1], [1, 3], [1, 2], [1, 2, 3]]


@pytest.mark.parametrize("nums", [[], [7], [1, 2, 3, 4], [5, 9, 2]])
def test_subsets_count_and_members(nums):
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert len({tuple(s) for s in result}) == len(result)
    for subset in result:
        assert all(value in nums for value in subset)
    assert result[0] == []
    assert result[-1] == list(nums)


def test_subsets_keep_input_order():
    for subset in subsets([5, 9, 2]):
        positions = [[5, 9, 2].index(value) for value in subset]
        assert positions == sorted(positions)