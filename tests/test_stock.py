import pytest

from algobox.stock import (
    max_profit,
    max_profit_cooldown,
    max_profit_k,
    max_profit_two,
    max_profit_unlimited,
    max_profit_with_fee,
)


@pytest.mark.parametrize(
    "prices, expected",
    [([7, 1, 5, 3, 6, 4], 5), ([7, 6, 4, 3, 1], 0), ([], 0)],
)
def test_max_profit(prices, expected):
    assert max_profit(prices) == expected


@pytest.mark.parametrize(
    "prices, expected",
    [([7, 1, 5, 3, 6, 4], 7), ([1, 2, 3, 4, 5], 4), ([7, 6, 4, 3, 1], 0), ([], 0)],
)
def test_max_profit_unlimited(prices, expected):
    assert max_profit_unlimited(prices) == expected


@pytest.mark.parametrize(
    "prices, expected",
    [
        ([3, 3, 5, 0, 0, 3, 1, 4], 6),
        ([1, 2, 3, 4, 5], 4),
        ([7, 6, 4, 3, 1], 0),
        ([1], 0),
    ],
)
def test_max_profit_two(prices, expected):
    assert max_profit_two(prices) == expected


@pytest.mark.parametrize(
    "k, prices, expected",
    [(2, [2, 4, 1], 2), (2, [3, 2, 6, 5, 0, 3], 7), (0, [1, 5], 0), (3, [], 0)],
)
def test_max_profit_k(k, prices, expected):
    assert max_profit_k(k, prices) == expected


def test_max_profit_k_negative_raises():
    with pytest.raises(ValueError):
        max_profit_k(-1, [1, 2])


def test_max_profit_k_two_matches_two_trade_variant():
    prices = [3, 3, 5, 0, 0, 3, 1, 4]
    assert max_profit_k(2, prices) == max_profit_two(prices) == 6


def test_max_profit_cooldown():
    assert max_profit_cooldown([1, 2, 3, 0, 2]) == 3
    assert max_profit_cooldown([]) == 0
    assert max_profit_cooldown([1]) == 0


@pytest.mark.parametrize(
    "prices, fee, expected",
    [([1, 3, 2, 8, 4, 9], 2, 8), ([1, 3, 7, 5, 10, 3], 3, 6), ([], 1, 0)],
)
def test_max_profit_with_fee(prices, fee, expected):
    assert max_profit_with_fee(prices, fee) == expected