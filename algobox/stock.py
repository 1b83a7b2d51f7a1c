"""Maximum profit from trading one stock under various rules."""

from __future__ import annotations

import math
from typing import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from at most one buy and one later sell."""
    if not prices:
        return 0
    free, holding = 0, -prices[0]
    for price in prices[1:]:
        free = max(free, holding + price)
        holding = max(holding, -price)
    return free


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit from any number of non-overlapping trades."""
    if not prices:
        return 0
    free, holding = 0, -prices[0]
    for price in prices[1:]:
        free, holding = max(free, holding + price), max(holding, free - price)
    return free


def max_profit_two(prices: Sequence[int]) -> int:
    """Best profit from at most two non-overlapping trades."""
    buy_first = buy_next = math.inf
    sell_first = sell_next = 0
    for price in prices:
        buy_first = min(buy_first, price)
        sell_first = max(sell_first, price - buy_first)
        buy_next = min(buy_next, price - sell_first)
        sell_next = max(sell_next, price - buy_next)
    return int(sell_next)


def max_profit_k(k: int, prices: Sequence[int]) -> int:
    """Best profit from at most k non-overlapping trades."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0 or not prices:
        return 0
    buy = [-prices[0]] * k
    sell = [0] * k
    for price in prices[1:]:
        buy[0] = max(buy[0], -price)
        sell[0] = max(sell[0], buy[0] + price)
        for j in range(1, k):
            buy[j] = max(buy[j], sell[j - 1] - price)
            sell[j] = max(sell[j], buy[j] + price)
    return sell[-1]


def max_profit_cooldown(prices: Sequence[int]) -> int:
    """Best profit from any number of trades with a one-day wait after selling."""
    if not prices:
        return 0
    before_free = 0
    free, holding = 0, -prices[0]
    for price in prices[1:]:
        new_free = max(free, holding + price)
        holding = max(holding, before_free - price)
        before_free, free = free, new_free
    return free


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Best profit from any number of trades, paying fee on each sale."""
    if not prices:
        return 0
    free, holding = 0, -prices[0]
    for price in prices[1:]:
        free, holding = max(free, holding + price - fee), max(holding, free - price)
    return free