"""Best time to buy and sell a stock once."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations
from math import inf

__all__ = ["max_profit_brute", "max_profit"]


def max_profit_brute(prices: Sequence[int]) -> int:
    """Best profit from one buy and a later sell, trying every pair; 0 if none."""
    return max(
        (sell - buy for buy, sell in combinations(prices, 2) if sell > buy),
        default=0,
    )


def max_profit(prices: Sequence[int]) -> int:
    """Best profit in a single pass, tracking the lowest price so far."""
    best = 0
    lowest = inf
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best