from hypothesis import given
from hypothesis import strategies as st

from arraydrills.stocks import max_profit, max_profit_brute


def test_worked_example():
    prices = [7, 1, 5, 3, 6, 4]
    assert max_profit(prices) == 5
    assert max_profit_brute(prices) == 5


def test_falling_prices_give_no_profit():
    prices = [7, 6, 4, 3, 1]
    assert max_profit(prices) == 0
    assert max_profit_brute(prices) == 0


def test_empty_and_single_day():
    assert max_profit([]) == max_profit_brute([]) == 0
    assert max_profit([4]) == max_profit_brute([4]) == 0


def test_rising_prices_profit_is_span():
    prices = [2, 3, 8, 11]
    assert max_profit(prices) == prices[-1] - prices[0]


@given(st.lists(st.integers(0, 1000), max_size=40))
def test_brute_and_single_pass_agree(prices):
    assert max_profit(prices) == max_profit_brute(prices)


@given(st.lists(st.integers(0, 1000), max_size=40))
def test_profit_bounded(prices):
    profit = max_profit(prices)
    assert profit >= 0
    if prices:
        assert profit <= max(prices) - min(prices)