"""Finding a repeated number, and a repeated number together with a missing one."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

__all__ = [
    "find_duplicate_sorting",
    "find_duplicate_set",
    "find_duplicate",
    "find_error_nums_set",
    "find_error_nums",
]


def find_duplicate_sorting(nums: Sequence[int]) -> int:
    """Smallest repeated value found after sorting, or -1 if all differ."""
    return next(
        (first for first, second in pairwise(sorted(nums)) if first == second),
        -1,
    )


def find_duplicate_set(nums: Sequence[int]) -> int:
    """First value seen a second time, or -1 if all differ."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return num
        seen.add(num)
    return -1


def find_duplicate(nums: Sequence[int]) -> int:
    """Repeated value found by cycle detection over index links.

    Expects n + 1 values each in 1..n; values are followed as indices.
    """
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break

    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def find_error_nums_set(nums: Sequence[int]) -> tuple[int, int]:
    """Return (repeated, missing) for values meant to be 1..n, using a set.

    The repeated value is the last one seen again; 0 if none repeats.
    """
    n = len(nums)
    seen: set[int] = set()
    duplicate = 0
    for num in nums:
        if num in seen:
            duplicate = num
        seen.add(num)
    expected_sum = n * (n + 1) // 2
    missing = expected_sum - (sum(nums) - duplicate)
    return duplicate, missing


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def find_error_nums(nums: Sequence[int]) -> tuple[int, int]:
    """Return (repeated, missing) for values meant to be 1..n, from sums.

    Solves x - y and x^2 - y^2 from the sum and the sum of squares.
    Raises ValueError when the sum matches 1..n exactly, which leaves
    the equations unsolvable.
    """
    n = len(nums)
    expected_sum = n * (n + 1) // 2
    expected_squares = n * (n + 1) * (2 * n + 1) // 6

    difference = sum(nums) - expected_sum
    if difference == 0:
        raise ValueError("sum equals that of 1..n; cannot separate repeated and missing values")
    square_difference = sum(num * num for num in nums) - expected_squares

    total = _trunc_div(square_difference, difference)
    repeated = _trunc_div(difference + total, 2)
    missing = repeated - difference
    return repeated, missing