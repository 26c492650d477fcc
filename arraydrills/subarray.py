"""Largest sum of a contiguous subarray."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "SubarrayResult",
    "max_subarray_brute",
    "max_subarray_better",
    "max_subarray",
    "max_subarray_with_span",
]


@dataclass(frozen=True)
class SubarrayResult:
    """Best sum and the inclusive span of the subarray that gives it."""

    total: int
    start: int
    end: int
    values: list[int]


def max_subarray_brute(nums: Sequence[int]) -> int:
    """Best sum over subarrays that stop before the last element, summing each.

    Raises ValueError when there are fewer than two elements.
    """
    if len(nums) < 2:
        raise ValueError("need at least two elements")
    limit = len(nums) - 1
    return max(
        sum(nums[i:j + 1]) for i in range(limit) for j in range(i, limit)
    )


def max_subarray_better(nums: Sequence[int]) -> int:
    """Best sum over subarrays that stop before the last element, with running sums.

    Raises ValueError when there are fewer than two elements.
    """
    if len(nums) < 2:
        raise ValueError("need at least two elements")
    head = nums[:-1]
    best = head[0]
    for i in range(len(head)):
        running = 0
        for value in head[i:]:
            running += value
            best = max(best, running)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Best subarray sum in one pass (Kadane). Raises ValueError when empty."""
    return max_subarray_with_span(nums).total


def max_subarray_with_span(nums: Sequence[int]) -> SubarrayResult:
    """Best subarray sum together with where the subarray lies.

    A new candidate start is taken whenever the running sum is zero; the
    first span reaching the best sum is kept. Raises ValueError when empty.
    """
    if not nums:
        raise ValueError("need at least one element")
    running = 0
    start = 0
    best: tuple[int, int, int] | None = None
    for i, value in enumerate(nums):
        if running == 0:
            start = i
        running += value
        if best is None or running > best[0]:
            best = (running, start, i)
        if running < 0:
            running = 0
    total, best_start, best_end = best
    return SubarrayResult(total, best_start, best_end, list(nums[best_start:best_end + 1]))