"""Counting inversions: pairs i < j with arr[i] > arr[j]."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

__all__ = ["count_inversions_brute", "count_inversions"]


def count_inversions_brute(arr: Sequence[int]) -> int:
    """Count inversions by checking every pair, in quadratic time."""
    return sum(1 for first, second in combinations(arr, 2) if first > second)


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])

    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            # Every element still waiting in the left half is greater.
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(arr: Sequence[int]) -> int:
    """Count inversions with a merge sort, in O(n log n) time.

    The input is left untouched.
    """
    _, count = _sort_and_count(list(arr))
    return count