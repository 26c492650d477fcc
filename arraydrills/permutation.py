"""Next lexicographic permutation."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["next_permutation"]


def next_permutation(nums: Sequence[int]) -> list[int]:
    """Return the permutation that follows ``nums``.

    The pivot is searched from the right but never at the first position:
    when no pivot exists at positions 1 and beyond, the reversed list is
    returned. The input is left untouched.
    """
    result = list(nums)
    pivot = next(
        (i for i in range(len(result) - 2, 0, -1) if result[i] < result[i + 1]),
        None,
    )
    if pivot is None:
        result.reverse()
        return result

    swap_at = next(
        i for i in range(len(result) - 1, pivot, -1) if result[i] > result[pivot]
    )
    result[pivot], result[swap_at] = result[swap_at], result[pivot]
    result[pivot + 1:] = result[:pivot:-1]
    return result