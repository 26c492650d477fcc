"""Merging a sorted list into the spare tail of another sorted list."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["merge_sorted_copy", "merge_sorted_in_place"]


def _check_room(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for m + n values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")


def merge_sorted_copy(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first m values of nums1 with the first n of nums2 into
    nums1[:m + n], building the result in a separate list first."""
    _check_room(nums1, m, nums2, n)
    left, right = nums1[:m], list(nums2[:n])
    merged: list[int] = []
    i = j = 0
    while i < m and j < n:
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    nums1[:m + n] = merged


def merge_sorted_in_place(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge into nums1[:m + n] from the back, without extra storage."""
    _check_room(nums1, m, nums2, n)
    left, right, k = m - 1, n - 1, m + n - 1
    while left >= 0 and right >= 0:
        if nums1[left] > nums2[right]:
            nums1[k] = nums1[left]
            left -= 1
        else:
            nums1[k] = nums2[right]
            right -= 1
        k -= 1
    while right >= 0:
        nums1[k] = nums2[right]
        right -= 1
        k -= 1