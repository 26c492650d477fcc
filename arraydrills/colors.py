"""Sorting a list holding only the values 0, 1 and 2, in place."""

from __future__ import annotations

from collections import Counter

__all__ = ["sort_colors_counting", "sort_colors"]


def sort_colors_counting(nums: list[int]) -> None:
    """Count 0s and 1s and rewrite the list; every other value becomes 2."""
    counts = Counter(nums)
    zeros, ones = counts[0], counts[1]
    nums[:] = [0] * zeros + [1] * ones + [2] * (len(nums) - zeros - ones)


def sort_colors(nums: list[int]) -> None:
    """Dutch national flag partition in one pass.

    Values other than 0 and 1 are moved to the end unchanged.
    """
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1