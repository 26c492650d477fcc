"""Merging overlapping closed intervals."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["merge_intervals_brute", "merge_intervals"]


def merge_intervals_brute(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping intervals, scanning ahead from each unmerged one."""
    ordered = sorted([list(item) for item in intervals])
    merged: list[list[int]] = []
    for i, (start, end) in enumerate(ordered):
        if merged and end <= merged[-1][1]:
            continue
        for next_start, next_end in ordered[i + 1:]:
            if next_start > end:
                break
            end = max(end, next_end)
        merged.append([start, end])
    return merged


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping intervals in one pass over the sorted list.

    Intervals that only touch are merged too. The input is left untouched.
    """
    merged: list[list[int]] = []
    for start, end in sorted([list(item) for item in intervals]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged