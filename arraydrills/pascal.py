"""Pascal's triangle: single elements, single rows and whole triangles.

Rows and columns passed to ``element``/``element_factorial`` and the row
number passed to ``row``/``row_by_ncr`` are 1-based.
"""

from __future__ import annotations

from math import prod

__all__ = [
    "ncr",
    "element_factorial",
    "element",
    "row_by_ncr",
    "row",
    "triangle_brute",
    "triangle",
]


def ncr(n: int, r: int) -> int:
    """Binomial coefficient computed as a running product of r terms."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def _factorial(k: int) -> int:
    # Non-positive arguments give the empty product.
    return prod(range(1, k + 1))


def element_factorial(row: int, col: int) -> int:
    """Element at (row, col) from (row-1)! / ((col-1)! * (row-col)!)."""
    return _factorial(row - 1) // (_factorial(col - 1) * _factorial(row - col))


def element(row: int, col: int) -> int:
    """Element at (row, col), computed as C(row-1, col-1) by running product."""
    return ncr(row - 1, col - 1)


def row_by_ncr(n: int) -> list[int]:
    """The n-th row, computing each entry separately."""
    return [ncr(n - 1, col) for col in range(n)]


def row(n: int) -> list[int]:
    """The n-th row, each entry derived from the previous one.

    A row number below 1 still gives ``[1]``.
    """
    value = 1
    values = [value]
    for col in range(1, n):
        value = value * (n - col) // col
        values.append(value)
    return values


def triangle_brute(n: int) -> list[list[int]]:
    """The first n rows, every entry computed with ``ncr``."""
    return [
        [ncr(r - 1, c - 1) for c in range(1, r + 1)]
        for r in range(1, n + 1)
    ]


def triangle(n: int) -> list[list[int]]:
    """Rows 0 through n, built row by row with ``row``.

    Row 0 comes out as ``[1]``, so the result holds n + 1 lists and the
    first row of the triangle appears twice at the start.
    """
    return [row(r) for r in range(n + 1)]