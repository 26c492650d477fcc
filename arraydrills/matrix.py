"""Square-matrix rotation and zeroing of rows and columns that hold a zero."""

from __future__ import annotations

__all__ = [
    "rotated",
    "rotate_in_place",
    "set_zeroes_brute",
    "set_zeroes_marker",
    "set_zeroes",
]

Matrix = list[list[int]]

_MARK = object()


def rotated(matrix: Matrix) -> Matrix:
    """Return a new square matrix turned 90 degrees clockwise."""
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_in_place(matrix: Matrix) -> None:
    """Turn a square matrix 90 degrees clockwise, keeping its row lists."""
    for target, values in zip(matrix, rotated(matrix)):
        target[:] = values


def set_zeroes_brute(matrix: Matrix) -> Matrix:
    """Zero every row and column holding a zero, marking cells as it goes.

    The matrix is changed in place and returned.
    """
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value is _MARK or value != 0:
                continue
            for k, cell in enumerate(row):
                if cell is not _MARK and cell != 0:
                    row[k] = _MARK
            for other in matrix:
                cell = other[j]
                if cell is not _MARK and cell != 0:
                    other[j] = _MARK

    for row in matrix:
        row[:] = [0 if cell is _MARK else cell for cell in row]
    return matrix


def set_zeroes_marker(matrix: Matrix) -> Matrix:
    """Zero every row and column holding a zero, using row and column sets.

    The matrix is changed in place and returned.
    """
    zero_rows: set[int] = set()
    zero_cols: set[int] = set()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                zero_rows.add(i)
                zero_cols.add(j)

    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            row[:] = [0 if j in zero_cols else value for j, value in enumerate(row)]
    return matrix


def set_zeroes(matrix: Matrix) -> Matrix:
    """Zero every row and column holding a zero, keeping the markers in
    the first row and first column of the matrix itself.

    The matrix is changed in place and returned.
    """
    if not matrix or not matrix[0]:
        return matrix
    first_row = matrix[0]
    width = len(first_row)
    first_col_zero = False

    for row in matrix:
        for j, value in enumerate(row):
            if value == 0:
                row[0] = 0
                if j:
                    first_row[j] = 0
                else:
                    first_col_zero = True

    for row in matrix[1:]:
        for j in range(1, width):
            if row[j] != 0 and (row[0] == 0 or first_row[j] == 0):
                row[j] = 0

    if first_row[0] == 0:
        first_row[:] = [0] * width
    if first_col_zero:
        for row in matrix:
            row[0] = 0
    return matrix