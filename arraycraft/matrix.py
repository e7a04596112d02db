"""In-place matrix operations: rotation, zero propagation and spiral reading."""

from __future__ import annotations

from collections.abc import Sequence


def _require_square(matrix: list[list[int]]) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")


def rotate_image_copy(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise through a rotated copy."""
    _require_square(matrix)
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise by transposing, then mirroring rows."""
    _require_square(matrix)
    n = len(matrix)
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def set_zeroes_with_sets(matrix: list[list[int]]) -> None:
    """Zero every row and column holding a zero, recording them in sets first."""
    rows = {i for i, row in enumerate(matrix) if 0 in row}
    cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in rows or j in cols:
                row[j] = 0


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column holding a zero, using the first row and column as markers.

    ``matrix[0][0]`` marks the first row; a separate flag marks the first column.
    """
    if not matrix or not matrix[0]:
        return
    first_col_zero = matrix[0][0] == 0

    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                row[0] = 0
                if j == 0:
                    first_col_zero = True
                else:
                    matrix[0][j] = 0

    for i in range(1, len(matrix)):
        row = matrix[i]
        for j in range(1, len(row)):
            if matrix[0][j] == 0 or row[0] == 0:
                row[j] = 0

    # The first row goes before the first column so matrix[0][0] is read intact.
    if matrix[0][0] == 0:
        for j in range(len(matrix[0])):
            matrix[0][j] = 0
    if first_col_zero:
        for row in matrix:
            row[0] = 0


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements read clockwise from the top-left corner, layer by layer."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1

    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top > bottom:
            break
        result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
        bottom -= 1
        if left > right:
            break
        result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
        left += 1
    return result