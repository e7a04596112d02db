"""Pascal's triangle: whole triangles, single rows and single entries."""

from __future__ import annotations


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for i in range(num_rows):
        if i == 0:
            triangle.append([1])
            continue
        above = triangle[-1]
        inner = [a + b for a, b in zip(above, above[1:])]
        triangle.append([1, *inner, 1])
    return triangle


def n_choose_r(n: int, r: int) -> int:
    """Binomial coefficient, 0 when ``r`` exceeds ``n``."""
    if r < 0:
        raise ValueError("r must not be negative")
    if r > n:
        return 0
    r = min(r, n - r)
    element = 1
    for i in range(r):
        element = element * (n - i) // (i + 1)
    return element


def pascal_row_brute_force(row_index: int) -> list[int]:
    """Row ``row_index`` (0-based), each entry computed independently."""
    return [n_choose_r(row_index, col) for col in range(row_index + 1)]


def pascal_row(row_index: int) -> list[int]:
    """Row ``row_index`` (0-based), each entry derived from the previous one."""
    row = [1]
    element = 1
    for i in range(row_index):
        element = element * (row_index - i) // (i + 1)
        row.append(element)
    return row


def pascal_element(row: int, col: int) -> int:
    """Entry at 0-based ``row`` and ``col``; a column past the row is invalid."""
    if col < 0 or col > row:
        raise ValueError("Invalid input")
    return n_choose_r(row, col)