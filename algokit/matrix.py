"""Operations on two-dimensional integer grids."""

from __future__ import annotations

from itertools import combinations
from math import comb
from typing import List, MutableSequence, Sequence


def pascal_triangle(num_rows: int) -> List[List[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    return [[comb(row, col) for col in range(row + 1)] for row in range(num_rows)]


def rotate_image(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    for i, j in combinations(range(len(matrix)), 2):
        matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def spiral_order(matrix: Sequence[Sequence[int]]) -> List[int]:
    """Elements of ``matrix`` read clockwise from the top-left corner inwards."""
    grid = [list(row) for row in matrix]
    result: List[int] = []
    while grid:
        result.extend(grid.pop(0))
        grid = [list(column) for column in zip(*grid)][::-1]
    return result


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0