"""Routines on two-dimensional grids of integers."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections.abc import Sequence

# Arrow sign in a cell -> (row step, column step).
_MOVES = {1: (0, 1), 2: (0, -1), 3: (1, 0), 4: (-1, 0)}


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    matrix[:] = [list(reversed(column)) for column in zip(*matrix)]


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows are sorted."""
    if not matrix or not matrix[0]:
        return False
    for row in matrix:
        if row[0] <= target <= row[-1]:
            position = bisect_left(row, target)
            if position < len(row) and row[position] == target:
                return True
    return False


def find_missing_and_repeated(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[repeated, missing]`` for an n by n grid meant to hold 1..n²."""
    n = len(grid)
    values = [value for row in grid for value in row]
    present = set(values)
    missing = [v for v in range(1, n * n + 1) if v not in present]
    if not missing:
        raise ValueError("grid has no missing value")
    expected_sum = n * n * (n * n + 1) // 2
    repeated = abs(expected_sum - (sum(values) + missing[0]))
    return [repeated, *reversed(missing)]


def min_cost_grid_path(grid: Sequence[Sequence[int]]) -> int:
    """Fewest arrow changes needed to walk from the top left to the bottom right."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    distance = [[math.inf] * cols for _ in range(rows)]
    distance[0][0] = 0
    queue = [(0, 0, 0)]
    while queue:
        cost, i, j = heapq.heappop(queue)
        if cost > distance[i][j]:
            continue
        for sign, (di, dj) in _MOVES.items():
            ni, nj = i + di, j + dj
            if not (0 <= ni < rows and 0 <= nj < cols):
                continue
            step = cost + (0 if grid[i][j] == sign else 1)
            if step < distance[ni][nj]:
                distance[ni][nj] = step
                heapq.heappush(queue, (step, ni, nj))
    return distance[rows - 1][cols - 1]