"""Breadth-first distances and island counting on binary grids."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator, Sequence

Grid = Sequence[Sequence[int]]

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _shape(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("every row of the grid must have the same length")
    return rows, cols


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def nearest_one_distance(matrix: Grid) -> list[list[float]]:
    """Steps from each cell to the nearest cell holding 1; math.inf if there is none."""
    rows, cols = _shape(matrix)
    dist: list[list[float]] = [[math.inf] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(matrix):
        for c, cell in enumerate(row):
            if cell == 1:
                dist[r][c] = 0
                queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        step = dist[r][c] + 1
        for nr, nc in _neighbours(r, c, rows, cols):
            if dist[nr][nc] > step:
                dist[nr][nc] = step
                queue.append((nr, nc))
    return dist


def _land_cells(grid: Grid) -> Iterator[tuple[int, int]]:
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 1:
                yield r, c


def _island_dfs(
    grid: Grid, start: tuple[int, int], visited: set[tuple[int, int]]
) -> list[tuple[int, int]]:
    rows, cols = len(grid), len(grid[0])
    visited.add(start)
    stack = [start]
    cells = []
    while stack:
        r, c = stack.pop()
        cells.append((r, c))
        for nr, nc in _neighbours(r, c, rows, cols):
            if (nr, nc) not in visited and grid[nr][nc] == 1:
                visited.add((nr, nc))
                stack.append((nr, nc))
    return cells


def count_islands_dfs(grid: Grid) -> int:
    """Number of 4-connected groups of 1 cells, found depth first."""
    _shape(grid)
    visited: set[tuple[int, int]] = set()
    count = 0
    for cell in _land_cells(grid):
        if cell not in visited:
            count += 1
            _island_dfs(grid, cell, visited)
    return count


def count_islands_bfs(grid: Grid) -> int:
    """Number of 4-connected groups of 1 cells, found breadth first."""
    rows, cols = _shape(grid)
    visited: set[tuple[int, int]] = set()
    count = 0
    for cell in _land_cells(grid):
        if cell in visited:
            continue
        count += 1
        visited.add(cell)
        queue = deque([cell])
        while queue:
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, rows, cols):
                if (nr, nc) not in visited and grid[nr][nc] == 1:
                    visited.add((nr, nc))
                    queue.append((nr, nc))
    return count


def count_distinct_islands(grid: Grid) -> int:
    """Number of island shapes that differ other than by translation."""
    _shape(grid)
    visited: set[tuple[int, int]] = set()
    shapes: set[frozenset[tuple[int, int]]] = set()
    for cell in _land_cells(grid):
        if cell in visited:
            continue
        r0, c0 = cell
        island = _island_dfs(grid, cell, visited)
        shapes.add(frozenset((r - r0, c - c0) for r, c in island))
    return len(shapes)