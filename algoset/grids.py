"""Algorithms over rectangular grids given as lists of rows."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Deque, Iterator, List, MutableSequence, Sequence, Tuple

Grid = Sequence[Sequence[int]]

_ORTHOGONAL: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
_ALL_EIGHT: Tuple[Tuple[int, int], ...] = _ORTHOGONAL + ((-1, -1), (-1, 1), (1, 1), (1, -1))
_UNREACHED = 10**9


def _neighbours(
    row: int,
    col: int,
    rows: int,
    cols: int,
    steps: Tuple[Tuple[int, int], ...] = _ORTHOGONAL,
) -> Iterator[Tuple[int, int]]:
    for dr, dc in steps:
        nrow, ncol = row + dr, col + dc
        if 0 <= nrow < rows and 0 <= ncol < cols:
            yield nrow, ncol


def _border_cells(rows: int, cols: int) -> Iterator[Tuple[int, int]]:
    for col in range(cols):
        yield 0, col
        yield rows - 1, col
    for row in range(rows):
        yield row, 0
        yield row, cols - 1


def _mark_reachable(
    grid: Sequence[Sequence[object]],
    starts: Iterator[Tuple[int, int]],
    wanted: object,
) -> List[List[bool]]:
    """Mark every cell holding ``wanted`` reachable from a start cell holding it."""
    rows, cols = len(grid), len(grid[0])
    seen = [[False] * cols for _ in range(rows)]
    for start in starts:
        srow, scol = start
        if seen[srow][scol] or grid[srow][scol] != wanted:
            continue
        seen[srow][scol] = True
        stack = [start]
        while stack:
            row, col = stack.pop()
            for nrow, ncol in _neighbours(row, col, rows, cols):
                if not seen[nrow][ncol] and grid[nrow][ncol] == wanted:
                    seen[nrow][ncol] = True
                    stack.append((nrow, ncol))
    return seen


def oranges_rotting(grid: Grid) -> int:
    """Return the minutes until no fresh orange (1) is left, or -1 if one never rots.

    Rotten oranges (2) spread to fresh orthogonal neighbours once per minute.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    rotten = [[cell == 2 for cell in row] for row in grid]
    queue: Deque[Tuple[int, int, int]] = deque(
        (r, c, 0) for r in range(rows) for c in range(cols) if grid[r][c] == 2
    )
    elapsed = 0
    while queue:
        row, col, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for nrow, ncol in _neighbours(row, col, rows, cols):
            if grid[nrow][ncol] == 1 and not rotten[nrow][ncol]:
                rotten[nrow][ncol] = True
                queue.append((nrow, ncol, minute + 1))
    for grid_row, rotten_row in zip(grid, rotten):
        if any(cell == 1 and not done for cell, done in zip(grid_row, rotten_row)):
            return -1
    return elapsed


def num_enclaves(grid: Grid) -> int:
    """Count land cells (1) from which the border cannot be reached."""
    rows, cols = len(grid), len(grid[0])
    seen = _mark_reachable(grid, _border_cells(rows, cols), 1)
    return sum(
        1
        for grid_row, seen_row in zip(grid, seen)
        for cell, reached in zip(grid_row, seen_row)
        if cell == 1 and not reached
    )


def shortest_path_binary_matrix(grid: Grid) -> int:
    """Return the cell count of the shortest 8-way clear path across a square grid, or -1."""
    n = len(grid)
    if grid[0][0] == 1 or grid[n - 1][n - 1] == 1:
        return -1
    dist = [[_UNREACHED] * n for _ in range(n)]
    dist[0][0] = 1
    queue: Deque[Tuple[int, int, int]] = deque([(1, 0, 0)])
    while queue:
        length, row, col = queue.popleft()
        if row == n - 1 and col == n - 1:
            return length
        for nrow, ncol in _neighbours(row, col, n, n, _ALL_EIGHT):
            if grid[nrow][ncol] == 0 and length + 1 < dist[nrow][ncol]:
                dist[nrow][ncol] = length + 1
                queue.append((length + 1, nrow, ncol))
    return -1


def capture_surrounded(board: Sequence[MutableSequence[str]]) -> None:
    """Turn every 'O' region not touching the border into 'X', in place."""
    rows, cols = len(board), len(board[0])
    seen = _mark_reachable(board, _border_cells(rows, cols), "O")
    for board_row, seen_row in zip(board, seen):
        for col, reached in enumerate(seen_row):
            if not reached:
                board_row[col] = "X"


def minimum_effort_path(heights: Grid) -> int:
    """Return the least possible largest height step on a path from top-left to bottom-right."""
    rows, cols = len(heights), len(heights[0])
    dist = [[_UNREACHED] * cols for _ in range(rows)]
    dist[0][0] = 0
    heap: List[Tuple[int, int, int]] = [(0, 0, 0)]
    while heap:
        effort, row, col = heapq.heappop(heap)
        if row == rows - 1 and col == cols - 1:
            return effort
        for nrow, ncol in _neighbours(row, col, rows, cols):
            step = abs(heights[row][col] - heights[nrow][ncol])
            new_effort = max(step, effort)
            if new_effort < dist[nrow][ncol]:
                dist[nrow][ncol] = new_effort
                heapq.heappush(heap, (new_effort, nrow, ncol))
    return 0


def update_matrix(mat: Grid) -> List[List[int]]:
    """Return each cell's distance to the nearest 0; -1 where no 0 exists."""
    rows, cols = len(mat), len(mat[0])
    dist = [[-1] * cols for _ in range(rows)]
    queue: Deque[Tuple[int, int]] = deque()
    for r, grid_row in enumerate(mat):
        for c, cell in enumerate(grid_row):
            if cell == 0:
                dist[r][c] = 0
                queue.append((r, c))
    while queue:
        row, col = queue.popleft()
        for nrow, ncol in _neighbours(row, col, rows, cols):
            if dist[nrow][ncol] == -1:
                dist[nrow][ncol] = dist[row][col] + 1
                queue.append((nrow, ncol))
    return dist


def flood_fill(image: List[List[int]], sr: int, sc: int, color: int) -> List[List[int]]:
    """Return a copy of image with the region around (sr, sc) painted in color.

    When the start pixel already has that color, the image itself is returned.
    """
    start = image[sr][sc]
    if start == color:
        return image
    rows, cols = len(image), len(image[0])
    result = [list(row) for row in image]
    result[sr][sc] = color
    stack = [(sr, sc)]
    while stack:
        row, col = stack.pop()
        for nrow, ncol in _neighbours(row, col, rows, cols):
            if image[nrow][ncol] == start and result[nrow][ncol] != color:
                result[nrow][ncol] = color
                stack.append((nrow, ncol))
    return result


def search_matrix(matrix: Grid, target: int) -> bool:
    """Tell whether target is in a matrix sorted row by row, end to end."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        value = matrix[mid // cols][mid % cols]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False