"""Breadth- and depth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")
Cell = tuple[int, int]

_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _dimensions(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    return len(grid), (len(grid[0]) if grid else 0)


def _neighbours(row: int, col: int, height: int, width: int) -> Iterator[Cell]:
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < height and 0 <= c < width:
            yield r, c


def _cells(grid: Sequence[Sequence[T]]) -> Iterator[tuple[Cell, T]]:
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            yield (r, c), value


def _border_reachable(
    grid: Sequence[Sequence[T]], is_open: Callable[[T], bool]
) -> set[Cell]:
    """Open cells connected to the border through open cells."""
    height, width = _dimensions(grid)
    reached = {
        (r, c)
        for (r, c), value in _cells(grid)
        if is_open(value) and (r in (0, height - 1) or c in (0, width - 1))
    }
    queue = deque(reached)
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, height, width):
            if (nr, nc) not in reached and is_open(grid[nr][nc]):
                reached.add((nr, nc))
                queue.append((nr, nc))
    return reached


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the region around (sr, sc) repainted."""
    height, width = _dimensions(image)
    if not (0 <= sr < height and 0 <= sc < width):
        raise IndexError(f"start cell ({sr}, {sc}) outside {height}x{width} image")
    original = image[sr][sc]
    result = [list(row) for row in image]
    result[sr][sc] = color
    seen = {(sr, sc)}
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        for nr, nc in _neighbours(r, c, height, width):
            if (nr, nc) not in seen and image[nr][nc] == original:
                seen.add((nr, nc))
                result[nr][nc] = color
                stack.append((nr, nc))
    return result


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until every fresh orange (1) is rotten (2), or -1 if impossible."""
    height, width = _dimensions(grid)
    starts = [cell for cell, value in _cells(grid) if value == 2]
    visited = set(starts)
    queue = deque((cell, 0) for cell in starts)
    last = 0
    while queue:
        (r, c), minute = queue.popleft()
        last = minute
        for nr, nc in _neighbours(r, c, height, width):
            if (nr, nc) not in visited and grid[nr][nc] in (1, 2):
                visited.add((nr, nc))
                queue.append(((nr, nc), minute + 1))
    if any(value == 1 and cell not in visited for cell, value in _cells(grid)):
        return -1
    return last


def nearest_zero_distances(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from every cell to its nearest 0; -1 where no 0 exists."""
    height, width = _dimensions(mat)
    result = [[-1] * width for _ in range(height)]
    queue: deque[Cell] = deque()
    for (r, c), value in _cells(mat):
        if value == 0:
            result[r][c] = 0
            queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, height, width):
            if result[nr][nc] == -1:
                result[nr][nc] = result[r][c] + 1
                queue.append((nr, nc))
    return result


def capture_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a board where regions not touching the border become 'X'."""
    safe = _border_reachable(board, lambda value: value != "X")
    return [
        ["O" if (r, c) in safe else "X" for c in range(len(row))]
        for r, row in enumerate(board)
    ]


def count_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Count land cells from which the border cannot be reached."""
    escaping = _border_reachable(grid, lambda value: value != 0)
    return sum(
        1 for cell, value in _cells(grid) if value != 0 and cell not in escaping
    )


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count islands of 1s that differ in shape up to translation."""
    height, width = _dimensions(grid)
    seen: set[Cell] = set()
    shapes: set[frozenset[Cell]] = set()
    for start, value in _cells(grid):
        if value != 1 or start in seen:
            continue
        seen.add(start)
        island = [start]
        queue = deque([start])
        while queue:
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, height, width):
                if (nr, nc) not in seen and grid[nr][nc] == 1:
                    seen.add((nr, nc))
                    island.append((nr, nc))
                    queue.append((nr, nc))
        base_r, base_c = min(island)
        shapes.add(frozenset((r - base_r, c - base_c) for r, c in island))
    return len(shapes)