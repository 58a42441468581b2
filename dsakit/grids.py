"""Problems on rectangular grids: islands, paths and walks."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, Sequence
from math import comb, inf

MOD = 10**9 + 7

Grid = Sequence[Sequence[int]]
Cell = tuple[int, int]

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _dimensions(grid: Grid) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    return len(grid), len(grid[0])


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _on_border(row: int, col: int, rows: int, cols: int) -> bool:
    return row in (0, rows - 1) or col in (0, cols - 1)


def num_enclaves(grid: Grid) -> int:
    """Count land cells (1) from which no walk leads off the grid."""
    rows, cols = _dimensions(grid)
    border = [
        (r, c)
        for r, line in enumerate(grid)
        for c, value in enumerate(line)
        if value == 1 and _on_border(r, c, rows, cols)
    ]
    seen = set(border)
    queue = deque(border)
    while queue:
        r, c = queue.popleft()
        for cell in _neighbours(r, c, rows, cols):
            if cell not in seen and grid[cell[0]][cell[1]] == 1:
                seen.add(cell)
                queue.append(cell)
    return sum(
        1
        for r, line in enumerate(grid)
        for c, value in enumerate(line)
        if value == 1 and (r, c) not in seen
    )


def closed_island(grid: Grid) -> int:
    """Count islands of land (0) surrounded by water (1) on every side."""
    rows, cols = _dimensions(grid)
    land = {(r, c) for r, line in enumerate(grid) for c, value in enumerate(line) if value == 0}

    def flood(start: Cell) -> None:
        land.discard(start)
        stack = [start]
        while stack:
            r, c = stack.pop()
            for cell in _neighbours(r, c, rows, cols):
                if cell in land:
                    land.remove(cell)
                    stack.append(cell)

    for cell in [cell for cell in land if _on_border(*cell, rows, cols)]:
        if cell in land:
            flood(cell)
    islands = 0
    while land:
        flood(next(iter(land)))
        islands += 1
    return islands


def count_servers(grid: Grid) -> int:
    """Count servers that share a row or a column with another server."""
    _dimensions(grid)
    row_counts = [sum(1 for value in line if value) for line in grid]
    column_counts = [sum(1 for value in column if value) for column in zip(*grid)]
    return sum(
        1
        for r, line in enumerate(grid)
        for c, value in enumerate(line)
        if value and (row_counts[r] > 1 or column_counts[c] > 1)
    )


def minimum_effort_path(heights: Grid) -> int:
    """Return the least maximum height step on a path from top-left to bottom-right."""
    rows, cols = _dimensions(heights)
    target = (rows - 1, cols - 1)
    best: dict[Cell, int] = {(0, 0): 0}
    heap = [(0, 0, 0)]
    while heap:
        effort, r, c = heapq.heappop(heap)
        if (r, c) == target:
            return effort
        if effort > best[(r, c)]:
            continue
        for nr, nc in _neighbours(r, c, rows, cols):
            step = max(effort, abs(heights[r][c] - heights[nr][nc]))
            if step < best.get((nr, nc), inf):
                best[(nr, nc)] = step
                heapq.heappush(heap, (step, nr, nc))
    return 0


def count_sub_islands(grid1: Grid, grid2: Grid) -> int:
    """Count islands of ``grid2`` lying entirely on land of ``grid1``."""
    rows, cols = _dimensions(grid2)
    if _dimensions(grid1) != (rows, cols):
        raise ValueError("grids must have the same shape")
    seen: set[Cell] = set()
    count = 0
    for r, line in enumerate(grid2):
        for c, value in enumerate(line):
            if value != 1 or (r, c) in seen:
                continue
            seen.add((r, c))
            queue = deque([(r, c)])
            inside = True
            while queue:
                cr, cc = queue.popleft()
                if grid1[cr][cc] != 1:
                    inside = False
                for cell in _neighbours(cr, cc, rows, cols):
                    if cell not in seen and grid2[cell[0]][cell[1]] == 1:
                        seen.add(cell)
                        queue.append(cell)
            count += inside
    return count


def number_of_paths(grid: Grid, k: int) -> int:
    """Count right/down paths whose cell sum is divisible by ``k``, modulo 10**9+7."""
    _dimensions(grid)
    if k < 1:
        raise ValueError("k must be positive")
    zeros = [0] * k
    previous: list[list[int]] = []
    for line in grid:
        current: list[list[int]] = []
        for c, value in enumerate(line):
            if not previous and not current:
                incoming = [1] + [0] * (k - 1)
            else:
                above = previous[c] if previous else zeros
                left = current[-1] if current else zeros
                incoming = [(a + b) % MOD for a, b in zip(above, left)]
            shift = value % k
            current.append(incoming[-shift:] + incoming[:-shift] if shift else incoming)
        previous = current
    return previous[-1][0]


def find_paths(m: int, n: int, max_move: int, start_row: int, start_column: int) -> int:
    """Count walks of at most ``max_move`` steps that leave the grid, modulo 10**9+7."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    if not (0 <= start_row < m and 0 <= start_column < n):
        raise ValueError("start cell lies outside the grid")
    ways = [[0] * n for _ in range(m)]
    for _ in range(max_move):
        ways = [
            [
                sum(
                    ways[x][y] if 0 <= x < m and 0 <= y < n else 1
                    for x, y in ((i + dr, j + dc) for dr, dc in _STEPS)
                )
                % MOD
                for j in range(n)
            ]
            for i in range(m)
        ]
    return ways[start_row][start_column]


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)


def min_path_sum(grid: Grid) -> int:
    """Return the smallest cell sum of a right/down path across the grid."""
    _dimensions(grid)
    previous: list[int] = []
    for line in grid:
        current: list[int] = []
        for c, value in enumerate(line):
            candidates = []
            if previous:
                candidates.append(previous[c])
            if current:
                candidates.append(current[-1])
            current.append(value + (min(candidates) if candidates else 0))
        previous = current
    return previous[-1]


def cherry_pickup(grid: Grid) -> int:
    """Return the most cherries gathered going to the far corner and back.

    Cells hold 1 (cherry), 0 (empty) or -1 (thorn, impassable).
    """
    n = len(grid)
    if n == 0:
        raise ValueError("grid must not be empty")
    if grid[0][0] == -1:
        return 0
    # Two walkers move together; best maps (row1, row2) after t steps to cherries taken.
    best: dict[tuple[int, int], int] = {(0, 0): grid[0][0]}
    for t in range(1, 2 * n - 1):
        rows = range(max(0, t - n + 1), min(n - 1, t) + 1)
        following: dict[tuple[int, int], int] = {}
        for r1 in rows:
            for r2 in rows:
                c1, c2 = t - r1, t - r2
                if grid[r1][c1] == -1 or grid[r2][c2] == -1:
                    continue
                before = [
                    best[key]
                    for key in ((r1, r2), (r1 - 1, r2), (r1, r2 - 1), (r1 - 1, r2 - 1))
                    if key in best
                ]
                if not before:
                    continue
                gain = grid[r1][c1] + (grid[r2][c2] if r1 != r2 else 0)
                following[(r1, r2)] = max(before) + gain
        best = following
    return max(0, best.get((n - 1, n - 1), 0))