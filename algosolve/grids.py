"""Grid and matrix algorithms: puzzles, islands, shortest paths and painting."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from itertools import product
from typing import Iterator, Sequence

_INT_MAX = 2**31 - 1
_INF = 1 << 29

_PUZZLE_TARGET = "123450"
_PUZZLE_NEIGHBOURS = ((1, 3), (0, 2, 4), (1, 5), (0, 4), (1, 3, 5), (2, 4))

# Arrow signs: 1 right, 2 left, 3 down, 4 up.
_ARROWS = {1: (0, 1), 2: (0, -1), 3: (1, 0), 4: (-1, 0)}
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _adjacent(r: int, c: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield the in-bounds orthogonal neighbours of ``(r, c)``."""
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _component(
    grid: Sequence[Sequence[int]], start: tuple[int, int], seen: set[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Collect the non-zero cells connected to ``start``, marking them in ``seen``."""
    rows, cols = len(grid), len(grid[0])
    seen.add(start)
    stack = [start]
    cells = []
    while stack:
        r, c = stack.pop()
        cells.append((r, c))
        for nr, nc in _adjacent(r, c, rows, cols):
            if grid[nr][nc] and (nr, nc) not in seen:
                seen.add((nr, nc))
                stack.append((nr, nc))
    return cells


def sliding_puzzle(board: Sequence[Sequence[int]]) -> int:
    """Fewest moves to solve a 2 x 3 sliding puzzle, or -1 if it cannot be solved."""
    if len(board) != 2 or any(len(row) != 3 for row in board):
        raise ValueError("board must be 2 x 3")
    start = "".join(str(value) for row in board for value in row)
    visited = {start}
    queue = deque([(start, 0)])
    while queue:
        state, moves = queue.popleft()
        if state == _PUZZLE_TARGET:
            return moves
        zero = state.index("0")
        for other in _PUZZLE_NEIGHBOURS[zero]:
            cells = list(state)
            cells[zero], cells[other] = cells[other], cells[zero]
            following = "".join(cells)
            if following not in visited:
                visited.add(following)
                queue.append((following, moves + 1))
    return -1


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest island after turning at most one water cell into land."""
    n = len(grid)
    ids = [[0] * n for _ in range(n)]
    sizes: dict[int, int] = {}
    seen: set[tuple[int, int]] = set()
    largest = 0
    next_id = 2
    for r, c in product(range(n), repeat=2):
        if grid[r][c] and (r, c) not in seen:
            cells = _component(grid, (r, c), seen)
            for cr, cc in cells:
                ids[cr][cc] = next_id
            sizes[next_id] = len(cells)
            largest = max(largest, len(cells))
            next_id += 1

    for r, c in product(range(n), repeat=2):
        if ids[r][c]:
            continue
        touching = {ids[nr][nc] for nr, nc in _adjacent(r, c, n, n)}
        largest = max(largest, 1 + sum(sizes[i] for i in touching if i))
    return largest


def max_equal_rows_after_flips(matrix: Sequence[Sequence[int]]) -> int:
    """Most rows that can be made all-equal by flipping the same set of columns."""
    patterns = Counter(
        tuple(value if row[0] == 1 else 1 - value for value in row) for row in matrix
    )
    return max(patterns.values(), default=0)


def count_servers(grid: Sequence[Sequence[int]]) -> int:
    """Count servers sharing a row or column with at least one other server."""
    busy_rows = [sum(row) > 1 for row in grid]
    total = sum(sum(row) for row, busy in zip(grid, busy_rows) if busy)
    for column in zip(*grid):
        in_column = sum(1 for value in column if value == 1)
        already = sum(1 for value, busy in zip(column, busy_rows) if value == 1 and busy)
        if in_column > 1:
            total += in_column - already
    return total


def min_cost_to_valid_path(grid: Sequence[Sequence[int]]) -> int:
    """Fewest arrow changes so that following arrows leads from top-left to bottom-right."""
    rows, cols = len(grid), len(grid[0])
    visited = [[False] * cols for _ in range(rows)]
    queue = deque([(0, 0, 0)])
    while queue:
        cost, r, c = queue.popleft()
        if r == rows - 1 and c == cols - 1:
            return cost
        if visited[r][c]:
            continue
        visited[r][c] = True
        for direction, (dr, dc) in _ARROWS.items():
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            if direction == grid[r][c]:
                queue.appendleft((cost, nr, nc))
            else:
                queue.append((cost + 1, nr, nc))
    return _INT_MAX


def highest_peak(is_water: Sequence[Sequence[int]]) -> list[list[int]]:
    """Assign heights: water is 0 and neighbours differ by at most 1, maximising peaks."""
    rows, cols = len(is_water), len(is_water[0])
    heights = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, c in product(range(rows), range(cols)):
        if is_water[r][c]:
            heights[r][c] = 0
            queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _adjacent(r, c, rows, cols):
            if heights[nr][nc] == -1:
                heights[nr][nc] = heights[r][c] + 1
                queue.append((nr, nc))
    return heights


def rotate_the_box(box: Sequence[Sequence[str]]) -> list[list[str]]:
    """Rotate the box clockwise and let stones ('#') fall onto obstacles ('*') or the floor."""
    rows, cols = len(box), len(box[0])
    result = [["."] * rows for _ in range(cols)]
    for r, row in enumerate(box):
        target = rows - r - 1
        drop = cols - 1
        for c in reversed(range(cols)):
            if row[c] == "#":
                result[drop][target] = "#"
                drop -= 1
            elif row[c] == "*":
                result[c][target] = "*"
                drop = c - 1
    return result


def max_matrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Largest sum reachable by repeatedly negating pairs of adjacent cells."""
    values = [value for row in matrix for value in row]
    total = sum(abs(value) for value in values)
    negatives = sum(1 for value in values if value < 0)
    smallest = min((abs(value) for value in values), default=_INF)
    return total if negatives % 2 == 0 else total - 2 * smallest


def minimum_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Fewest obstacles to remove to walk from top-left to bottom-right."""
    rows, cols = len(grid), len(grid[0])
    best = [[_INF] * cols for _ in range(rows)]
    best[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        removed, r, c = heapq.heappop(heap)
        if r == rows - 1 and c == cols - 1:
            return removed
        for nr, nc in _adjacent(r, c, rows, cols):
            candidate = removed + grid[nr][nc]
            if candidate < best[nr][nc]:
                best[nr][nc] = candidate
                heapq.heappush(heap, (candidate, nr, nc))
    return -1


def first_complete_index(arr: Sequence[int], mat: Sequence[Sequence[int]]) -> int:
    """Index in ``arr`` at which painting first fills a whole row or column of ``mat``."""
    rows, cols = len(mat), len(mat[0])
    where = {value: (r, c) for r, row in enumerate(mat) for c, value in enumerate(row)}
    row_painted = [0] * rows
    col_painted = [0] * cols
    for i, value in enumerate(arr[: rows * cols]):
        r, c = where[value]
        row_painted[r] += 1
        col_painted[c] += 1
        if row_painted[r] == cols or col_painted[c] == rows:
            return i
    return -1


def find_max_fish(grid: Sequence[Sequence[int]]) -> int:
    """Most fish a fisher can collect within one connected water region."""
    seen: set[tuple[int, int]] = set()
    best = 0
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value and (r, c) not in seen:
                cells = _component(grid, (r, c), seen)
                best = max(best, sum(grid[cr][cc] for cr, cc in cells))
    return best