"""Grid shortest-path search (A*).

Works on the ``0``/``1`` matrix produced by
:meth:`maze_escape.grid.Grid.walkable_matrix` (``0`` is walkable). Moves are
4-directional with unit cost and the heuristic is Manhattan distance, which is
admissible on such a grid, so returned paths are shortest paths.

Determinism: neighbours are expanded in :data:`maze_escape.actions.DIRECTIONS`
order and heap ties are broken by insertion order, so the same matrix, start
and goal always yield the same path.
"""

import heapq
import itertools
from typing import Dict, List, Optional, Tuple

from maze_escape.actions import DIRECTION_OFFSETS, DIRECTIONS
from maze_escape.components import Position
from maze_escape.types import WalkableMatrix


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def is_walkable(matrix: WalkableMatrix, pos: Position) -> bool:
    """Return True if ``pos`` is inside ``matrix`` and marked ``0``."""
    if pos.y < 0 or pos.y >= len(matrix):
        return False
    row = matrix[pos.y]
    return 0 <= pos.x < len(row) and row[pos.x] == 0


def neighbors(matrix: WalkableMatrix, pos: Position) -> List[Position]:
    """Walkable 4-neighbours of ``pos`` in canonical direction order."""
    candidates = [pos + DIRECTION_OFFSETS[direction] for direction in DIRECTIONS]
    return [p for p in candidates if is_walkable(matrix, p)]


def find_path(
    matrix: WalkableMatrix, start: Position, goal: Position
) -> List[Position]:
    """Shortest path from ``start`` to ``goal``.

    The start cell is expanded even when it is not walkable itself (an entity
    standing on a cell always gets to leave it). The goal must be walkable
    unless it equals the start.

    Args:
        matrix (WalkableMatrix): ``0`` for walkable cells, anything else blocked.
        start (Position): Search origin.
        goal (Position): Search target.

    Returns:
        List[Position]: Path including both endpoints, ``[start]`` when
        ``start == goal``, or an empty list when the goal is unreachable.
    """
    if start == goal:
        return [start]
    if not is_walkable(matrix, goal):
        return []

    counter = itertools.count()
    open_set: List[Tuple[int, int, Position]] = []
    heapq.heappush(open_set, (manhattan_distance(start, goal), next(counter), start))
    came_from: Dict[Position, Optional[Position]] = {start: None}
    g_score: Dict[Position, int] = {start: 0}
    closed: set[Position] = set()

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current == goal:
            return _reconstruct_path(came_from, current)
        if current in closed:
            continue
        closed.add(current)

        for neighbor in neighbors(matrix, current):
            tentative = g_score[current] + 1
            if tentative < g_score.get(neighbor, tentative + 1):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score = tentative + manhattan_distance(neighbor, goal)
                heapq.heappush(open_set, (f_score, next(counter), neighbor))

    return []


def _reconstruct_path(
    came_from: Dict[Position, Optional[Position]], current: Position
) -> List[Position]:
    path = [current]
    previous = came_from[current]
    while previous is not None:
        path.append(previous)
        previous = came_from[previous]
    path.reverse()
    return path
