"""Grid occupancy helpers.

Predicates used by placement and by callers that need to know whether a cell
can take a new entity. Functions here are pure; randomness always comes from
an explicit ``random.Random`` so that seeded runs are reproducible.
"""

import random
from typing import Collection, List

from maze_escape.components import Position
from maze_escape.grid import Grid
from maze_escape.state import State
from maze_escape.types import CellType


def occupied_positions(state: State) -> List[Position]:
    """Positions of the hero and every troll, hero first."""
    return [state.hero.position] + [troll.position for troll in state.trolls]


def is_free_at(grid: Grid, pos: Position, occupied: Collection[Position]) -> bool:
    """Return True if ``pos`` is an Empty cell not in ``occupied``."""
    return grid.cell_is(pos, CellType.EMPTY) and pos not in occupied


def is_empty_for_occupancy(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is Empty and neither the hero nor a troll is there."""
    return is_free_at(state.grid, pos, occupied_positions(state))


def count_free_cells(grid: Grid, occupied: Collection[Position]) -> int:
    """Number of cells that :func:`random_free_position` could return."""
    return sum(
        1
        for y in range(grid.height)
        for x in range(grid.width)
        if is_free_at(grid, Position(x, y), occupied)
    )


def random_free_position(
    grid: Grid, occupied: Collection[Position], rng: random.Random
) -> Position:
    """Sample uniform in-bounds positions until one is free.

    Args:
        grid (Grid): Maze to sample from.
        occupied (Collection[Position]): Cells already taken by entities.
        rng (random.Random): Source of randomness.

    Returns:
        Position: A free Empty cell. Never the exit, never a wall, never an
        occupied cell.

    Raises:
        ValueError: If the maze has no free cell left.
    """
    if count_free_cells(grid, occupied) == 0:
        raise ValueError("Maze has no free cell for placement")
    while True:
        pos = Position(rng.randrange(grid.width), rng.randrange(grid.height))
        if is_free_at(grid, pos, occupied):
            return pos
