"""Build an initial :class:`~maze_escape.state.State` from a parsed grid.

Placement semantics:
    * The hero is placed first on a uniformly random free cell.
    * Each troll is then placed on a random free cell that avoids the hero
      and every previously placed troll, so entities never spawn stacked.
    * Exit and wall cells are never chosen.

All randomness comes from one ``random.Random(seed)`` so a fixed seed
reproduces the same layout.
"""

import logging
import random
from typing import List, Optional

from pyrsistent import pvector

from maze_escape.components import Hero, Position, Troll
from maze_escape.grid import Grid
from maze_escape.levels.maze import parse_maze
from maze_escape.state import State
from maze_escape.utils.grid import count_free_cells, random_free_position

logger = logging.getLogger(__name__)


def to_state(
    grid: Grid,
    troll_count: int = 0,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> State:
    """Place the hero and ``troll_count`` trolls on ``grid``.

    Args:
        grid (Grid): Parsed maze.
        troll_count (int): Number of trolls, fixed for the whole game.
        seed (int | None): Seed for placement (ignored if ``rng`` is given).
        rng (random.Random | None): Explicit RNG, mainly for tests.

    Returns:
        State: Fresh ``PLAYING`` state at turn 0.

    Raises:
        ValueError: If ``troll_count`` is negative or the maze has fewer free
            cells than entities to place.
    """
    if troll_count < 0:
        raise ValueError(f"troll_count must be non-negative, got {troll_count}")
    free_cells = count_free_cells(grid, ())
    if free_cells < troll_count + 1:
        raise ValueError(
            f"Maze has {free_cells} free cells, cannot place hero and {troll_count} trolls"
        )

    if rng is None:
        rng = random.Random(seed)

    occupied: List[Position] = []
    hero_pos = random_free_position(grid, occupied, rng)
    occupied.append(hero_pos)

    trolls: List[Troll] = []
    for _ in range(troll_count):
        troll_pos = random_free_position(grid, occupied, rng)
        occupied.append(troll_pos)
        trolls.append(Troll(position=troll_pos))

    logger.debug(
        "Placed hero at %s and %d trolls at %s",
        hero_pos,
        len(trolls),
        [t.position for t in trolls],
    )
    return State(grid=grid, hero=Hero(position=hero_pos), trolls=pvector(trolls), seed=seed)


def state_from_text(
    text: str, troll_count: int = 0, seed: Optional[int] = None
) -> State:
    """Parse maze text and place entities in one call."""
    return to_state(parse_maze(text), troll_count=troll_count, seed=seed)
