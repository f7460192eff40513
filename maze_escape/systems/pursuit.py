"""Troll pursuit system.

Each troll takes one step along a shortest path towards the hero's current
position. Paths are searched on a walkable matrix computed fresh from the
grid every time, since pushes change the maze between turns. When the hero is
unreachable the troll waits.

Trolls act independently and in ``state.trolls`` order. They never push
walls and may share cells with each other.
"""

from dataclasses import replace

from maze_escape.components import Position, Troll
from maze_escape.grid import Grid
from maze_escape.state import State
from maze_escape.types import GamePhase
from maze_escape.utils.pathfinding import find_path


def pursue(troll: Troll, grid: Grid, hero_position: Position) -> Troll:
    """Advance ``troll`` one cell towards ``hero_position``.

    Returns the same troll object when no path of at least two cells exists.
    """
    path = find_path(grid.walkable_matrix(), troll.position, hero_position)
    if len(path) < 2:
        return troll
    return replace(troll, position=path[1])


def pursuit_system(state: State) -> State:
    """Run one pursuit step for every troll and detect catches.

    A troll standing on the hero's cell after its step catches the hero and
    the phase becomes ``LOST``. Remaining trolls still take their step.
    """
    hero_position = state.hero.position
    trolls = state.trolls
    caught = False

    for index, troll in enumerate(state.trolls):
        moved = pursue(troll, state.grid, hero_position)
        if moved is not troll:
            trolls = trolls.set(index, moved)
        if moved.position == hero_position:
            caught = True

    if caught:
        return replace(state, trolls=trolls, phase=GamePhase.LOST)
    return replace(state, trolls=trolls)
