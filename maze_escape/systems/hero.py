"""Hero movement system.

Applies one directional input to the hero:

1. The facing is set to the requested direction unconditionally.
2. If the cell ahead is Empty or the exit, the hero steps onto it.
3. Otherwise, if the cell ahead is a pushable wall (see
   :mod:`maze_escape.systems.push`), the wall slides and the hero steps into
   the freed cell.
4. Otherwise the hero stays put; only the facing changed.

The maze edge behaves like a wall because grid queries fail closed.
"""

from dataclasses import replace

from maze_escape.actions import DIRECTION_OFFSETS
from maze_escape.state import State
from maze_escape.systems.push import push_system
from maze_escape.types import CellType, Direction


def hero_system(state: State, direction: Direction) -> State:
    """Turn the hero towards ``direction`` and try to move one cell.

    Args:
        state (State): Current state.
        direction (Direction): Requested direction.

    Returns:
        State: State with updated facing and, if the move succeeded, updated
            hero position (and grid, when a wall was pushed).
    """
    hero = replace(state.hero, direction=direction)
    offset = DIRECTION_OFFSETS[direction]
    target = hero.position + offset

    if state.grid.cell_is(target, CellType.EMPTY, CellType.EXIT):
        return replace(state, hero=replace(hero, position=target))

    pushed_state = push_system(state, target, offset)
    if pushed_state is not state:
        return replace(pushed_state, hero=replace(hero, position=target))

    return replace(state, hero=hero)
