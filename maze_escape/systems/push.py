"""Push interaction system.

Lets the hero slide the wall directly in front of it one cell further along
the push vector, provided the cell beyond is Empty. Only one wall moves per
push; a wall backed by another wall, the exit or the maze edge does not move.
"""

from dataclasses import replace

from maze_escape.components import Position
from maze_escape.state import State


def push_system(state: State, target: Position, offset: Position) -> State:
    """Attempt to push the wall at ``target`` along ``offset``.

    Only the grid changes here; moving the hero onto the vacated cell is the
    caller's job.

    Args:
        state (State): Current immutable state.
        target (Position): Cell in front of the hero.
        offset (Position): Unit push vector.

    Returns:
        State: Updated state with the new grid if the push succeeds; the
            original state object otherwise.
    """
    pushed_grid = state.grid.push(target, offset)
    if pushed_grid is None:
        return state
    return replace(state, grid=pushed_grid)
