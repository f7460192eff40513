"""State reducer and turn orchestration.

This module wires together all systems in the correct order to implement a
single *turn* transition given a ``Direction``. The exported :func:`step` is
the only public entry point for gameplay progression and is pure: it returns a
*new* :class:`maze_escape.state.State`.

Ordering:

1. Terminal states are returned unchanged (input is ignored after a win/loss).
2. ``hero_system`` turns the hero and moves or pushes.
3. ``win_system`` checks the exit. A winning turn ends here; trolls do not
   get a pursuit step.
4. ``pursuit_system`` advances every troll one step and detects catches.
5. The turn counter is bumped and the outcome label attached.
"""

from dataclasses import replace

from maze_escape.state import State
from maze_escape.systems.hero import hero_system
from maze_escape.systems.pursuit import pursuit_system
from maze_escape.systems.terminal import message_system, win_system
from maze_escape.types import Direction
from maze_escape.utils.terminal import is_terminal_state


def step(state: State, direction: Direction) -> State:
    """Advance the game by one turn.

    Args:
        state (State): Previous immutable game state.
        direction (Direction): Input direction for this turn.

    Returns:
        State: Next state snapshot. If the input state is already terminal the
            same object is returned unchanged.

    Raises:
        ValueError: If ``direction`` is not a :class:`Direction`.
    """
    if not isinstance(direction, Direction):
        raise ValueError(f"Direction is not valid: {direction!r}")

    if is_terminal_state(state):
        return state

    state = hero_system(state, direction)
    state = win_system(state)
    if not state.win:
        state = pursuit_system(state)

    return _after_step(state)


def _after_step(state: State) -> State:
    """Finalize a turn: bump the counter and label terminal outcomes."""
    state = replace(state, turn=state.turn + 1)
    state = message_system(state)
    return state
