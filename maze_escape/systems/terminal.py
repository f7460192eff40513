"""Terminal condition systems.

Set the game phase to ``WON`` or ``LOST`` exactly once and attach the outcome
label for the front end. Other systems short-circuit when the state is already
terminal.
"""

from dataclasses import replace

from maze_escape.state import State
from maze_escape.types import GamePhase
from maze_escape.utils.terminal import is_terminal_state, outcome_message


def win_system(state: State) -> State:
    """Set ``WON`` if the hero stands on the exit.

    Skips evaluation if the state is already terminal.
    """
    if is_terminal_state(state):
        return state

    if state.hero.position == state.grid.exit:
        return replace(state, phase=GamePhase.WON)
    return state


def message_system(state: State) -> State:
    """Attach the outcome label once the game is over (idempotent)."""
    message = outcome_message(state)
    if message is not None and state.message != message:
        return replace(state, message=message)
    return state
