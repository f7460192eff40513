"""Terminal condition helper predicates."""

from typing import Optional

from maze_escape.state import State
from maze_escape.types import GamePhase

WIN_MESSAGE = "YOU WIN"
LOSE_MESSAGE = "YOU LOSE"


def is_terminal_state(state: State) -> bool:
    """Return True if the game is already won or lost."""
    return state.phase != GamePhase.PLAYING


def outcome_message(state: State) -> Optional[str]:
    """Human-readable outcome label for terminal states, else ``None``."""
    if state.phase == GamePhase.WON:
        return WIN_MESSAGE
    if state.phase == GamePhase.LOST:
        return LOSE_MESSAGE
    return None
