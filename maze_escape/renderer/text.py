"""Plain-text frame renderer.

Turns a :class:`~maze_escape.state.State` into lines of characters for a
terminal front end: the maze cells, trolls drawn as ``T`` and the hero drawn
with its facing icon on top. The outcome banner (``YOU WIN`` / ``YOU LOSE``)
is available separately so the front end can place it however it likes.
"""

from typing import List, Optional

from maze_escape.actions import DIRECTION_ICONS
from maze_escape.components import TROLL_ICON, Position
from maze_escape.state import State
from maze_escape.utils.terminal import outcome_message


def render_text(state: State) -> List[str]:
    """Render the maze with entities overlaid, one string per row."""
    canvas = [list(row) for row in state.grid.render_rows()]

    def draw(pos: Position, glyph: str) -> None:
        if state.grid.in_bounds(pos):
            canvas[pos.y][pos.x] = glyph

    for troll in state.trolls:
        draw(troll.position, TROLL_ICON)
    draw(state.hero.position, DIRECTION_ICONS[state.hero.direction])

    return ["".join(row) for row in canvas]


def render_banner(state: State) -> Optional[str]:
    """Outcome label for a finished game, ``None`` while playing."""
    return outcome_message(state)
