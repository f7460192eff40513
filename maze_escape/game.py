"""Stateful game facade.

:class:`Game` is the seam between the pure reducer and an interactive front
end. It keeps the current :class:`~maze_escape.state.State`, feeds each input
direction through :func:`maze_escape.step.step` and notifies render listeners
after every processed turn.

Usage::

    game = Game.from_config(GameConfig(seed=7))
    game.subscribe(lambda state: print("\\n".join(render_text(state))))
    game.process_turn(Direction.LEFT)

Input after the game is won or lost is ignored and no listener is called.
"""

import logging
from typing import Callable, List, Optional

from pyrsistent.typing import PVector

from maze_escape.components import Hero, Troll
from maze_escape.config import GameConfig
from maze_escape.grid import Grid
from maze_escape.levels.convert import state_from_text
from maze_escape.state import State
from maze_escape.step import step
from maze_escape.types import Direction, GamePhase

logger = logging.getLogger(__name__)

RenderListener = Callable[[State], None]


class Game:
    """Owns the current game state and drives it one turn at a time."""

    def __init__(
        self, state: State, listeners: Optional[List[RenderListener]] = None
    ) -> None:
        self._state = state
        self._listeners: List[RenderListener] = list(listeners or [])

    @classmethod
    def from_config(cls, config: GameConfig) -> "Game":
        """Parse the configured maze and place hero and trolls.

        Raises:
            MalformedMaze: If the maze text is invalid.
        """
        state = state_from_text(config.maze, troll_count=config.troll_count, seed=config.seed)
        grid = state.grid
        logger.info(
            "New game: %dx%d maze, %d trolls, seed=%s",
            grid.width,
            grid.height,
            config.troll_count,
            config.seed,
        )
        return cls(state)

    @property
    def state(self) -> State:
        return self._state

    @property
    def grid(self) -> Grid:
        return self._state.grid

    @property
    def hero(self) -> Hero:
        return self._state.hero

    @property
    def trolls(self) -> PVector[Troll]:
        return self._state.trolls

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    def subscribe(self, listener: RenderListener) -> None:
        """Register a callback invoked with the new state after each turn."""
        self._listeners.append(listener)

    def render(self) -> None:
        """Push the current state to every listener."""
        for listener in self._listeners:
            listener(self._state)

    def process_turn(self, direction: Direction) -> State:
        """Apply one input direction and re-render.

        Args:
            direction (Direction): Input for this turn.

        Returns:
            State: The state after the turn (unchanged if the game is over).
        """
        previous = self._state
        self._state = step(previous, direction)
        if self._state is previous:
            logger.debug("Ignoring %s: game is %s", direction, previous.phase)
            return self._state

        logger.debug("Turn %d: %s", self._state.turn, dict(self._state.description))
        if self._state.phase != GamePhase.PLAYING:
            logger.info("Game over after %d turns: %s", self._state.turn, self._state.message)
        self.render()
        return self._state
