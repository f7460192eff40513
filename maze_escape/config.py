"""Game configuration.

``GameConfig`` collects everything needed to start a game: the maze text, how
many trolls chase the hero and the placement seed. Front ends (terminal
loop, :class:`maze_escape.gym_env.MazeEscapeEnv`) build one of these and hand
it to :meth:`maze_escape.game.Game.from_config`.
"""

from dataclasses import dataclass
from typing import Optional

from maze_escape.levels.maze import DEFAULT_DUNGEON

DEFAULT_TROLL_COUNT = 3


@dataclass(frozen=True)
class GameConfig:
    """Immutable game settings.

    Attributes:
        maze: Maze text (see :mod:`maze_escape.levels.maze` for the format).
        troll_count: Number of trolls placed at game start.
        seed: Placement seed; ``None`` for a different layout every game.
    """

    maze: str = DEFAULT_DUNGEON
    troll_count: int = DEFAULT_TROLL_COUNT
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.troll_count < 0:
            raise ValueError(f"troll_count must be non-negative, got {self.troll_count}")
