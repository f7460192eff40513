"""Gymnasium environment wrapper for Maze Escape.

Provides an observation that pairs an integer cell/entity matrix with an info
dictionary describing the hero, the trolls and the game status. Reward is
``+1`` on the winning turn, ``-1`` on the losing turn and ``0`` otherwise.
``terminated`` is ``True`` on win, ``truncated`` on lose (natural vs forced
episode end).

Observation schema:

``{"grid": np.ndarray(H, W) of int8, "info": {"hero": {...}, "trolls": (...), "status": {...}}}``

Grid codes: ``0`` empty, ``1`` wall, ``2`` exit, ``3`` hero, ``4`` troll
(the hero is drawn over a troll sharing its cell).

Usage:

``env = MazeEscapeEnv(GameConfig(troll_count=2, seed=3))``
"""

import string
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np

from maze_escape.actions import GYM_ACTION_TO_DIRECTION, GymAction
from maze_escape.config import GameConfig
from maze_escape.levels.convert import to_state
from maze_escape.levels.maze import parse_maze
from maze_escape.renderer.text import render_banner, render_text
from maze_escape.state import State
from maze_escape.step import step
from maze_escape.types import CellType

ObsType = Dict[str, Any]

CELL_CODES: Dict[CellType, int] = {
    CellType.EMPTY: 0,
    CellType.WALL: 1,
    CellType.EXIT: 2,
}
HERO_CODE = 3
TROLL_CODE = 4


def grid_observation(state: State) -> np.ndarray:
    """Encode cells and entities into an ``(H, W)`` int8 matrix."""
    obs = np.array(
        [[CELL_CODES[cell] for cell in row] for row in state.grid.render_rows()],
        dtype=np.int8,
    )
    for troll in state.trolls:
        obs[troll.position.y, troll.position.x] = TROLL_CODE
    obs[state.hero.position.y, state.hero.position.x] = HERO_CODE
    return obs


def hero_observation_dict(state: State) -> Dict[str, Any]:
    """Hero position and facing."""
    return {
        "x": int(state.hero.position.x),
        "y": int(state.hero.position.y),
        "direction": str(state.hero.direction),
    }


def trolls_observation_list(state: State) -> Tuple[Dict[str, Any], ...]:
    """Troll positions in pursuit order."""
    return tuple(
        {"x": int(t.position.x), "y": int(t.position.y)} for t in state.trolls
    )


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (phase, turn, outcome message)."""
    return {
        "phase": str(state.phase),
        "turn": int(state.turn),
        "message": state.message or "",
    }


class MazeEscapeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Maze Escape.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`maze_escape.actions`.
    """

    metadata = {"render_modes": ["ansi", "human"]}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: str = "ansi",
    ):
        """Create a new environment instance.

        Arguments:
            config: Maze, troll count and seed. Defaults to ``GameConfig()``.
            render_mode: "ansi" to return the text frame, "human" to print it.

        Raises:
            MalformedMaze: If the configured maze text is invalid.
        """
        from gymnasium import spaces

        self._config = config or GameConfig()
        self._grid = parse_maze(self._config.maze)
        self._render_mode = render_mode

        self.state: Optional[State] = None

        text_space_short = spaces.Text(max_length=32)
        # Empty while playing, "YOU WIN" / "YOU LOSE" once over
        message_space = spaces.Text(
            min_length=0, max_length=32, charset=string.ascii_letters + " "
        )

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        position_space = spaces.Dict(
            {
                "x": int_box(0, self._grid.width - 1),
                "y": int_box(0, self._grid.height - 1),
            }
        )

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=TROLL_CODE,
                    shape=(self._grid.height, self._grid.width),
                    dtype=np.int8,
                ),
                "info": spaces.Dict(
                    {
                        "hero": spaces.Dict(
                            {
                                "x": position_space["x"],
                                "y": position_space["y"],
                                "direction": text_space_short,  # "up", "down", ...
                            }
                        ),
                        "trolls": spaces.Sequence(position_space),
                        "status": spaces.Dict(
                            {
                                "phase": text_space_short,  # "playing" / "won" / "lost"
                                "turn": int_box(0, 1_000_000_000),
                                "message": message_space,
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Placement seed for this episode. Falls back to the
                configured seed, so a seeded config replays the same layout.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        self.state = to_state(
            self._grid,
            troll_count=self._config.troll_count,
            seed=seed if seed is not None else self._config.seed,
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action!r}")
        direction = GYM_ACTION_TO_DIRECTION[GymAction(int(action))]

        was_terminal = self.state.win or self.state.lose
        self.state = step(self.state, direction)
        reward = 0.0
        if not was_terminal:
            if self.state.win:
                reward = 1.0
            elif self.state.lose:
                reward = -1.0
        obs = self._get_obs()
        terminated = self.state.win
        truncated = self.state.lose
        return obs, reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[str]:  # type: ignore
        """Render the current state as text.

        Args:
            mode: "human" to print, "ansi" to return the frame. Defaults to the
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        lines = render_text(self.state)
        banner = render_banner(self.state)
        if banner is not None:
            lines.append(banner)
        frame = "\n".join(lines)
        if render_mode == "human":
            print(frame)
            return None
        elif render_mode == "ansi":
            return frame
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Any]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "hero": hero_observation_dict(self.state),
            "trolls": trolls_observation_list(self.state),
            "status": env_status_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {"grid": grid_observation(self.state), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release resources (no-op; the text renderer holds none)."""
        pass
