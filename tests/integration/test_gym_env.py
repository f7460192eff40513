import numpy as np
import pytest

from maze_escape.actions import GymAction
from maze_escape.config import GameConfig
from maze_escape.gym_env import HERO_CODE, TROLL_CODE, MazeEscapeEnv
from tests.test_utils import OPEN_ROOM, make_state


def make_env(troll_count: int = 1, seed: int = 0) -> MazeEscapeEnv:
    return MazeEscapeEnv(GameConfig(maze=OPEN_ROOM, troll_count=troll_count, seed=seed))


def test_reset_observation() -> None:
    env = make_env()
    obs, info = env.reset()
    assert info == {}
    assert obs["grid"].shape == (5, 7)
    assert obs["grid"].dtype == np.int8
    assert (obs["grid"] == HERO_CODE).sum() == 1
    assert (obs["grid"] == TROLL_CODE).sum() == 1
    assert obs["info"]["status"]["phase"] == "playing"
    assert len(obs["info"]["trolls"]) == 1
    assert obs["info"]["status"]["message"] == ""
    assert env.observation_space.contains(obs)


def test_default_config_uses_dungeon() -> None:
    env = MazeEscapeEnv(GameConfig(seed=1))
    obs, _ = env.reset()
    assert obs["grid"].shape == (23, 73)


def test_seeded_reset_is_reproducible() -> None:
    env = make_env(troll_count=2, seed=3)
    first, _ = env.reset()
    second, _ = env.reset()
    assert np.array_equal(first["grid"], second["grid"])


def test_win_reward_and_termination() -> None:
    env = make_env(troll_count=0)
    env.state = make_state(OPEN_ROOM, hero_pos=(5, 3))
    obs, reward, terminated, truncated, _ = env.step(np.int64(GymAction.DOWN))
    assert reward == 1.0
    assert terminated and not truncated
    assert obs["info"]["status"]["message"] == "YOU WIN"
    assert env.observation_space.contains(obs)

    # Further steps give no reward
    _, reward, terminated, _, _ = env.step(np.int64(GymAction.UP))
    assert reward == 0.0
    assert terminated


def test_lose_reward_and_truncation() -> None:
    env = make_env()
    env.state = make_state(OPEN_ROOM, hero_pos=(1, 1), troll_positions=[(2, 1)])
    obs, reward, terminated, truncated, _ = env.step(np.int64(GymAction.LEFT))
    assert reward == -1.0
    assert obs["info"]["status"]["message"] == "YOU LOSE"
    assert env.observation_space.contains(obs)
    assert truncated and not terminated


def test_invalid_action_raises() -> None:
    env = make_env()
    with pytest.raises(ValueError, match="Invalid action"):
        env.step(np.int64(len(GymAction)))


def test_render_ansi_frame() -> None:
    env = make_env(troll_count=0)
    env.state = make_state(OPEN_ROOM, hero_pos=(5, 3))
    env.step(np.int64(GymAction.DOWN))
    frame = env.render()
    assert frame is not None
    assert frame.splitlines()[-1] == "YOU WIN"
    assert frame.splitlines()[4] == "#####v#"


def test_observations_stay_in_space_without_trolls() -> None:
    env = make_env(troll_count=0)
    obs, _ = env.reset()
    assert obs["info"]["trolls"] == ()
    assert env.observation_space.contains(obs)
    for action in [GymAction.UP, GymAction.RIGHT, GymAction.DOWN, GymAction.LEFT]:
        obs, _, _, _, _ = env.step(np.int64(action))
        assert env.observation_space.contains(obs)
