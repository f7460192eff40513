import random

import pytest

from maze_escape.components import Position
from maze_escape.levels.convert import state_from_text, to_state
from maze_escape.levels.maze import DEFAULT_DUNGEON, parse_maze
from maze_escape.types import CellType, GamePhase
from maze_escape.utils.grid import (
    count_free_cells,
    is_empty_for_occupancy,
    is_free_at,
    random_free_position,
)
from tests.test_utils import OPEN_ROOM, make_state

THREE_CELLS = """
#####
#   #
###X#
"""


def test_placement_is_reproducible_with_seed() -> None:
    grid = parse_maze(DEFAULT_DUNGEON)
    a = to_state(grid, troll_count=4, seed=123)
    b = to_state(grid, troll_count=4, seed=123)
    assert a.hero == b.hero
    assert list(a.trolls) == list(b.trolls)
    assert a.seed == 123


def test_entities_never_stack_or_land_on_exit_or_walls() -> None:
    grid = parse_maze(DEFAULT_DUNGEON)
    for seed in range(20):
        state = to_state(grid, troll_count=5, seed=seed)
        positions = [state.hero.position] + [t.position for t in state.trolls]
        assert len(set(positions)) == len(positions)
        for pos in positions:
            assert grid.cell_is(pos, CellType.EMPTY)
            assert pos != grid.exit


def test_every_free_cell_used_when_maze_is_full() -> None:
    state = state_from_text(THREE_CELLS, troll_count=2, seed=5)
    positions = {state.hero.position} | {t.position for t in state.trolls}
    assert positions == {Position(1, 1), Position(2, 1), Position(3, 1)}


def test_initial_state_defaults() -> None:
    state = state_from_text(OPEN_ROOM, troll_count=1, seed=0)
    assert state.phase == GamePhase.PLAYING
    assert state.turn == 0
    assert state.message is None
    assert len(state.trolls) == 1


def test_too_many_trolls_raises() -> None:
    with pytest.raises(ValueError):
        state_from_text(THREE_CELLS, troll_count=3)


def test_negative_troll_count_raises() -> None:
    with pytest.raises(ValueError):
        state_from_text(OPEN_ROOM, troll_count=-1)


def test_random_free_position_avoids_occupied() -> None:
    grid = parse_maze(THREE_CELLS)
    rng = random.Random(0)
    occupied = [Position(1, 1), Position(3, 1)]
    for _ in range(10):
        assert random_free_position(grid, occupied, rng) == Position(2, 1)


def test_random_free_position_without_free_cell_raises() -> None:
    grid = parse_maze(THREE_CELLS)
    occupied = [Position(1, 1), Position(2, 1), Position(3, 1)]
    assert count_free_cells(grid, occupied) == 0
    with pytest.raises(ValueError):
        random_free_position(grid, occupied, random.Random(0))


def test_is_empty_for_occupancy() -> None:
    state = make_state(OPEN_ROOM, hero_pos=(1, 1), troll_positions=[(2, 1)])
    assert not is_empty_for_occupancy(state, Position(1, 1))
    assert not is_empty_for_occupancy(state, Position(2, 1))
    assert is_empty_for_occupancy(state, Position(3, 1))
    assert not is_empty_for_occupancy(state, Position(0, 0))
    assert not is_empty_for_occupancy(state, state.grid.exit)
    assert not is_empty_for_occupancy(state, Position(-1, 1))


def test_is_free_at_ignores_entities_not_listed() -> None:
    grid = parse_maze(OPEN_ROOM)
    assert is_free_at(grid, Position(1, 1), [])
    assert not is_free_at(grid, Position(1, 1), [Position(1, 1)])
