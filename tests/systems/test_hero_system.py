import pytest

from maze_escape.components import Position
from maze_escape.systems.hero import hero_system
from maze_escape.types import CellType, Direction
from tests.test_utils import OPEN_ROOM, make_state

PUSH_MAZE = """
#######
#     #
#     #
#  #  #
#     #
#####X#
"""


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (3, 1)),
        (Direction.DOWN, (3, 3)),
        (Direction.LEFT, (2, 2)),
        (Direction.RIGHT, (4, 2)),
    ],
)
def test_hero_moves_into_empty_cell(direction: Direction, expected: tuple[int, int]) -> None:
    state = make_state(OPEN_ROOM, hero_pos=(3, 2))
    new_state = hero_system(state, direction)
    assert new_state.hero.position == Position(*expected)
    assert new_state.hero.direction == direction
    assert new_state.grid == state.grid


def test_hero_moves_onto_exit() -> None:
    state = make_state(OPEN_ROOM, hero_pos=(5, 3))
    new_state = hero_system(state, Direction.DOWN)
    assert new_state.hero.position == Position(5, 4)


def test_hero_pushes_wall() -> None:
    state = make_state(PUSH_MAZE, hero_pos=(2, 3))
    new_state = hero_system(state, Direction.RIGHT)
    assert new_state.hero.position == Position(3, 3)
    assert new_state.grid.cell_is(Position(3, 3), CellType.EMPTY)
    assert new_state.grid.cell_is(Position(4, 3), CellType.WALL)
    assert new_state.grid.cell_is(Position(2, 3), CellType.EMPTY)


def test_blocked_move_only_turns_hero() -> None:
    # Border wall on the left with nothing beyond it
    state = make_state(OPEN_ROOM, hero_pos=(1, 2), direction=Direction.UP)
    new_state = hero_system(state, Direction.LEFT)
    assert new_state.hero.position == Position(1, 2)
    assert new_state.hero.direction == Direction.LEFT
    assert new_state.grid == state.grid


def test_hero_does_not_move_trolls() -> None:
    state = make_state(OPEN_ROOM, hero_pos=(3, 2), troll_positions=[(1, 1)])
    new_state = hero_system(state, Direction.UP)
    assert new_state.trolls == state.trolls
