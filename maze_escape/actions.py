"""Direction lookups and Gym action mapping.

``DIRECTION_OFFSETS`` and ``DIRECTION_ICONS`` are exhaustive over
:class:`~maze_escape.types.Direction`; unknown input is rejected when it is
converted to the enum (``Direction("north")`` raises ``ValueError``).

``DIRECTIONS`` is the canonical ordered list of directions. Pathfinding
expands neighbours in this order, which keeps troll moves deterministic.
"""

from enum import IntEnum, auto
from typing import Dict

from maze_escape.components import Position
from maze_escape.types import Direction

DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_OFFSETS: Dict[Direction, Position] = {
    Direction.UP: Position(0, -1),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
    Direction.RIGHT: Position(1, 0),
}

DIRECTION_ICONS: Dict[Direction, str] = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


GYM_ACTION_TO_DIRECTION: Dict[GymAction, Direction] = {
    GymAction.UP: Direction.UP,
    GymAction.DOWN: Direction.DOWN,
    GymAction.LEFT: Direction.LEFT,
    GymAction.RIGHT: Direction.RIGHT,
}
