from dataclasses import dataclass

from maze_escape.components.position import Position
from maze_escape.types import Direction


@dataclass(frozen=True)
class Hero:
    """Player-controlled entity.

    Attributes:
        position:
            Current cell of the hero.
        direction:
            Facing. Updated on every input, including inputs that do not move
            the hero.
    """

    position: Position
    direction: Direction = Direction.UP
