"""Position component.

Immutable integer grid coordinates shared by the hero, trolls and the maze
grid. ``Position`` supports component-wise addition so that a direction
offset can be applied with ``pos + offset``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)
