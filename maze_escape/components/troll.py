from dataclasses import dataclass

from maze_escape.components.position import Position

TROLL_ICON = "T"


@dataclass(frozen=True)
class Troll:
    """Pursuit agent. Trolls have no facing and never push walls."""

    position: Position
