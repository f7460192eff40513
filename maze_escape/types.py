"""Common type aliases and enumerations.

``CellType`` values double as the characters used in maze text, so a parsed
row can be turned back into text with ``"".join(row)``.
"""

from enum import StrEnum, auto
from typing import Tuple

from pyrsistent.typing import PVector


class CellType(StrEnum):
    """Static contents of a maze cell."""

    EMPTY = " "
    WALL = "#"
    EXIT = "X"


class Direction(StrEnum):
    """Cardinal input directions (also the hero's facing)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class GamePhase(StrEnum):
    """Game state machine phases. ``WON`` and ``LOST`` are terminal."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


CellRows = PVector[PVector[CellType]]
WalkableMatrix = Tuple[Tuple[int, ...], ...]
