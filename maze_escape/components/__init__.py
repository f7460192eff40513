"""Component aggregates.

Re-exports the immutable value objects the game is built from:
:class:`Position` for coordinates plus the two entity kinds, :class:`Hero` and
:class:`Troll`. Changing an entity means building a new instance with
``dataclasses.replace`` and storing it in the next :class:`State`.
"""

from .position import Position
from .hero import Hero
from .troll import Troll, TROLL_ICON

__all__ = [
    "Hero",
    "Position",
    "Troll",
    "TROLL_ICON",
]
