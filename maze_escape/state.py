"""Core immutable game `State` dataclass.

This module defines the frozen :class:`State` object that represents the whole
game snapshot at a single turn. All systems are pure functions that take a
previous ``State`` plus inputs (e.g. a ``Direction``) and return a *new*
``State``; no mutation happens in-place. This makes the engine deterministic,
easy to test, and friendly to functional style reducers.

Design notes:

* ``State`` is the root of the object graph. Hero and trolls never hold a
  reference back to it; systems receive the whole snapshot as an argument.
* ``trolls`` is a persistent vector. Its order is the order in which trolls
  take their pursuit step each turn.
* ``phase`` moves from ``PLAYING`` to exactly one of ``WON`` / ``LOST`` and
  never leaves a terminal phase. The reducer short-circuits on terminal
  states.

See :mod:`maze_escape.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from maze_escape.components import Hero, Troll
from maze_escape.grid import Grid
from maze_escape.types import GamePhase


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        grid (Grid): Maze cells and exit location.
        hero (Hero): Player entity (position and facing).
        trolls (PVector[Troll]): Pursuers, in pursuit order.
        phase (GamePhase): Playing, won or lost.
        turn (int): Turn counter (0-based).
        message (str | None): Outcome label once the game is over.
        seed (int | None): Seed used for random placement, if any.
    """

    grid: Grid
    hero: Hero
    trolls: PVector[Troll] = pvector()

    phase: GamePhase = GamePhase.PLAYING
    turn: int = 0
    message: Optional[str] = None

    seed: Optional[int] = None

    @property
    def win(self) -> bool:
        return self.phase == GamePhase.WON

    @property
    def lose(self) -> bool:
        return self.phase == GamePhase.LOST

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary of entity positions and progress.

        Useful for lightweight diagnostics and logging without dumping the
        whole cell matrix.
        """
        return pmap(
            {
                "hero": (self.hero.position.x, self.hero.position.y),
                "direction": str(self.hero.direction),
                "trolls": tuple((t.position.x, t.position.y) for t in self.trolls),
                "phase": str(self.phase),
                "turn": self.turn,
            }
        )
