"""Immutable maze grid.

The :class:`Grid` owns the cell matrix (``rows[y][x]``) and the exit location.
It is a value object: the push rule returns a *new* ``Grid`` rather than
editing cells in place, so a ``State`` snapshot never changes under a reader.

Design notes:

* Queries "fail closed". Any position outside the rectangle simply does not
  match, which lets movement code treat the maze edge like a wall without
  bounds checks of its own.
* The exit is located once when the maze is parsed (see
  :mod:`maze_escape.levels.maze`) and carried unchanged through every push.
* ``walkable_matrix`` is recomputed from the current cells on every call.
  Pushes change the topology between turns.
"""

from dataclasses import dataclass, replace
from typing import Optional

from maze_escape.components import Position
from maze_escape.types import CellRows, CellType, WalkableMatrix


@dataclass(frozen=True)
class Grid:
    """Maze cell matrix.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        rows (CellRows): Persistent row vectors indexed ``rows[y][x]``.
        exit (Position): Location of the single exit cell.
    """

    width: int
    height: int
    rows: CellRows
    exit: Position

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the maze rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cell_at(self, pos: Position) -> Optional[CellType]:
        """Return the cell type at ``pos`` or ``None`` when out of bounds."""
        if not self.in_bounds(pos):
            return None
        return self.rows[pos.y][pos.x]

    def cell_is(self, pos: Position, *types: CellType) -> bool:
        """Return True if the cell at ``pos`` is any of ``types``.

        Out-of-bounds positions never match.
        """
        cell = self.cell_at(pos)
        return cell is not None and cell in types

    def push(self, target: Position, offset: Position) -> Optional["Grid"]:
        """Slide the wall at ``target`` one cell along ``offset``.

        Single-cell sokoban push: the cell beyond the wall must be Empty.
        Stacked walls, the exit and the maze edge all stop the push.

        Args:
            target (Position): Cell that must currently hold a wall.
            offset (Position): Unit direction vector of the push.

        Returns:
            Grid | None: A new grid with ``target`` emptied and the wall moved
            beyond it, or ``None`` if the push is not possible.
        """
        if not self.cell_is(target, CellType.WALL):
            return None

        beyond = target + offset
        if not self.cell_is(beyond, CellType.EMPTY):
            return None

        rows = self._set(self.rows, target, CellType.EMPTY)
        rows = self._set(rows, beyond, CellType.WALL)
        return replace(self, rows=rows)

    def walkable_matrix(self) -> WalkableMatrix:
        """Return ``0`` for Empty cells and ``1`` for everything else.

        Exit cells count as blocked, so trolls never path onto or through the
        exit.
        """
        return tuple(
            tuple(0 if cell == CellType.EMPTY else 1 for cell in row)
            for row in self.rows
        )

    def render_rows(self) -> CellRows:
        """Read-only view of the current cells for display."""
        return self.rows

    @staticmethod
    def _set(rows: CellRows, pos: Position, cell: CellType) -> CellRows:
        return rows.set(pos.y, rows[pos.y].set(pos.x, cell))
