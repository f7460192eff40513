"""Maze text parsing.

A maze is written as rows of characters: ``' '`` (empty), ``'#'`` (wall) and
``'X'`` (exit). Blank rows are dropped before parsing, so a maze can be
embedded in a triple-quoted string with leading and trailing newlines.

Semantics:
    * Every remaining row must have the same width.
    * At least one ``X`` must appear. With several, the first one in
      row-major order (top to bottom, then left to right) is the exit; the
      others are still exit cells but never count as *the* exit.
    * Any other character is rejected.

Violations raise :class:`MalformedMaze`.

:func:`maze_to_text` goes the other way. It is an authoring helper for
saving a maze after pushes or checking generated layouts.
"""

from typing import List, Optional

from pyrsistent import pvector

from maze_escape.components import Position
from maze_escape.grid import Grid
from maze_escape.types import CellType


class MalformedMaze(ValueError):
    """Maze text cannot be turned into a :class:`~maze_escape.grid.Grid`."""


DEFAULT_DUNGEON = """
#########################################################################
#   #               #               #           #                   #   #
#   #   #########   #   #####   #########   #####   #####   #####   #   #
#               #       #   #           #           #   #   #       #   #
#########   #   #########   #########   #####   #   #   #   #########   #
#       #   #               #           #   #   #   #   #           #   #
#   #   #############   #   #   #########   #####   #   #########   #   #
#   #               #   #   #       #           #           #       #   #
#   #############   #####   #####   #   #####   #########   #   #####   #
#           #       #   #       #   #       #           #   #           #
#   #####   #####   #   #####   #   #########   #   #   #   #############
#       #       #   #   #       #       #       #   #   #       #       #
#############   #   #   #   #########   #   #####   #   #####   #####   #
#           #   #           #       #   #       #   #       #           #
#   #####   #   #########   #####   #   #####   #####   #############   #
#   #       #           #           #       #   #   #               #   #
#   #   #########   #   #####   #########   #   #   #############   #   #
#   #           #   #   #   #   #           #               #   #       #
#   #########   #   #   #   #####   #########   #########   #   #########
#   #       #   #   #           #           #   #       #               #
#   #   #####   #####   #####   #########   #####   #   #########   #   #
#   #                   #           #               #               #   #
# X #####################################################################
"""


def parse_maze(text: str) -> Grid:
    """Build a :class:`Grid` from maze text.

    Args:
        text (str): Maze rows separated by newlines.

    Returns:
        Grid: Parsed grid with the exit located.

    Raises:
        MalformedMaze: If the maze is empty, not rectangular, contains an
            unknown character, or has no exit.
    """
    lines = [line.rstrip("\r") for line in text.split("\n")]
    lines = [line for line in lines if line.strip() != ""]
    if not lines:
        raise MalformedMaze("Maze has no rows")

    width = len(lines[0])
    for y, line in enumerate(lines):
        if len(line) != width:
            raise MalformedMaze(
                f"Row {y} has width {len(line)}, expected {width} (rows must be rectangular)"
            )

    rows: List[List[CellType]] = []
    for y, line in enumerate(lines):
        try:
            rows.append([CellType(char) for char in line])
        except ValueError:
            raise MalformedMaze(f"Row {y} contains an unknown cell character: {line!r}")

    exit_pos = find_exit(rows)
    if exit_pos is None:
        raise MalformedMaze(f"Maze has no exit cell ({CellType.EXIT.value!r})")

    return Grid(
        width=width,
        height=len(rows),
        rows=pvector(pvector(row) for row in rows),
        exit=exit_pos,
    )


def find_exit(rows: List[List[CellType]]) -> Optional[Position]:
    """First exit cell in row-major order, or ``None``."""
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == CellType.EXIT:
                return Position(x, y)
    return None


def maze_to_text(grid: Grid) -> str:
    """Inverse of :func:`parse_maze` for the current cells of ``grid``."""
    return "\n".join("".join(row) for row in grid.render_rows())
