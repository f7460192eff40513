"""Procedural maze generation.

Produces maze *text* in the same format as :data:`maze_escape.levels.maze.DEFAULT_DUNGEON`
so generated and hand-written mazes go through the same parser.

Layout: odd coordinates are rooms, even coordinates are walls between them,
and the outer ring is always wall. A perfect maze is carved with recursive
backtracking (iterative, so large mazes do not hit the recursion limit), then
``wall_percentage`` optionally knocks out interior walls to create loops,
which gives trolls more than one route to the hero. The exit sits in the
bottom border below the bottom-right room.
"""

import random
from typing import Dict, List, Optional, Tuple

Coord = Tuple[int, int]

# Room-to-room steps (two cells, skipping the wall in between).
STEPS: List[Coord] = [(0, -2), (0, 2), (-2, 0), (2, 0)]


def generate_maze(
    width: int,
    height: int,
    seed: Optional[int] = None,
    wall_percentage: float = 1.0,
) -> str:
    """Generate maze text.

    Args:
        width (int): Total columns including the border; odd and at least 5.
        height (int): Total rows including the border; odd and at least 5.
        seed (int | None): RNG seed for reproducible layouts.
        wall_percentage (float): Share of interior walls kept after carving.
            ``1.0`` keeps a perfect maze; ``0.0`` leaves an open room.

    Returns:
        str: Maze rows joined by newlines, with exactly one ``X``.

    Raises:
        ValueError: If the dimensions or percentage are out of range.
    """
    if width < 5 or height < 5 or width % 2 == 0 or height % 2 == 0:
        raise ValueError(f"Maze size must be odd and at least 5x5, got {width}x{height}")
    if not 0.0 <= wall_percentage <= 1.0:
        raise ValueError(f"wall_percentage must be within [0, 1], got {wall_percentage}")

    rng = random.Random(seed)
    is_open = _carve_perfect_maze(width, height, rng)
    if wall_percentage < 1.0:
        is_open = _adjust_wall_percentage(is_open, width, height, wall_percentage, rng)

    lines: List[str] = []
    for y in range(height):
        line = "".join(" " if is_open[(x, y)] else "#" for x in range(width))
        lines.append(line)

    exit_x = width - 2
    lines[-1] = lines[-1][:exit_x] + "X" + lines[-1][exit_x + 1 :]
    return "\n".join(lines)


def _carve_perfect_maze(width: int, height: int, rng: random.Random) -> Dict[Coord, bool]:
    is_open: Dict[Coord, bool] = {(x, y): False for x in range(width) for y in range(height)}

    def in_rooms(x: int, y: int) -> bool:
        return 0 < x < width - 1 and 0 < y < height - 1

    start = (1, 1)
    is_open[start] = True
    stack: List[Coord] = [start]
    while stack:
        x, y = stack[-1]
        options = [
            (x + dx, y + dy, x + dx // 2, y + dy // 2)
            for dx, dy in STEPS
            if in_rooms(x + dx, y + dy) and not is_open[(x + dx, y + dy)]
        ]
        if not options:
            stack.pop()
            continue
        nx, ny, wx, wy = rng.choice(options)
        is_open[(wx, wy)] = True
        is_open[(nx, ny)] = True
        stack.append((nx, ny))

    return is_open


def _adjust_wall_percentage(
    is_open: Dict[Coord, bool],
    width: int,
    height: int,
    wall_percentage: float,
    rng: random.Random,
) -> Dict[Coord, bool]:
    # Border cells always stay walls.
    interior_walls = [
        pos
        for pos, open_ in is_open.items()
        if not open_ and 0 < pos[0] < width - 1 and 0 < pos[1] < height - 1
    ]
    rng.shuffle(interior_walls)
    num_keep = int(len(interior_walls) * wall_percentage)
    removed = set(interior_walls[num_keep:])
    return {pos: open_ or pos in removed for pos, open_ in is_open.items()}
