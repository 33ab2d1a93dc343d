"""
Classic Game of Life patterns as lists of (col, row) offsets from their top-left corner.
"""

import numpy as np

from life.grid import Grid

Pattern = list[tuple[int, int]]

# ##
# ##
BLOCK: Pattern = [(0, 0), (1, 0), (0, 1), (1, 1)]

# ###
BLINKER: Pattern = [(0, 0), (1, 0), (2, 0)]

#   #
#     #
# # # #
GLIDER: Pattern = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]


def _glider_gun() -> Pattern:
    oy = 4  # topmost cell sits four rows above the left square
    cells = [
        # Left square
        (0, 0), (1, 0), (0, 1), (1, 1),
        # Left part
        (10, 0), (10, 1), (10, 2), (11, -1), (11, 3), (12, -2), (12, 4),
        (13, -2), (13, 4), (14, 1), (15, -1), (15, 3), (16, 0), (16, 1),
        (16, 2), (17, 1),
        # Right part
        (20, -2), (20, -1), (20, 0), (21, -2), (21, -1), (21, 0), (22, -3),
        (22, 1), (24, -4), (24, -3), (24, 1), (24, 2),
        # Right square
        (34, -2), (35, -2), (34, -1), (35, -1),
    ]
    return [(x, y + oy) for x, y in cells]


# Gosper Glider Gun, 36x9
GLIDER_GUN: Pattern = _glider_gun()


def pattern_size(pattern: Pattern) -> tuple[int, int]:
    """Bounding box of a pattern as (width, height)."""
    if not pattern:
        raise ValueError("empty pattern")
    return max(x for x, _ in pattern) + 1, max(y for _, y in pattern) + 1


def stamp(grid: Grid, pattern: Pattern, col: int, row: int) -> Grid:
    """Return a copy of `grid` with the pattern's cells set alive, top-left corner at (col, row)."""
    width, height = pattern_size(pattern)
    if col < 0 or row < 0 or col + width > grid.cols or row + height > grid.rows:
        raise ValueError(
            f"pattern of size {width}x{height} at ({col}, {row}) does not fit a {grid.cols}x{grid.rows} grid"
        )

    cells = np.array(grid.as_array())  # writable copy
    for x, y in pattern:
        cells[row + y, col + x] = 1
    return Grid.from_array(cells)
