"""
Game of Life transition function (B3/S23) on a bounded grid.

Rules:
1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)

Both steppers read only the input grid and return a new one.
"""

import numpy as np

from life.grid import CellState, Grid


def next_state(state: CellState, alive_neighbors: int) -> CellState:
    if state == CellState.ALIVE:
        return CellState.ALIVE if alive_neighbors in (2, 3) else CellState.DEAD
    return CellState.ALIVE if alive_neighbors == 3 else CellState.DEAD


def step(grid: Grid) -> Grid:
    """
    Compute the next generation cell by cell.
    Pure Python implementation (slow but clear).
    """
    next_cells = np.zeros(grid.rows * grid.cols, dtype=np.uint8)

    for coord, state in grid.iter_cells():
        neighbors = grid.count_alive_neighbors(coord)
        next_cells[coord.row * grid.cols + coord.col] = next_state(state, neighbors)

    return Grid(grid.cols, grid.rows, next_cells)


def count_neighbors_numpy(cells: np.ndarray) -> np.ndarray:
    """Live-neighbor count for every cell of a (rows, cols) array; outside the edges counts as dead."""
    rows, cols = cells.shape
    padded = np.pad(cells.astype(np.uint8), 1)  # dead border instead of wrap-around
    neighbors = np.zeros((rows, cols), dtype=np.uint8)

    for dy in range(-1, 2):
        for dx in range(-1, 2):
            if dx == 0 and dy == 0:
                continue
            neighbors += padded[1 + dy:1 + dy + rows, 1 + dx:1 + dx + cols]

    return neighbors


def step_numpy(grid: Grid) -> Grid:
    """
    Compute the next generation using NumPy operations.
    Vectorized implementation, same result as step().
    """
    cells = grid.as_array()
    neighbors = count_neighbors_numpy(cells)

    birth = (cells == 0) & (neighbors == 3)  # B3
    survive = (cells == 1) & ((neighbors == 2) | (neighbors == 3))  # S23

    return Grid.from_array((birth | survive).astype(np.uint8))
