"""
Bounded Game of Life grid.

Cells are stored in a flat row-major uint8 array (index = row * cols + col,
0 = dead, 1 = alive). The array is read-only once the grid is built, so a
tick always produces a new Grid instead of writing into the one being read.
Edges are hard boundaries: coordinates outside the grid are never wrapped.
"""

from enum import IntEnum
from typing import Callable, Iterable, Iterator, NamedTuple

import numpy as np

from life.config import ALIVE_PROBABILITY


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1


class Coordinate(NamedTuple):
    col: int
    row: int


class Grid:
    def __init__(self, cols: int, rows: int, cells: np.ndarray | None = None):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"grid dimensions must be positive, got {cols}x{rows}")

        self.cols = cols
        self.rows = rows

        if cells is None:
            data = np.zeros(cols * rows, dtype=np.uint8)
        else:
            values = np.asarray(cells)
            if values.size != cols * rows:
                raise ValueError(f"expected {cols * rows} cells for a {cols}x{rows} grid, got {values.size}")
            if not np.isin(values, (0, 1)).all():  # before the cast, which would truncate
                raise ValueError("cell values must be 0 (dead) or 1 (alive)")
            data = values.astype(np.uint8).ravel()

        data.setflags(write=False)
        self._cells = data

    @classmethod
    def new_random(cls, cols: int, rows: int, rng: np.random.Generator | None = None,
                   seed: int | None = None) -> "Grid":
        """
        Build a grid where every cell is independently alive with probability 0.5.

        Pass `rng` (or `seed`) to make construction reproducible; otherwise a
        fresh generator is seeded from OS entropy.
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        return cls(cols, rows, rng.random(cols * rows) < ALIVE_PROBABILITY)

    @classmethod
    def dead(cls, cols: int, rows: int) -> "Grid":
        return cls(cols, rows)

    @classmethod
    def from_alive(cls, cols: int, rows: int, coords: Iterable[tuple[int, int]]) -> "Grid":
        """Build a grid with exactly the given (col, row) coordinates alive."""
        data = np.zeros((rows, cols), dtype=np.uint8)
        for col, row in coords:
            if not (0 <= col < cols and 0 <= row < rows):
                raise IndexError(f"coordinate ({col}, {row}) outside {cols}x{rows} grid")
            data[row, col] = 1
        return cls(cols, rows, data)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        """Build a grid from a 2-D (rows, cols) array of 0/1 or bool values."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"expected a 2-D array, got shape {array.shape}")
        rows, cols = array.shape
        return cls(cols, rows, array)

    def _index(self, coord: tuple[int, int]) -> int:
        col, row = coord
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            raise IndexError(f"coordinate ({col}, {row}) outside {self.cols}x{self.rows} grid")
        return row * self.cols + col

    def get(self, coord: tuple[int, int]) -> CellState:
        return CellState(int(self._cells[self._index(coord)]))

    def neighbors(self, coord: tuple[int, int]) -> Iterator[Coordinate]:
        """
        Iterate the in-range coordinates of the 3x3 block around `coord`, minus the center.

        Raises IndexError right away when `coord` itself is off the grid.
        """
        self._index(coord)
        return self._neighbors(*coord)

    def _neighbors(self, col: int, row: int) -> Iterator[Coordinate]:
        for dy in range(-1, 2):
            for dx in range(-1, 2):
                if dx == 0 and dy == 0:
                    continue  # skip self
                nx, ny = col + dx, row + dy
                if 0 <= nx < self.cols and 0 <= ny < self.rows:  # hard edges
                    yield Coordinate(nx, ny)

    def count_alive_neighbors(self, coord: tuple[int, int]) -> int:
        return sum(1 for n in self.neighbors(coord) if self.get(n) == CellState.ALIVE)

    def iter_cells(self) -> Iterator[tuple[Coordinate, CellState]]:
        """Yield every (coordinate, state) pair in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Coordinate(col, row), CellState(int(self._cells[row * self.cols + col]))

    def for_each_cell(self, fn: Callable[[Coordinate, CellState], None]) -> None:
        for coord, state in self.iter_cells():
            fn(coord, state)

    def alive_count(self) -> int:
        return int(np.sum(self._cells))

    def as_array(self) -> np.ndarray:
        """Read-only (rows, cols) view of the cells."""
        return self._cells.reshape(self.rows, self.cols)

    def __len__(self) -> int:
        return self.cols * self.rows

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.cols, self.rows) == (other.cols, other.rows) and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.cols, self.rows, self._cells.tobytes()))

    def __str__(self) -> str:
        return "\n".join(
            "".join('#' if cell else '.' for cell in line)
            for line in self.as_array()
        )

    def __repr__(self) -> str:
        return f"Grid({self.cols}x{self.rows}, alive={self.alive_count()})"
