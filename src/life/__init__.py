"""Conway's Game of Life on a bounded grid."""

from life.grid import CellState, Coordinate, Grid
from life.stepper import next_state, step, step_numpy

__all__ = ["CellState", "Coordinate", "Grid", "next_state", "step", "step_numpy"]
