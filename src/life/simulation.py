"""
Headless Game of Life runner.

Usage: python -m life.simulation [cols] [rows] [generations] [visualize]
       python -m life.simulation --benchmark
"""

import csv
import sys
import time

from life.config import COLS, ROWS, TICK_SECONDS
from life.grid import Grid
from life.stepper import step, step_numpy


def print_grid(grid: Grid) -> None:
    """Print the grid to console."""
    print("\033[H", end="")  # Move cursor to home position
    print(grid)
    print()


def _rates(cols: int, rows: int, generations: int, elapsed_ms: float) -> dict:
    """Per-generation and throughput figures; zero when nothing was measured."""
    return {
        "total_time_ms": elapsed_ms,
        "time_per_generation_ms": elapsed_ms / generations if generations else 0.0,
        "cells_per_second_million": cols * rows * generations / elapsed_ms / 1000 if elapsed_ms > 0 else 0.0,
    }


def _advance(grid: Grid, generations: int, step_func) -> tuple[Grid, float]:
    """Step `generations` times, returning the final grid and the elapsed milliseconds."""
    start_time = time.perf_counter()
    for _ in range(generations):
        grid = step_func(grid)
    return grid, (time.perf_counter() - start_time) * 1000


def run_simulation(cols: int, rows: int, generations: int,
                   visualize: bool = False, use_numpy: bool = True,
                   seed: int | None = None) -> dict:
    """
    Run the Game of Life simulation.

    Args:
        cols: Grid width in cells
        rows: Grid height in cells
        generations: Number of generations to simulate
        visualize: Whether to print each generation
        use_numpy: Use vectorized NumPy (faster) or per-cell Python (slower)
        seed: Random seed for reproducibility

    Returns:
        Dictionary with timing and statistics
    """
    grid = Grid.new_random(cols, rows, seed=seed)
    step_func = step_numpy if use_numpy else step
    initial_live = grid.alive_count()

    print(f"{cols}x{rows} bounded grid, {generations} generations, "
          f"{'vectorized' if use_numpy else 'per-cell'} stepper")
    print(f"Initial live cells: {initial_live}")

    if visualize and cols <= 80 and rows <= 40:
        print("\033[2J", end="")  # Clear screen
        print_grid(grid)
        elapsed_ms = 0.0
        for gen in range(generations):
            grid, tick_ms = _advance(grid, 1, step_func)
            elapsed_ms += tick_ms  # rendering and sleeping stay off the clock
            print_grid(grid)
            print(f"Generation: {gen + 1}, Live cells: {grid.alive_count()}")
            time.sleep(TICK_SECONDS)
    else:
        grid, elapsed_ms = _advance(grid, generations, step_func)

    rates = _rates(cols, rows, generations, elapsed_ms)
    final_live = grid.alive_count()

    print(f"Final live cells: {final_live} "
          f"({final_live - initial_live:+d} over {generations} generations)")
    print(f"Stepping took {rates['total_time_ms']:.2f} ms, "
          f"{rates['time_per_generation_ms']:.4f} ms per generation, "
          f"{rates['cells_per_second_million']:.2f} M cells/s")

    return {
        "cols": cols,
        "rows": rows,
        "generations": generations,
        "initial_live_cells": initial_live,
        "final_live_cells": final_live,
        "final_grid": grid,
        **rates,
    }


def benchmark(sizes: list[int] | None = None, generations: int = 20, seed: int = 42,
              csv_path: str = "benchmark_steppers.csv") -> list[dict]:
    """
    Time the per-cell stepper against the vectorized one on square grids.

    Both steppers start from the same seeded grid; a size whose final grids
    differ is reported as a mismatch instead of a speedup.

    Args:
        sizes: Grid edge lengths to test
        generations: Number of generations per stepper and size
        seed: Random seed for reproducibility
        csv_path: Where to write one row per size
    """
    if sizes is None:
        sizes = [16, 32, 70, 128]

    results = []
    print(f"{'Size':>8} | {'per-cell ms/gen':>15} | {'numpy ms/gen':>12} | {'speedup':>8}")
    print("-" * 54)

    for size in sizes:
        start = Grid.new_random(size, size, seed=seed)
        per_cell_grid, per_cell_ms = _advance(start, generations, step)
        numpy_grid, numpy_ms = _advance(start, generations, step_numpy)

        per_cell = _rates(size, size, generations, per_cell_ms)
        vectorized = _rates(size, size, generations, numpy_ms)
        result = {
            "size": size,
            "generations": generations,
            "per_cell_ms_per_generation": per_cell["time_per_generation_ms"],
            "numpy_ms_per_generation": vectorized["time_per_generation_ms"],
            "speedup": per_cell_ms / numpy_ms if numpy_ms > 0 else 0.0,
            "steppers_agree": per_cell_grid == numpy_grid,
            "final_live_cells": numpy_grid.alive_count(),
        }
        results.append(result)

        speedup = f"{result['speedup']:>7.1f}x" if result["steppers_agree"] else "MISMATCH"
        print(f"{size:>8} | {result['per_cell_ms_per_generation']:>15.4f} | "
              f"{result['numpy_ms_per_generation']:>12.4f} | {speedup:>8}")

    with open(csv_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(results[0]) if results else ["size"])
        writer.writeheader()
        writer.writerows(results)
    print(f"\nResults saved to {csv_path}")

    return results


def main():
    if len(sys.argv) > 1 and sys.argv[1] == "--benchmark":
        benchmark()
        return

    cols = int(sys.argv[1]) if len(sys.argv) > 1 else COLS
    rows = int(sys.argv[2]) if len(sys.argv) > 2 else ROWS
    generations = int(sys.argv[3]) if len(sys.argv) > 3 else 100
    visualize = bool(int(sys.argv[4])) if len(sys.argv) > 4 else False

    run_simulation(cols, rows, generations, visualize=visualize, use_numpy=True)


if __name__ == "__main__":
    main()
