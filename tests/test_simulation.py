import csv

import pytest

from life import simulation
from life.grid import Grid
from life.simulation import benchmark, print_grid, run_simulation
from life.stepper import step_numpy


def test_run_simulation_matches_manual_stepping(capsys):
    result = run_simulation(20, 15, 10, seed=42)

    grid = Grid.new_random(20, 15, seed=42)
    initial = grid.alive_count()
    for _ in range(10):
        grid = step_numpy(grid)

    assert result["cols"] == 20
    assert result["rows"] == 15
    assert result["generations"] == 10
    assert result["initial_live_cells"] == initial
    assert result["final_live_cells"] == grid.alive_count()
    assert result["final_grid"] == grid
    assert result["total_time_ms"] >= 0

    out = capsys.readouterr().out
    assert "20x15 bounded grid, 10 generations, vectorized stepper" in out
    assert f"Final live cells: {grid.alive_count()}" in out


def test_per_cell_and_numpy_runs_agree(capsys):
    fast = run_simulation(16, 16, 6, use_numpy=True, seed=9)
    slow = run_simulation(16, 16, 6, use_numpy=False, seed=9)

    assert fast["final_grid"] == slow["final_grid"]
    assert "per-cell stepper" in capsys.readouterr().out


def test_zero_generations(capsys):
    result = run_simulation(5, 5, 0, seed=1)

    assert result["initial_live_cells"] == result["final_live_cells"]
    assert result["time_per_generation_ms"] == 0.0


def test_rates_keep_measured_time():
    rates = simulation._rates(10, 10, 4, 0.0)
    assert rates == {"total_time_ms": 0.0, "time_per_generation_ms": 0.0, "cells_per_second_million": 0.0}

    rates = simulation._rates(10, 10, 4, 2.0)
    assert rates["total_time_ms"] == 2.0
    assert rates["time_per_generation_ms"] == pytest.approx(0.5)
    assert rates["cells_per_second_million"] == pytest.approx(0.2)


def test_visualize_prints_each_generation(capsys, monkeypatch):
    monkeypatch.setattr("life.simulation.time.sleep", lambda _: None)
    run_simulation(8, 4, 3, visualize=True, seed=2)

    out = capsys.readouterr().out
    for gen in range(1, 4):
        assert f"Generation: {gen}," in out


def test_print_grid(capsys):
    print_grid(Grid.from_alive(3, 1, [(1, 0)]))
    assert ".#." in capsys.readouterr().out


def test_benchmark_compares_both_steppers(tmp_path, capsys):
    csv_path = tmp_path / "bench.csv"
    results = benchmark(sizes=[8, 12], generations=3, csv_path=str(csv_path))

    assert [r["size"] for r in results] == [8, 12]
    assert all(r["steppers_agree"] for r in results)
    assert all(r["per_cell_ms_per_generation"] >= 0 and r["numpy_ms_per_generation"] >= 0 for r in results)

    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [row["size"] for row in rows] == ["8", "12"]
    assert {"per_cell_ms_per_generation", "numpy_ms_per_generation", "speedup"} <= set(rows[0])

    out = capsys.readouterr().out
    assert "per-cell ms/gen" in out
    assert "MISMATCH" not in out


def test_benchmark_flags_diverging_steppers(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(simulation, "step", lambda grid: Grid.dead(grid.cols + 1, grid.rows))
    results = benchmark(sizes=[10], generations=2, csv_path=str(tmp_path / "bench.csv"))

    assert results[0]["steppers_agree"] is False
    assert "MISMATCH" in capsys.readouterr().out
