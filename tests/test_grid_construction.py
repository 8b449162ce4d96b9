"""Tests for grid construction, stocking and read access."""

import random

import pytest

from wator.cells import EMPTY, CellKind, Fish, Shark
from wator.config.grid import GridConfig, Neighborhood
from wator.exceptions import ConfigurationError, GridIndexError
from wator.grid import Grid


def all_cells(grid):
    return [cell for _, _, cell in grid.iter_cells()]


def test_full_stocking_leaves_no_empty_cells(seeded_rng):
    grid = Grid(0.5, 0.5, 5, 3, 5, 3, width=10, height=10, rng=seeded_rng)
    assert all(cell is not EMPTY for cell in all_cells(grid))


def test_all_sharks(seeded_rng):
    grid = Grid(0.0, 1.0, 5, 3, 5, 3, width=10, height=10, rng=seeded_rng)
    assert all(cell == Shark(5, 0, 0) for cell in all_cells(grid))


def test_all_fish(seeded_rng):
    grid = Grid(1.0, 0.0, 5, 3, 5, 3, width=10, height=10, rng=seeded_rng)
    assert all(cell == Fish(0, 0) for cell in all_cells(grid))
    assert grid.fish_count == 100


def test_no_organisms(seeded_rng):
    grid = Grid(0.0, 0.0, 5, 3, 5, 3, width=10, height=10, rng=seeded_rng)
    assert grid.count(CellKind.EMPTY) == 100


def test_oversized_fractions_are_truncated(seeded_rng):
    """Fractions summing past 1 still fill the grid and never fail."""
    grid = Grid(0.7, 0.7, width=20, height=20, rng=seeded_rng)
    counts = grid.counts()
    assert counts[CellKind.EMPTY] == 0
    assert counts[CellKind.FISH] > counts[CellKind.SHARK]


def test_mixed_stocking_roughly_follows_fractions():
    grid = Grid(0.3, 0.2, width=50, height=40, seed=1)
    counts = grid.counts()
    total = 50 * 40
    assert abs(counts[CellKind.FISH] / total - 0.3) < 0.05
    assert abs(counts[CellKind.SHARK] / total - 0.2) < 0.05


def test_zero_repro_period_is_invalid():
    with pytest.raises(ConfigurationError):
        Grid(0.5, 0.2, 3, 0, 5, 1)
    with pytest.raises(ConfigurationError):
        Grid(0.5, 0.2, 3, 2, 0, 1)


def test_same_seed_same_layout():
    a = Grid(0.4, 0.4, width=15, height=8, seed=99)
    b = Grid(0.4, 0.4, width=15, height=8, seed=99)
    assert all_cells(a) == all_cells(b)


def test_explicit_rng_takes_precedence_over_seed():
    a = Grid(0.4, 0.4, width=15, height=8, rng=random.Random(5), seed=123)
    b = Grid(0.4, 0.4, width=15, height=8, seed=5)
    assert all_cells(a) == all_cells(b)


def test_from_config():
    config = GridConfig(width=6, height=4, fish_fraction=1.0, neighborhood=8)
    grid = Grid.from_config(config, seed=3)
    assert (grid.width, grid.height) == (6, 4)
    assert grid.config.neighborhood is Neighborhood.EIGHT
    assert grid.fish_count == 24
    assert grid.tick_counter == 0


def test_cell_at_rejects_out_of_range(make_empty_grid):
    grid = make_empty_grid(width=3, height=2)
    for row, col in [(2, 0), (0, 3), (-1, 0), (0, -1)]:
        with pytest.raises(GridIndexError):
            grid.cell_at(row, col)


def test_grid_index_error_is_an_index_error(make_empty_grid):
    grid = make_empty_grid()
    with pytest.raises(IndexError):
        grid.cell_at(5, 5)


def test_set_cell_and_counts(make_empty_grid):
    grid = make_empty_grid(width=3, height=3)
    grid.set_cell(0, 0, Fish())
    grid.set_cell(1, 2, Shark(4))
    grid.set_cell(2, 2, Shark(1))

    assert grid.cell_at(1, 2) == Shark(4)
    assert grid.counts() == {CellKind.EMPTY: 6, CellKind.FISH: 1, CellKind.SHARK: 2}
    assert grid.shark_count == 2


def test_set_cell_rejects_non_cells(make_empty_grid):
    grid = make_empty_grid()
    with pytest.raises(TypeError):
        grid.set_cell(0, 0, "fish")


def test_iter_cells_is_row_major(make_empty_grid):
    grid = make_empty_grid(width=3, height=2)
    coords = [(row, col) for row, col, _ in grid.iter_cells()]
    assert coords == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_describe_lists_every_row(make_empty_grid):
    grid = make_empty_grid(width=2, height=3)
    grid.set_cell(2, 1, Fish())
    text = grid.describe("after seeding")
    lines = text.splitlines()
    assert "after seeding" in lines[0]
    assert len(lines) == 4
    assert "Fish" in lines[3]
