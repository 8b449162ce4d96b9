"""Tests for WatorEngine."""

import random
import threading

from wator.cells import CellKind
from wator.config.grid import GridConfig
from wator.engine import WatorEngine

SMALL = GridConfig(width=12, height=8, fish_fraction=0.4, shark_fraction=0.2)


def test_engine_records_initial_population():
    engine = WatorEngine(SMALL, seed=1)
    assert engine.tick == 0
    assert len(engine.tracker.history) == 1
    assert engine.tracker.latest.total == 12 * 8


def test_step_advances_and_records():
    engine = WatorEngine(SMALL, seed=1)
    sample = engine.step()
    assert engine.tick == 1
    assert sample.tick == 1
    assert engine.tracker.latest is sample
    assert sample.fish == engine.grid.fish_count


def test_snapshot_shape_and_kinds():
    engine = WatorEngine(SMALL, seed=1)
    kinds = engine.snapshot()
    assert len(kinds) == 8
    assert all(len(row) == 12 for row in kinds)
    assert all(isinstance(kind, CellKind) for row in kinds for kind in row)
    assert sum(row.count(CellKind.FISH) for row in kinds) == engine.grid.fish_count


def test_locked_yields_grid():
    engine = WatorEngine(SMALL, seed=1)
    with engine.locked() as grid:
        assert grid is engine.grid


def test_seeded_engines_match():
    a = WatorEngine(SMALL, seed=42)
    b = WatorEngine(SMALL, rng=random.Random(42))
    for _ in range(20):
        a.step()
        b.step()
    assert a.snapshot() == b.snapshot()
    assert a.tracker.history == b.tracker.history


def test_engine_does_not_touch_global_random():
    random.seed(123)
    expected = random.random()

    random.seed(123)
    engine = WatorEngine(SMALL)
    engine.step()
    assert random.random() == expected


def test_run_headless_returns_summary():
    engine = WatorEngine(SMALL, seed=3)
    result = engine.run_headless(max_ticks=25, stats_interval=10, stop_on_extinction=False)
    assert result["ticks_run"] == 25
    assert result["tick"] == 25
    assert result["run_id"] == engine.run_id
    assert result["runtime_seconds"] >= 0


def test_run_headless_stops_when_ocean_empties():
    config = GridConfig(
        width=6, height=6, fish_fraction=0.0, shark_fraction=1.0,
        shark_initial_energy=1, shark_energy_boost=0,
    )
    engine = WatorEngine(config, seed=3)
    result = engine.run_headless(max_ticks=50, stats_interval=0)
    assert result["ticks_run"] == 1
    assert result["sharks"] == 0
    assert engine.tracker.extinct


def test_concurrent_reader_sees_whole_ticks():
    """A reader on another thread never observes a half-advanced grid."""
    engine = WatorEngine(SMALL, seed=9)
    errors = []
    done = threading.Event()

    def reader():
        while not done.is_set():
            with engine.locked() as grid:
                tick = grid.tick_counter
                for _, _, cell in grid.iter_cells():
                    if cell.is_organism and cell.last_tick != tick:
                        errors.append((tick, cell))

    thread = threading.Thread(target=reader)
    thread.start()
    try:
        for _ in range(50):
            engine.step()
    finally:
        done.set()
        thread.join()

    assert errors == []


def test_run_headless_stops_on_extinction_without_history():
    config = GridConfig(
        width=3, height=3, fish_fraction=0.0, shark_fraction=1.0,
        shark_initial_energy=1, shark_energy_boost=0,
    )
    engine = WatorEngine(config, seed=1, max_history=0)
    result = engine.run_headless(max_ticks=20, stats_interval=0)
    assert result["ticks_run"] == 1
    assert result["tick"] == 1
    assert result["sharks"] == 0
