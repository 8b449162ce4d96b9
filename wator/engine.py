"""Wa-Tor engine - the owner of a running ocean.

The grid knows the rules; the engine owns one grid together with its
random source, a lock for cross-thread readers, and a population tracker.
Front ends (the headless runner and the pygame viewer) drive the engine
and never share it through module globals.
"""

import contextlib
import logging
import random
import threading
import time
import uuid
from typing import Any, Dict, Iterator, List, Optional

from wator.cells import CellKind
from wator.config.display import SEPARATOR_WIDTH
from wator.config.grid import GridConfig
from wator.grid import Grid
from wator.population_tracker import PopulationSample, PopulationTracker

logger = logging.getLogger(__name__)


class WatorEngine:
    """Drives a :class:`Grid` and records its population over time.

    Attributes:
        config: Grid configuration
        grid: The ocean being simulated
        tracker: Population history
        seed: Seed used for the random source, if any
        run_id: Unique identifier for this run (appears in logs)
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        max_history: Optional[int] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Grid configuration (defaults to ``GridConfig()``)
            rng: Random source for deterministic runs
            seed: Optional seed (used if rng is not provided)
            max_history: Population samples to keep (None keeps all)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or GridConfig()

        if rng is not None:
            self.rng: random.Random = rng
            self.seed = None
        elif seed is not None:
            self.rng = random.Random(seed)
            self.seed = seed
        else:
            self.rng = random.Random()
            self.seed = None

        self.run_id: str = str(uuid.uuid4())
        self._lock = threading.Lock()
        self.grid = Grid.from_config(self.config, rng=self.rng)
        self.tracker = PopulationTracker(max_history=max_history)
        self.tracker.record(self.grid)
        logger.info(f"WatorEngine initialized with run_id={self.run_id} seed={self.seed}")

    @property
    def tick(self) -> int:
        return self.grid.tick_counter

    @contextlib.contextmanager
    def locked(self) -> Iterator[Grid]:
        """Hold the grid lock; yields the grid for consistent reads."""
        with self._lock:
            yield self.grid

    def step(self) -> PopulationSample:
        """Advance one generation under the lock and record the population."""
        with self._lock:
            self.grid.advance()
            return self.tracker.record(self.grid)

    def snapshot(self) -> List[List[CellKind]]:
        """Kinds of every cell, indexed ``[row][col]``, read under the lock."""
        with self._lock:
            grid = self.grid
            return [
                [grid.cell_at(row, col).kind for col in range(grid.width)]
                for row in range(grid.height)
            ]

    def print_stats(self) -> None:
        """Log the latest population sample."""
        stats = self.tracker.summary()
        logger.info(
            f"Tick {stats['tick']}: fish={stats['fish']} sharks={stats['sharks']} "
            f"(peak fish={stats['peak_fish']}, peak sharks={stats['peak_sharks']})"
        )

    def run_headless(
        self,
        max_ticks: int = 1000,
        stats_interval: int = 100,
        stop_on_extinction: bool = True,
    ) -> Dict[str, Any]:
        """Run without visualization.

        Args:
            max_ticks: Maximum number of generations to simulate
            stats_interval: Log stats every N ticks (0 = never)
            stop_on_extinction: Stop early once no organisms remain

        Returns:
            Final tracker summary plus runtime information
        """
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("HEADLESS WA-TOR SIMULATION")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info(
            f"Grid {self.config.height}x{self.config.width}, "
            f"neighborhood={self.config.neighborhood.value}, up to {max_ticks} ticks"
        )

        start_time = time.time()
        ticks_run = 0
        for i in range(max_ticks):
            self.step()
            ticks_run = i + 1

            if stats_interval and ticks_run % stats_interval == 0:
                self.print_stats()

            if stop_on_extinction and self.tracker.extinct:
                logger.info(f"Ocean is empty after {ticks_run} ticks; stopping")
                break

        runtime = time.time() - start_time

        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("SIMULATION COMPLETE - Final Statistics")
        logger.info("=" * SEPARATOR_WIDTH)
        self.print_stats()

        result = self.tracker.summary()
        result["ticks_run"] = ticks_run
        result["runtime_seconds"] = runtime
        result["run_id"] = self.run_id
        return result
