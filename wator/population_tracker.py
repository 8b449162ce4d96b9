"""Population tracking for the ocean.

Records fish and shark head-counts over time so the headless runner and
the viewer HUD can report population dynamics without rescanning history.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional

from wator.cells import CellKind
from wator.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PopulationSample:
    """Head-counts observed at one tick."""

    tick: int
    fish: int
    sharks: int
    empty: int

    @property
    def total(self) -> int:
        return self.fish + self.sharks + self.empty


class PopulationTracker:
    """Tracks population dynamics across ticks.

    Attributes:
        max_history: Number of samples to keep in ``history`` (None keeps
            everything); ``latest`` is tracked even when this is 0
        peak_fish: Highest fish count ever observed
        peak_sharks: Highest shark count ever observed
        fish_extinct_at: Tick at which fish were first observed extinct
        sharks_extinct_at: Tick at which sharks were first observed extinct
    """

    def __init__(self, max_history: Optional[int] = None) -> None:
        self.max_history = max_history
        self._history: Deque[PopulationSample] = deque(maxlen=max_history)
        self._latest: Optional[PopulationSample] = None
        self.peak_fish: int = 0
        self.peak_sharks: int = 0
        self.fish_extinct_at: Optional[int] = None
        self.sharks_extinct_at: Optional[int] = None

    def record(self, grid: Grid) -> PopulationSample:
        """Count the grid and append a sample.

        Args:
            grid: Grid to observe (the caller must hold any lock it needs)

        Returns:
            The sample that was recorded
        """
        counts = grid.counts()
        sample = PopulationSample(
            tick=grid.tick_counter,
            fish=counts[CellKind.FISH],
            sharks=counts[CellKind.SHARK],
            empty=counts[CellKind.EMPTY],
        )
        self._history.append(sample)
        self._latest = sample

        self.peak_fish = max(self.peak_fish, sample.fish)
        self.peak_sharks = max(self.peak_sharks, sample.sharks)

        if sample.fish == 0 and self.fish_extinct_at is None:
            self.fish_extinct_at = sample.tick
            logger.info(f"Fish went extinct at tick {sample.tick}")
        if sample.sharks == 0 and self.sharks_extinct_at is None:
            self.sharks_extinct_at = sample.tick
            logger.info(f"Sharks went extinct at tick {sample.tick}")

        return sample

    @property
    def latest(self) -> Optional[PopulationSample]:
        return self._latest

    @property
    def history(self) -> List[PopulationSample]:
        return list(self._history)

    @property
    def extinct(self) -> bool:
        """True once the latest sample has no organisms at all."""
        latest = self.latest
        return latest is not None and latest.fish == 0 and latest.sharks == 0

    def summary(self) -> Dict[str, Any]:
        """Aggregate statistics suitable for logging."""
        latest = self.latest
        return {
            "tick": latest.tick if latest else 0,
            "fish": latest.fish if latest else 0,
            "sharks": latest.sharks if latest else 0,
            "peak_fish": self.peak_fish,
            "peak_sharks": self.peak_sharks,
            "fish_extinct_at": self.fish_extinct_at,
            "sharks_extinct_at": self.sharks_extinct_at,
            "samples": len(self._history),
        }
