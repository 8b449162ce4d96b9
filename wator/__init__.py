"""Wa-Tor predator/prey simulation engine.

This package contains the pure simulation logic, with no UI dependencies.
Key modules include:

- grid: The toroidal ocean and its tick rules (wator.grid.Grid)
- cells: Empty / Fish / Shark cell values
- engine: WatorEngine, which owns a grid, its RNG, a lock and the tracker
- population_tracker: Population history and extinction tracking
- config: Grid configuration and display constants

Design note: this module exposes a small, explicit public API via ``__all__``.
"""

from wator.cells import EMPTY, Cell, CellKind, Empty, Fish, Shark
from wator.config.grid import GridConfig, Neighborhood
from wator.engine import WatorEngine
from wator.exceptions import ConfigurationError, GridIndexError, WatorError
from wator.grid import Grid, TickSummary
from wator.population_tracker import PopulationSample, PopulationTracker

# Public API of the wator package. Keep this list intentionally small.
__all__ = [
    "EMPTY",
    "Cell",
    "CellKind",
    "ConfigurationError",
    "Empty",
    "Fish",
    "Grid",
    "GridConfig",
    "GridIndexError",
    "Neighborhood",
    "PopulationSample",
    "PopulationTracker",
    "Shark",
    "TickSummary",
    "WatorEngine",
    "WatorError",
]
