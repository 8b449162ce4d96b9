"""The Wa-Tor grid engine.

A fixed-size toroidal ocean of fish and sharks that advances one
generation at a time.

Design Decisions:
-----------------
1. The grid is mutated in place. Every organism carries the generation
   number it was last processed on (``last_tick``); the scan skips any
   organism stamped with the current generation, so a fish that swims
   "ahead" of the scan is never moved twice in one tick.

2. The scan order is column-major and fixed. Only the random source
   decides between equally valid moves, which makes runs reproducible
   from a seed.

3. Each grid owns its ``random.Random``. Nothing touches the global
   ``random`` module state.

4. Neighbor lists are precomputed once per grid so the per-tick searches
   only filter a small tuple of coordinates.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from wator.cells import EMPTY, Cell, CellKind, Empty, Fish, Shark
from wator.config.grid import (
    DEFAULT_FISH_REPRO_PERIOD,
    DEFAULT_HEIGHT,
    DEFAULT_SHARK_ENERGY_BOOST,
    DEFAULT_SHARK_INITIAL_ENERGY,
    DEFAULT_SHARK_REPRO_PERIOD,
    DEFAULT_WIDTH,
    GridConfig,
    Neighborhood,
)
from wator.exceptions import GridIndexError
from wator.neighborhood import Coord, build_neighbor_table

logger = logging.getLogger(__name__)


@dataclass
class TickSummary:
    """What happened during one call to :meth:`Grid.advance`."""

    tick: int
    fish_births: int = 0
    shark_births: int = 0
    fish_eaten: int = 0
    sharks_starved: int = 0


class Grid:
    """A toroidal Wa-Tor ocean.

    Attributes:
        config: Immutable grid configuration
        last_summary: Birth/death tally of the most recent tick
    """

    def __init__(
        self,
        fish_fraction: float,
        shark_fraction: float,
        shark_initial_energy: int = DEFAULT_SHARK_INITIAL_ENERGY,
        fish_repro_period: int = DEFAULT_FISH_REPRO_PERIOD,
        shark_repro_period: int = DEFAULT_SHARK_REPRO_PERIOD,
        shark_energy_boost: int = DEFAULT_SHARK_ENERGY_BOOST,
        *,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        neighborhood: Neighborhood = Neighborhood.FOUR,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Create a grid and stock it at random.

        Args:
            fish_fraction: Probability that a cell starts as a fish
            shark_fraction: Probability that a cell starts as a shark
                (truncated so the two fractions never exceed 1)
            shark_initial_energy: Energy of every newborn shark
            fish_repro_period: Ticks between fish births
            shark_repro_period: Ticks between shark births
            shark_energy_boost: Energy a shark gains per fish eaten
            width: Number of columns
            height: Number of rows
            neighborhood: 4- or 8-neighborhood for movement and feeding
            rng: Random source to use (takes precedence over ``seed``)
            seed: Seed for a private random source

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config = GridConfig(
            width=width,
            height=height,
            fish_fraction=fish_fraction,
            shark_fraction=shark_fraction,
            shark_initial_energy=shark_initial_energy,
            fish_repro_period=fish_repro_period,
            shark_repro_period=shark_repro_period,
            shark_energy_boost=shark_energy_boost,
            neighborhood=neighborhood,
        )
        config.validate()
        self.config = config

        # RNG handling: prefer explicit rng, then seed, then fresh RNG
        if rng is not None:
            self.rng: random.Random = rng
        elif seed is not None:
            self.rng = random.Random(seed)
        else:
            self.rng = random.Random()

        self._width = config.width
        self._height = config.height
        self._tick = 0
        self._neighbors = build_neighbor_table(
            config.height, config.width, config.neighborhood
        )
        self._cells: List[List[Cell]] = [
            [EMPTY] * config.width for _ in range(config.height)
        ]
        self.last_summary: Optional[TickSummary] = None

        self._stock()

    @classmethod
    def from_config(
        cls,
        config: GridConfig,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "Grid":
        """Build a grid from a :class:`GridConfig`."""
        return cls(
            config.fish_fraction,
            config.shark_fraction,
            config.shark_initial_energy,
            config.fish_repro_period,
            config.shark_repro_period,
            config.shark_energy_boost,
            width=config.width,
            height=config.height,
            neighborhood=config.neighborhood,
            rng=rng,
            seed=seed,
        )

    def _stock(self) -> None:
        """Fill every cell according to the stocking fractions."""
        fish_band = self.config.fish_band
        shark_band = self.config.shark_band
        energy = self.config.shark_initial_energy

        for col in range(self._width):
            for row in range(self._height):
                sample = self.rng.random()
                if sample <= fish_band:
                    self._cells[row][col] = Fish(0, 0)
                elif sample <= shark_band:
                    self._cells[row][col] = Shark(energy, 0, 0)

        counts = self.counts()
        logger.info(
            f"Stocked {self._height}x{self._width} grid: "
            f"{counts[CellKind.FISH]} fish, {counts[CellKind.SHARK]} sharks"
        )

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def tick_counter(self) -> int:
        """Generations advanced so far."""
        return self._tick

    @property
    def fish_count(self) -> int:
        return self.count(CellKind.FISH)

    @property
    def shark_count(self) -> int:
        return self.count(CellKind.SHARK)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise GridIndexError(row, col, self._height, self._width)

    def cell_at(self, row: int, col: int) -> Cell:
        """Return the cell at ``(row, col)``.

        Raises:
            GridIndexError: If the coordinate is outside the grid
        """
        self._check_bounds(row, col)
        return self._cells[row][col]

    def count(self, kind: CellKind) -> int:
        """Count cells of the given kind."""
        return sum(1 for row in self._cells for cell in row if cell.kind is kind)

    def counts(self) -> Dict[CellKind, int]:
        """Count every kind of cell in a single scan."""
        result = {kind: 0 for kind in CellKind}
        for row in self._cells:
            for cell in row:
                result[cell.kind] += 1
        return result

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` in row-major order."""
        for row, cells in enumerate(self._cells):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def describe(self, label: str = "") -> str:
        """Multi-line dump of every cell, for debugging."""
        lines = [f"Grid contents (tick {self._tick}){': ' + label if label else ''}"]
        for row, cells in enumerate(self._cells):
            lines.append(f"Row {row}: " + ", ".join(repr(cell) for cell in cells))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Grid({self._height}x{self._width}, tick={self._tick}, "
            f"neighborhood={self.config.neighborhood.name})"
        )

    # =========================================================================
    # Seeding (tests and debugging only)
    # =========================================================================

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        """Overwrite a single cell.

        Not part of the simulation rules; used to build scenarios by hand.
        """
        self._check_bounds(row, col)
        if not isinstance(cell, (Empty, Fish, Shark)):
            raise TypeError(f"expected a cell value, got {type(cell).__name__}")
        if isinstance(cell, Empty):
            # The scan relies on identity with the shared EMPTY instance
            cell = EMPTY
        self._cells[row][col] = cell

    def clear(self) -> None:
        """Empty every cell (the tick counter is left alone)."""
        for row in self._cells:
            for col in range(self._width):
                row[col] = EMPTY

    # =========================================================================
    # Neighbor search
    # =========================================================================

    def find_empty_neighbor(self, row: int, col: int) -> Optional[Coord]:
        """Pick a random empty neighbor of ``(row, col)``, or None if crowded."""
        self._check_bounds(row, col)
        return self._find_empty(row, col)

    def find_feeding_or_empty_neighbor(self, row: int, col: int) -> Optional[Coord]:
        """Pick a random fish neighbor, else a random empty one, else None."""
        self._check_bounds(row, col)
        return self._find_prey_or_empty(row, col)

    def _find_empty(self, row: int, col: int) -> Optional[Coord]:
        cells = self._cells
        candidates = [
            (r, c) for r, c in self._neighbors[row][col] if cells[r][c] is EMPTY
        ]
        if not candidates:
            return None
        return self.rng.choice(candidates)

    def _find_prey_or_empty(self, row: int, col: int) -> Optional[Coord]:
        cells = self._cells
        prey: List[Coord] = []
        empty: List[Coord] = []
        for r, c in self._neighbors[row][col]:
            cell = cells[r][c]
            if isinstance(cell, Fish):
                prey.append((r, c))
            elif not prey and cell is EMPTY:
                empty.append((r, c))

        # Feeding always wins over plain movement
        if prey:
            return self.rng.choice(prey)
        if empty:
            return self.rng.choice(empty)
        return None

    # =========================================================================
    # Advance
    # =========================================================================

    def advance(self) -> None:
        """Advance the ocean by one generation."""
        self._tick += 1
        tick = self._tick
        cells = self._cells
        summary = TickSummary(tick=tick)

        for col in range(self._width):
            for row in range(self._height):
                cell = cells[row][col]
                if not cell.is_organism or cell.last_tick == tick:
                    continue
                if isinstance(cell, Fish):
                    self._advance_fish(row, col, cell, tick, summary)
                else:
                    self._advance_shark(row, col, cell, tick, summary)

        self.last_summary = summary
        logger.debug(
            f"Tick {tick}: fish_births={summary.fish_births} "
            f"shark_births={summary.shark_births} fish_eaten={summary.fish_eaten} "
            f"sharks_starved={summary.sharks_starved}"
        )

    def _advance_fish(
        self, row: int, col: int, fish: Fish, tick: int, summary: TickSummary
    ) -> None:
        period = self.config.fish_repro_period
        new_repro = (fish.repro_counter + 1) % period
        dest = self._find_empty(row, col)

        if dest is None:
            # Crowded: the fish ages in place but cannot spawn
            self._cells[row][col] = Fish(new_repro, tick)
            return

        dest_row, dest_col = dest
        self._cells[dest_row][dest_col] = Fish(new_repro, tick)
        if fish.repro_counter == period - 1:
            self._cells[row][col] = Fish(0, tick)
            summary.fish_births += 1
        else:
            self._cells[row][col] = EMPTY

    def _advance_shark(
        self, row: int, col: int, shark: Shark, tick: int, summary: TickSummary
    ) -> None:
        config = self.config
        period = config.shark_repro_period
        new_repro = (shark.repro_counter + 1) % period
        dest = self._find_prey_or_empty(row, col)

        if dest is None:
            if shark.energy == 1:
                self._cells[row][col] = EMPTY
                summary.sharks_starved += 1
            else:
                self._cells[row][col] = Shark(shark.energy - 1, new_repro, tick)
            return

        dest_row, dest_col = dest
        eating = isinstance(self._cells[dest_row][dest_col], Fish)
        if not eating and shark.energy == 1:
            # Starves on the way; it never reaches the destination
            self._cells[row][col] = EMPTY
            summary.sharks_starved += 1
            return

        if eating:
            new_energy = shark.energy + config.shark_energy_boost
            summary.fish_eaten += 1
        else:
            new_energy = shark.energy - 1

        self._cells[dest_row][dest_col] = Shark(new_energy, new_repro, tick)
        if new_repro == 0:
            # Random phase keeps newborns from breeding in lockstep
            self._cells[row][col] = Shark(
                config.shark_initial_energy, self.rng.randrange(period), tick
            )
            summary.shark_births += 1
        else:
            self._cells[row][col] = EMPTY
