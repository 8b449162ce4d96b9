"""Cell value objects for the Wa-Tor grid.

Every grid slot holds exactly one of three immutable cell values:

- ``Empty``: no organism (use the shared :data:`EMPTY` instance)
- ``Fish``: a fish with its reproduction counter and generation stamp
- ``Shark``: a shark with energy, reproduction counter and generation stamp

Cells never change in place. The engine replaces them with new values as
organisms move, feed, breed and die, which keeps reads from a renderer
trivially safe between ticks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CellKind(Enum):
    """Discriminant of a cell; all a renderer needs to draw the grid."""

    EMPTY = "empty"
    FISH = "fish"
    SHARK = "shark"


@dataclass(frozen=True)
class Empty:
    """An unoccupied grid slot."""

    @property
    def kind(self) -> CellKind:
        return CellKind.EMPTY

    @property
    def is_organism(self) -> bool:
        return False


EMPTY = Empty()


@dataclass(frozen=True)
class Fish:
    """A fish.

    Attributes:
        repro_counter: Ticks since the fish last spawned or was born,
            cycling in ``[0, fish_repro_period)``
        last_tick: Generation on which this fish was last processed
    """

    repro_counter: int = 0
    last_tick: int = 0

    @property
    def kind(self) -> CellKind:
        return CellKind.FISH

    @property
    def is_organism(self) -> bool:
        return True


@dataclass(frozen=True)
class Shark:
    """A shark.

    Attributes:
        energy: Remaining life-force; a shark never exists with zero energy
        repro_counter: Cycles in ``[0, shark_repro_period)``
        last_tick: Generation on which this shark was last processed
    """

    energy: int
    repro_counter: int = 0
    last_tick: int = 0

    @property
    def kind(self) -> CellKind:
        return CellKind.SHARK

    @property
    def is_organism(self) -> bool:
        return True


Cell = Union[Empty, Fish, Shark]
