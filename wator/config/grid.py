"""Grid engine configuration.

Defaults match the classic terminal front end: a 70x10 ocean stocked with
40% fish and 40% sharks, using the 4-neighborhood.
"""

import logging
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Dict

from wator.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Grid dimensions (cells)
DEFAULT_WIDTH = 70
DEFAULT_HEIGHT = 10

# Initial stocking fractions
DEFAULT_FISH_FRACTION = 0.4
DEFAULT_SHARK_FRACTION = 0.4

# Energy and reproduction
DEFAULT_SHARK_INITIAL_ENERGY = 2
DEFAULT_FISH_REPRO_PERIOD = 2
DEFAULT_SHARK_REPRO_PERIOD = 3
DEFAULT_SHARK_ENERGY_BOOST = 2


class Neighborhood(Enum):
    """Which surrounding cells are eligible for movement and feeding."""

    FOUR = 4  # orthogonal neighbors only
    EIGHT = 8  # orthogonal and diagonal neighbors

    @classmethod
    def parse(cls, value: Any) -> "Neighborhood":
        """Accept a Neighborhood, its int value (4/8) or name ("four"/"eight")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if name.isdigit():
                value = int(name)
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"neighborhood must be 4 or 8, got {value!r}"
            ) from None


@dataclass(frozen=True)
class GridConfig:
    """Configuration for a Wa-Tor grid.

    Everything here is fixed for the lifetime of a grid. Use
    :meth:`with_overrides` to derive a variant.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    fish_fraction: float = DEFAULT_FISH_FRACTION
    shark_fraction: float = DEFAULT_SHARK_FRACTION

    shark_initial_energy: int = DEFAULT_SHARK_INITIAL_ENERGY
    fish_repro_period: int = DEFAULT_FISH_REPRO_PERIOD
    shark_repro_period: int = DEFAULT_SHARK_REPRO_PERIOD
    shark_energy_boost: int = DEFAULT_SHARK_ENERGY_BOOST

    neighborhood: Neighborhood = Neighborhood.FOUR

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "neighborhood", Neighborhood.parse(self.neighborhood))

    @property
    def fish_band(self) -> float:
        """Upper bound of the stocking sample range that yields a fish."""
        return max(0.0, min(1.0, self.fish_fraction))

    @property
    def shark_band(self) -> float:
        """Upper bound of the sample range that yields a shark.

        The cumulative fish+shark fraction is clamped to 1, so an oversized
        shark fraction is silently truncated.
        """
        return max(0.0, min(1.0, self.fish_fraction + self.shark_fraction))

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ConfigurationError: If any parameter would break the tick rules
        """
        if self.width < 1 or self.height < 1:
            raise ConfigurationError(
                f"grid dimensions must be positive, got {self.width}x{self.height}"
            )

        if self.fish_repro_period < 1:
            raise ConfigurationError(
                f"fish_repro_period must be >= 1, got {self.fish_repro_period}"
            )

        if self.shark_repro_period < 1:
            raise ConfigurationError(
                f"shark_repro_period must be >= 1, got {self.shark_repro_period}"
            )

        if self.shark_initial_energy < 1:
            raise ConfigurationError(
                f"shark_initial_energy must be >= 1, got {self.shark_initial_energy}"
            )

        if self.shark_energy_boost < 0:
            raise ConfigurationError(
                f"shark_energy_boost must be >= 0, got {self.shark_energy_boost}"
            )

        if self.shark_initial_energy == 1 and self.shark_energy_boost == 0:
            logger.warning(
                "shark_initial_energy=1 with shark_energy_boost=0: "
                "every shark dies on its first tick without a meal"
            )

    def with_overrides(self, **overrides: Any) -> "GridConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        data = asdict(self)
        data["neighborhood"] = self.neighborhood.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridConfig":
        """Create config from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
