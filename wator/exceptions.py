"""Wa-Tor exception hierarchy.

Centralised base classes so callers can catch engine failures narrowly
instead of falling back to bare ``except Exception`` blocks.
"""


class WatorError(Exception):
    """Root of all Wa-Tor domain exceptions."""


class ConfigurationError(WatorError):
    """Invalid grid configuration (bad dimensions, periods or energy values)."""


class GridIndexError(WatorError, IndexError):
    """A coordinate outside the grid was requested.

    Torus wrap-around is internal to the engine; callers asking for an
    out-of-range cell have a bug of their own, so this is never wrapped.
    """

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"cell ({row}, {col}) is outside a {height}x{width} grid"
        )
        self.row = row
        self.col = col
