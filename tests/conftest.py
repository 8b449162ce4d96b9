"""Pytest configuration and fixtures for Wa-Tor tests."""

import random

import pytest

from wator.grid import Grid


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def make_empty_grid(seeded_rng):
    """Factory for an empty grid to seed scenarios by hand.

    Keyword arguments are passed through to :class:`Grid`; the stocking
    fractions are zero and the grid is cleared after construction.
    """

    def _make(width=2, height=2, **kwargs):
        kwargs.setdefault("rng", seeded_rng)
        grid = Grid(0.0, 0.0, width=width, height=height, **kwargs)
        grid.clear()
        return grid

    return _make
