"""Configuration package for the Wa-Tor engine and its viewer."""

from wator.config.grid import GridConfig, Neighborhood

__all__ = ["GridConfig", "Neighborhood"]
