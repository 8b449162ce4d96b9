"""Pygame rendering for the Wa-Tor viewer."""
