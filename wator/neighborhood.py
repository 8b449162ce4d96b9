"""Torus geometry helpers.

The ocean wraps at every edge: the right neighbor of the last column is
the first column of the same row, and likewise for rows. These helpers
build the neighbor tables the grid uses for its searches.
"""

from typing import List, Tuple

from wator.config.grid import Neighborhood

Coord = Tuple[int, int]

# (row, col) offsets, orthogonal first
ORTHOGONAL_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))
DIAGONAL_OFFSETS: Tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def offsets_for(neighborhood: Neighborhood) -> Tuple[Coord, ...]:
    """Return the (row, col) offsets eligible under a neighborhood mode."""
    if neighborhood is Neighborhood.EIGHT:
        return ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS
    return ORTHOGONAL_OFFSETS


def wrap(row: int, col: int, height: int, width: int) -> Coord:
    """Wrap a coordinate onto the torus."""
    return row % height, col % width


def torus_neighbors(
    row: int,
    col: int,
    height: int,
    width: int,
    neighborhood: Neighborhood,
) -> List[Coord]:
    """Distinct wrapped neighbors of ``(row, col)``, excluding the cell itself.

    On tiny grids several offsets can wrap onto the same cell (on a 2x2
    grid "up" and "down" are the same row); each cell is listed once so
    random picks stay uniform over distinct destinations.

    Args:
        row, col: Origin cell
        height, width: Grid dimensions
        neighborhood: Which offsets are eligible

    Returns:
        List of (row, col) tuples in offset order
    """
    seen = set()
    result: List[Coord] = []
    for d_row, d_col in offsets_for(neighborhood):
        coord = wrap(row + d_row, col + d_col, height, width)
        if coord == (row, col) or coord in seen:
            continue
        seen.add(coord)
        result.append(coord)
    return result


def build_neighbor_table(
    height: int, width: int, neighborhood: Neighborhood
) -> List[List[Tuple[Coord, ...]]]:
    """Precompute ``torus_neighbors`` for every cell, indexed ``[row][col]``."""
    return [
        [tuple(torus_neighbors(row, col, height, width, neighborhood)) for col in range(width)]
        for row in range(height)
    ]
