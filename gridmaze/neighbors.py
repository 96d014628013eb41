"""Adjacency queries over a grid.

Maze generators work on a sparse room lattice where rooms sit two cells apart
and the cell between two rooms is the wall that can be carved; search engines
expand through direct four-way neighbours.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .grid import Cell, Grid

LATTICE_OFFSETS: Tuple[Tuple[int, int], ...] = ((-2, 0), (2, 0), (0, -2), (0, 2))
UNIT_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _collect(
    cell: Cell,
    grid: Grid,
    offsets: Tuple[Tuple[int, int], ...],
    visited: Optional[bool],
) -> List[Cell]:
    found: List[Cell] = []
    for dx, dy in offsets:
        nx, ny = cell.x + dx, cell.y + dy
        if not grid.in_bounds(nx, ny):
            continue
        neighbour = grid.cells[nx][ny]
        if visited is None or neighbour.visited == visited:
            found.append(neighbour)
    return found


def lattice_neighbors(cell: Cell, grid: Grid, visited: Optional[bool] = None) -> List[Cell]:
    """Cells two steps away along each axis, optionally filtered on ``visited``."""

    return _collect(cell, grid, LATTICE_OFFSETS, visited)


def unit_neighbors(cell: Cell, grid: Grid, visited: bool) -> List[Cell]:
    """Direct neighbours whose ``visited`` flag equals ``visited``.

    The order (left, right, up, down along x then y) is stable and is the
    expansion order of the depth-first search.
    """

    return _collect(cell, grid, UNIT_OFFSETS, visited)


def neighboring(first: Cell, second: Cell) -> bool:
    """True when the two cells are distinct and share an edge."""

    dx = abs(first.x - second.x)
    dy = abs(first.y - second.y)
    return dx <= 1 and dy <= 1 and (dx == 0 or dy == 0) and dx != dy


def cell_between(grid: Grid, first: Cell, second: Cell) -> Cell:
    """The wall cell separating two lattice neighbours."""

    return grid.cells[(first.x + second.x) // 2][(first.y + second.y) // 2]


__all__ = [
    "LATTICE_OFFSETS",
    "UNIT_OFFSETS",
    "lattice_neighbors",
    "unit_neighbors",
    "neighboring",
    "cell_between",
]
