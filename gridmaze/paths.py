"""Path reconstruction from the parent handles left behind by a search."""

from __future__ import annotations

from typing import List, Sequence

from .grid import Cell, Grid
from .neighbors import neighboring


def reconstruct_path(grid: Grid, target: Cell, start: Cell) -> List[Cell]:
    """Walk parent handles from ``target`` until a cell without a parent.

    The result runs from the target toward the start and excludes the start
    cell, so its length is the number of moves between the two. It is empty
    when the target is the start or was never reached.
    """

    path: List[Cell] = []
    if target is start:
        return path
    limit = len(grid)
    current = target
    while current.parent is not None:
        path.append(current)
        if len(path) > limit:
            raise RuntimeError(f"Parent handles starting at {target!r} form a cycle")
        current = grid.parent_of(current)
    return path


def is_connected_path(path: Sequence[Cell], start: Cell) -> bool:
    """True when ``path`` (target first) steps cell by cell back to ``start``.

    Every consecutive pair must share an edge, the last cell must touch the
    start, and no cell may appear twice.
    """

    if not path:
        return True
    chain = list(path) + [start]
    if len({cell.position for cell in chain}) != len(chain):
        return False
    return all(neighboring(a, b) for a, b in zip(chain, chain[1:]))


__all__ = ["reconstruct_path", "is_connected_path"]
