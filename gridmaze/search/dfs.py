"""Depth-first search in a fixed neighbour order."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ..base import AbstractPathfinder, SearchSteps
from ..grid import Cell, CellType, Grid
from ..neighbors import unit_neighbors


class DepthFirstSearch(AbstractPathfinder):
    """Follow the first open neighbour as deep as possible, backing up at dead ends.

    The neighbours of a cell are listed when the cell is entered and checked
    again when their turn comes, since deeper branches may have visited them
    in the meantime. The traversal ends as soon as the target is entered, so
    the path found is valid but rarely the shortest.
    """

    name = "Depth-First Search"
    slug = "dfs"

    def search(self, grid: Grid, start: Cell, target: Cell) -> SearchSteps:
        start.visited = True
        start.helper_number = 0
        yield start

        stack: List[Tuple[Cell, Iterator[Cell]]] = [(start, self._candidates(grid, start))]
        while stack:
            current, candidates = stack[-1]
            for neighbour in candidates:
                if neighbour.visited or neighbour.type is CellType.WALL:
                    continue
                neighbour.visited = True
                neighbour.parent = current.position
                neighbour.helper_number = current.helper_number + 1
                yield neighbour
                if neighbour is target:
                    return True
                stack.append((neighbour, self._candidates(grid, neighbour)))
                break
            else:
                stack.pop()

        return False

    @staticmethod
    def _candidates(grid: Grid, cell: Cell) -> Iterator[Cell]:
        return iter(unit_neighbors(cell, grid, visited=False))


__all__ = ["DepthFirstSearch"]
