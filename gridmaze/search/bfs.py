"""Breadth-first search."""

from __future__ import annotations

from collections import deque
from typing import Deque

from ..base import AbstractPathfinder, SearchSteps
from ..grid import Cell, CellType, Grid
from ..neighbors import unit_neighbors


class BreadthFirstSearch(AbstractPathfinder):
    """Expand cells in order of distance; the stored distance is the true shortest one."""

    name = "Breadth-First Search"
    slug = "bfs"

    def search(self, grid: Grid, start: Cell, target: Cell) -> SearchSteps:
        start.visited = True
        start.helper_number = 0
        queue: Deque[Cell] = deque([start])

        while queue:
            current = queue.popleft()
            yield current
            if current is target:
                return True

            for neighbour in unit_neighbors(current, grid, visited=False):
                if neighbour.type is CellType.WALL:
                    continue
                neighbour.visited = True
                neighbour.parent = current.position
                neighbour.helper_number = current.helper_number + 1
                queue.append(neighbour)

        return False


__all__ = ["BreadthFirstSearch"]
