"""A* search driven by an x-weighted Manhattan heuristic."""

from __future__ import annotations

from typing import List

import numpy as np

from ..base import AbstractPathfinder, SearchSteps
from ..grid import Cell, CellType, Grid
from ..neighbors import unit_neighbors

X_WEIGHT = 2


def weighted_manhattan(cell: Cell, target: Cell) -> int:
    """``2 * |dx| + |dy|``: moves along x are estimated at twice their cost."""

    return X_WEIGHT * abs(target.x - cell.x) + abs(target.y - cell.y)


def heuristic_table(grid: Grid, target: Cell) -> np.ndarray:
    """Heuristic of every cell, indexed ``[x, y]``."""

    xs = np.arange(grid.width).reshape(-1, 1)
    ys = np.arange(grid.height).reshape(1, -1)
    return X_WEIGHT * np.abs(target.x - xs) + np.abs(target.y - ys)


class AStarSearch(AbstractPathfinder):
    """Best-first expansion on ``g + h`` over a plain open list.

    Every step scans the whole open list and keeps the first cell with the
    lowest score, so equal scores resolve to the cell inserted earliest.
    Because the heuristic can overestimate along x the path is only
    guaranteed shortest where that does not happen (open fields, for one).
    """

    name = "A*"
    slug = "astar"

    def search(self, grid: Grid, start: Cell, target: Cell) -> SearchSteps:
        estimates = heuristic_table(grid, target)
        start.helper_number = 0
        open_list: List[Cell] = [start]

        while open_list:
            current = self._pop_lowest_score(open_list, estimates)
            current.visited = True
            yield current
            if current is target:
                return True

            for neighbour in unit_neighbors(current, grid, visited=False):
                if neighbour.type is CellType.WALL:
                    continue
                neighbour.visited = True
                neighbour.parent = current.position
                neighbour.helper_number = current.helper_number + 1
                open_list.append(neighbour)

        return False

    @staticmethod
    def _pop_lowest_score(open_list: List[Cell], estimates: np.ndarray) -> Cell:
        best_index = 0
        best_score = None
        for index, cell in enumerate(open_list):
            score = cell.helper_number + int(estimates[cell.x, cell.y])
            if best_score is None or score < best_score:
                best_index = index
                best_score = score
        return open_list.pop(best_index)


__all__ = ["AStarSearch", "weighted_manhattan", "heuristic_table", "X_WEIGHT"]
