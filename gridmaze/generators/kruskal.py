"""Randomized Kruskal maze built from a shuffled list of candidate walls."""

from __future__ import annotations

import random
from typing import Dict, Iterator, List, Optional, Tuple

from ..base import AbstractMazeGenerator
from ..grid import Cell, CellType, Grid
from ..neighbors import cell_between

VERTICAL = 0
HORIZONTAL = 1


class RoomSets:
    """Disjoint sets of rooms keyed by the label stored in ``helper_number``.

    A merge relabels every member of the smaller set, so no path compression
    is needed to keep lookups constant time.
    """

    def __init__(self) -> None:
        self._members: Dict[int, List[Cell]] = {}
        self._next_label = 0

    def add(self, cell: Cell) -> int:
        label = self._next_label
        self._next_label += 1
        cell.helper_number = label
        self._members[label] = [cell]
        return label

    def same(self, first: Cell, second: Cell) -> bool:
        return first.helper_number == second.helper_number

    def union(self, first: Cell, second: Cell) -> bool:
        keep, drop = first.helper_number, second.helper_number
        if keep == drop:
            return False
        if len(self._members[keep]) < len(self._members[drop]):
            keep, drop = drop, keep
        absorbed = self._members.pop(drop)
        for cell in absorbed:
            cell.helper_number = keep
        self._members[keep].extend(absorbed)
        return True

    def members(self, cell: Cell) -> List[Cell]:
        return list(self._members[cell.helper_number])

    def __len__(self) -> int:
        return len(self._members)


class KruskalGenerator(AbstractMazeGenerator):
    """Join odd-coordinate rooms through randomly ordered walls without closing loops."""

    name = "Kruskal"
    slug = "kruskal"
    initial_type = CellType.WALL

    def carve(self, grid: Grid, rng: random.Random) -> Iterator[Cell]:
        sets = RoomSets()
        edges: List[Tuple[Cell, int]] = []
        for i in range(1, grid.width - 1, 2):
            for j in range(1, grid.height - 1, 2):
                room = grid.cells[i][j]
                room.type = CellType.EMPTY
                sets.add(room)
                edges.append((room, VERTICAL))
                edges.append((room, HORIZONTAL))

        rng.shuffle(edges)

        for room, orientation in edges:
            other = self._far_room(grid, room, orientation)
            if other is None or sets.same(room, other):
                continue
            sets.union(room, other)
            wall = cell_between(grid, room, other)
            wall.type = CellType.EMPTY
            yield wall

    @staticmethod
    def _far_room(grid: Grid, room: Cell, orientation: int) -> Optional[Cell]:
        if orientation == VERTICAL:
            if room.x + 2 < grid.width - 1:
                return grid.cells[room.x + 2][room.y]
        elif room.y + 2 < grid.height - 1:
            return grid.cells[room.x][room.y + 2]
        return None


__all__ = ["KruskalGenerator", "RoomSets", "VERTICAL", "HORIZONTAL"]
