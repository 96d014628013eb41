"""Recursive division: split open chambers with walls that each keep one gap."""

from __future__ import annotations

import random
from typing import Iterator, List, Tuple

from ..base import AbstractMazeGenerator
from ..config import MIN_SPAN
from ..grid import Cell, CellType, Grid

# (low_x, high_x, low_y, high_y), bounds are the enclosing wall lines
Chamber = Tuple[int, int, int, int]


class RecursiveDivisionGenerator(AbstractMazeGenerator):
    """Start from an open field inside a wall ring and keep dividing it.

    A chamber whose span along either axis is below ``min_span`` is left
    open. Otherwise an axis is picked at random (falling back to the other
    axis when the chamber is too narrow), a full wall is drawn at a random
    offset and a single random gap is left in it. A wall is never placed
    where one of its ends would close the gap of an enclosing wall, so every
    open cell stays reachable.
    """

    name = "Recursive Division"
    slug = "recursive-division"
    initial_type = CellType.EMPTY

    def __init__(self, min_span: int = MIN_SPAN) -> None:
        if min_span < 1:
            raise ValueError("min_span must be positive")
        self.min_span = min_span

    def carve(self, grid: Grid, rng: random.Random) -> Iterator[Cell]:
        last_x, last_y = grid.width - 1, grid.height - 1
        for cell in grid:
            if cell.x in (0, last_x) or cell.y in (0, last_y):
                cell.type = CellType.WALL

        chambers: List[Chamber] = [(0, last_x, 0, last_y)]
        while chambers:
            low_x, high_x, low_y, high_y = chambers.pop()
            if high_x - low_x < self.min_span or high_y - low_y < self.min_span:
                continue

            vertical_first = rng.randrange(2) == 0
            for vertical in (vertical_first, not vertical_first):
                offsets = self._wall_offsets(grid, low_x, high_x, low_y, high_y, vertical)
                if offsets:
                    break
            else:
                continue

            index = rng.choice(offsets)
            if vertical:
                gap = rng.randrange(low_y + 1, high_y)
                wall = [grid.cells[index][y] for y in range(low_y + 1, high_y) if y != gap]
                halves = [(low_x, index, low_y, high_y), (index, high_x, low_y, high_y)]
            else:
                gap = rng.randrange(low_x + 1, high_x)
                wall = [grid.cells[x][index] for x in range(low_x + 1, high_x) if x != gap]
                halves = [(low_x, high_x, low_y, index), (low_x, high_x, index, high_y)]

            for cell in wall:
                cell.type = CellType.WALL
                yield cell

            # first half is fully divided before the second
            chambers.extend(reversed(halves))

    @staticmethod
    def _wall_offsets(
        grid: Grid,
        low_x: int,
        high_x: int,
        low_y: int,
        high_y: int,
        vertical: bool,
    ) -> List[int]:
        cells = grid.cells
        if vertical:
            return [
                x
                for x in range(low_x + 2, high_x - 1)
                if cells[x][low_y].is_wall and cells[x][high_y].is_wall
            ]
        return [
            y
            for y in range(low_y + 2, high_y - 1)
            if cells[low_x][y].is_wall and cells[high_x][y].is_wall
        ]


__all__ = ["RecursiveDivisionGenerator", "Chamber"]
