"""Recursive backtracking (randomized depth-first) maze carving."""

from __future__ import annotations

import random
from typing import Iterator, List, Tuple

from ..base import AbstractMazeGenerator
from ..grid import Cell, CellType, Grid

DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


class RecursiveBacktrackingGenerator(AbstractMazeGenerator):
    """Carve a perfect maze by walking two cells at a time and backing up at dead ends.

    Each cell shuffles the four directions when it is entered and descends
    into the first open one before trying the rest, which is the order a
    recursive implementation would follow. An explicit stack replaces native
    recursion so large grids do not hit the interpreter's recursion limit.
    """

    name = "Recursive Backtracking"
    slug = "recursive-backtracking"
    initial_type = CellType.WALL

    def carve(self, grid: Grid, rng: random.Random) -> Iterator[Cell]:
        start = grid.cells[rng.randrange(grid.width)][rng.randrange(grid.height)]
        start.type = CellType.EMPTY
        start.visited = True
        yield start

        stack: List[Tuple[Cell, Iterator[Tuple[int, int]]]] = [(start, self._shuffled(rng))]
        while stack:
            cell, directions = stack[-1]
            for dx, dy in directions:
                tx, ty = cell.x + 2 * dx, cell.y + 2 * dy
                if not grid.in_bounds(tx, ty):
                    continue
                wall = grid.cells[cell.x + dx][cell.y + dy]
                room = grid.cells[tx][ty]
                if wall.visited or room.visited:
                    continue
                for carved in (wall, room):
                    carved.type = CellType.EMPTY
                    carved.visited = True
                yield room
                stack.append((room, self._shuffled(rng)))
                break
            else:
                stack.pop()

    @staticmethod
    def _shuffled(rng: random.Random) -> Iterator[Tuple[int, int]]:
        order = list(DIRECTIONS)
        rng.shuffle(order)
        return iter(order)


__all__ = ["RecursiveBacktrackingGenerator", "DIRECTIONS"]
