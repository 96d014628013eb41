"""Binary tree maze: every room links back to exactly one earlier room."""

from __future__ import annotations

import random
from typing import Iterator, List

from ..base import AbstractMazeGenerator
from ..grid import Cell, CellType, Grid


class BinaryTreeGenerator(AbstractMazeGenerator):
    """Open every even-coordinate room and join it to its left or upper room.

    Rooms are visited in x-major order, so both backward rooms are already
    open whenever they exist and the maze is biased toward the origin corner.
    """

    name = "Binary Tree"
    slug = "binary-tree"
    initial_type = CellType.WALL

    def carve(self, grid: Grid, rng: random.Random) -> Iterator[Cell]:
        cells = grid.cells
        for i in range(0, grid.width, 2):
            for j in range(0, grid.height, 2):
                room = cells[i][j]
                room.type = CellType.EMPTY

                passages: List[Cell] = []
                if i != 0 and cells[i - 2][j].type is CellType.EMPTY:
                    passages.append(cells[i - 1][j])
                if j != 0 and cells[i][j - 2].type is CellType.EMPTY:
                    passages.append(cells[i][j - 1])
                if passages:
                    rng.choice(passages).type = CellType.EMPTY

                yield room


__all__ = ["BinaryTreeGenerator"]
