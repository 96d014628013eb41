"""Randomized Prim maze growth over the room lattice."""

from __future__ import annotations

import random
from typing import Iterator, List, Set

from ..base import AbstractMazeGenerator
from ..grid import Cell, CellType, Grid
from ..neighbors import cell_between, lattice_neighbors


class PrimGenerator(AbstractMazeGenerator):
    """Grow a maze from a random room by attaching random frontier rooms.

    The ``visited`` flag marks rooms already in the maze. Rooms share the
    parity of the starting cell; each attached room opens the wall toward one
    randomly chosen room that is already part of the maze.
    """

    name = "Prim"
    slug = "prim"
    initial_type = CellType.WALL

    def carve(self, grid: Grid, rng: random.Random) -> Iterator[Cell]:
        start = grid.cells[rng.randrange(grid.width)][rng.randrange(grid.height)]
        start.visited = True
        start.type = CellType.EMPTY
        yield start

        frontier: List[Cell] = lattice_neighbors(start, grid)
        queued: Set[Cell] = set(frontier)

        while frontier:
            current = frontier.pop(rng.randrange(len(frontier)))
            current.visited = True
            current.type = CellType.EMPTY

            anchor = rng.choice(lattice_neighbors(current, grid, visited=True))
            cell_between(grid, current, anchor).type = CellType.EMPTY
            yield current

            for neighbour in lattice_neighbors(current, grid, visited=False):
                if neighbour not in queued:
                    queued.add(neighbour)
                    frontier.append(neighbour)


__all__ = ["PrimGenerator"]
