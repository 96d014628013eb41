"""Random wall scatter with no connectivity guarantee."""

from __future__ import annotations

import random
from typing import Iterator

from ..base import AbstractMazeGenerator
from ..config import WALL_PROBABILITY
from ..grid import Cell, CellType, Grid


class RandomWallsGenerator(AbstractMazeGenerator):
    """Turn each cell into a wall independently with a fixed probability."""

    name = "Random Walls"
    slug = "random-walls"
    initial_type = CellType.EMPTY

    def __init__(self, wall_probability: float = WALL_PROBABILITY) -> None:
        if not 0.0 <= wall_probability <= 1.0:
            raise ValueError("wall_probability must be between 0 and 1")
        self.wall_probability = wall_probability

    def carve(self, grid: Grid, rng: random.Random) -> Iterator[Cell]:
        for cell in grid:
            if rng.random() < self.wall_probability:
                cell.type = CellType.WALL
                yield cell


__all__ = ["RandomWallsGenerator"]
