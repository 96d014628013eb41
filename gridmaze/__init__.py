"""Grid maze generation and pathfinding toolkit."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractPathfinder",
    "GenerationResult",
    "PathResult",
    "StepRun",
    "Cell",
    "CellType",
    "Grid",
    "build_grid",
    "GridSettings",
    "RunOptions",
    "PRESETS",
    "GridMazeError",
    "InvalidDimensions",
    "InvalidInput",
    "ConcurrentRunError",
    "lattice_neighbors",
    "unit_neighbors",
    "neighboring",
    "reconstruct_path",
    "GENERATORS",
    "create_generator",
    "available_generators",
    "PATHFINDERS",
    "create_pathfinder",
    "available_pathfinders",
]

from .errors import ConcurrentRunError, GridMazeError, InvalidDimensions, InvalidInput
from .config import PRESETS, GridSettings, RunOptions
from .grid import Cell, CellType, Grid, build_grid
from .neighbors import lattice_neighbors, neighboring, unit_neighbors
from .paths import reconstruct_path
from .base import AbstractMazeGenerator, AbstractPathfinder, GenerationResult, PathResult, StepRun
from .generators import GENERATORS, available_generators, create_generator
from .search import PATHFINDERS, available_pathfinders, create_pathfinder
