"""Maze generation algorithms and their registry."""

__all__ = [
    "GENERATORS",
    "available_generators",
    "create_generator",
    "RandomWallsGenerator",
    "BinaryTreeGenerator",
    "PrimGenerator",
    "RecursiveBacktrackingGenerator",
    "KruskalGenerator",
    "RoomSets",
    "RecursiveDivisionGenerator",
]

from typing import Dict, List, Type

from ..base import AbstractMazeGenerator
from .random_walls import RandomWallsGenerator
from .binary_tree import BinaryTreeGenerator
from .prim import PrimGenerator
from .backtracking import RecursiveBacktrackingGenerator
from .kruskal import KruskalGenerator, RoomSets
from .division import RecursiveDivisionGenerator

GENERATORS: Dict[str, Type[AbstractMazeGenerator]] = {
    generator.slug: generator
    for generator in (
        RandomWallsGenerator,
        BinaryTreeGenerator,
        PrimGenerator,
        RecursiveBacktrackingGenerator,
        KruskalGenerator,
        RecursiveDivisionGenerator,
    )
}


def available_generators() -> List[str]:
    return list(GENERATORS)


def create_generator(slug: str, **kwargs) -> AbstractMazeGenerator:
    try:
        generator_cls = GENERATORS[slug]
    except KeyError as exc:
        raise KeyError(
            f"Unknown maze generator '{slug}', expected one of: {', '.join(GENERATORS)}"
        ) from exc
    return generator_cls(**kwargs)
