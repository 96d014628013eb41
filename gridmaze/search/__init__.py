"""Pathfinding search engines and their registry."""

__all__ = [
    "PATHFINDERS",
    "available_pathfinders",
    "create_pathfinder",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "AStarSearch",
    "weighted_manhattan",
    "heuristic_table",
]

from typing import Dict, List, Type

from ..base import AbstractPathfinder
from .bfs import BreadthFirstSearch
from .dfs import DepthFirstSearch
from .astar import AStarSearch, heuristic_table, weighted_manhattan

PATHFINDERS: Dict[str, Type[AbstractPathfinder]] = {
    pathfinder.slug: pathfinder
    for pathfinder in (BreadthFirstSearch, DepthFirstSearch, AStarSearch)
}


def available_pathfinders() -> List[str]:
    return list(PATHFINDERS)


def create_pathfinder(slug: str) -> AbstractPathfinder:
    try:
        pathfinder_cls = PATHFINDERS[slug]
    except KeyError as exc:
        raise KeyError(
            f"Unknown search engine '{slug}', expected one of: {', '.join(PATHFINDERS)}"
        ) from exc
    return pathfinder_cls()
