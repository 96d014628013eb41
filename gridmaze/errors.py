"""Exceptions raised by the maze and pathfinding core."""

from __future__ import annotations


class GridMazeError(Exception):
    """Base class for every error raised by gridmaze."""


class InvalidDimensions(GridMazeError, ValueError):
    """Grid width or height is not a positive integer."""


class InvalidInput(GridMazeError, ValueError):
    """A run was requested with a missing grid or cells that do not belong to it."""


class ConcurrentRunError(GridMazeError, RuntimeError):
    """A run was started on a grid that is already busy with another run."""


__all__ = [
    "GridMazeError",
    "InvalidDimensions",
    "InvalidInput",
    "ConcurrentRunError",
]
