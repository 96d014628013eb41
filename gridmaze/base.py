"""Abstract interfaces for maze generators and search engines.

Every algorithm is written as a Python generator that yields once per step
(the cell it just expanded or changed). ``StepRun`` drives such a generator,
which lets a caller either run it to the end or advance it one step at a time
from its own scheduler.
"""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, Iterator, List, Optional

from .config import RunOptions, get_logger
from .errors import InvalidInput
from .grid import Cell, CellRef, CellType, Coordinate, Grid
from .paths import reconstruct_path

logger = get_logger(__name__)

SearchSteps = Generator[Cell, None, bool]


@dataclass
class GenerationResult:
    algorithm: str
    width: int
    height: int
    steps: int
    completed: bool
    cancelled: bool
    wall_count: int

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "width": self.width,
            "height": self.height,
            "steps": self.steps,
            "completed": self.completed,
            "cancelled": self.cancelled,
            "wall_count": self.wall_count,
        }


@dataclass
class PathResult:
    """Outcome of a search: the path runs from the target toward the start."""

    algorithm: str
    start: Coordinate
    target: Coordinate
    path: List[Cell] = field(default_factory=list)
    reached: bool = False
    steps: int = 0
    cancelled: bool = False

    @property
    def distance(self) -> int:
        return len(self.path)

    @property
    def coordinates(self) -> List[Coordinate]:
        return [cell.position for cell in self.path]

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "start": list(self.start),
            "target": list(self.target),
            "reached": self.reached,
            "distance": self.distance,
            "steps": self.steps,
            "cancelled": self.cancelled,
            "path": [list(position) for position in self.coordinates],
        }


class StepRun:
    """Resumable execution of a single generator or search pass over a grid."""

    def __init__(
        self,
        name: str,
        grid: Grid,
        steps: Iterator[Cell],
        options: Optional[RunOptions] = None,
        *,
        guarded: bool = True,
    ) -> None:
        self.name = name
        self.grid = grid
        self.options = options or RunOptions()
        self.step_count = 0
        self.finished = False
        self.cancelled = False
        self.outcome: Any = None
        self._steps = steps
        self._guarded = guarded

    @property
    def completed(self) -> bool:
        return self.finished and not self.cancelled

    def step(self) -> bool:
        """Advance by one step. Returns False once the run has finished."""

        if self.finished:
            return False
        cancel = self.options.cancel
        if cancel is not None and cancel.is_set():
            self.cancel()
            return False
        try:
            cell = next(self._steps)
        except StopIteration as stop:
            self.outcome = stop.value
            self._finish()
            logger.debug("Run %r finished after %d steps", self.name, self.step_count)
            if self.options.on_complete is not None:
                self.options.on_complete(self)
            return False
        except Exception:
            self._finish()
            raise
        self.step_count += 1
        if self.options.on_step is not None:
            self.options.on_step(self.step_count, cell)
        return True

    def run(self) -> "StepRun":
        delay = self.options.delay
        while self.step():
            if delay:
                time.sleep(delay)
        return self

    def cancel(self) -> None:
        if self.finished:
            return
        close = getattr(self._steps, "close", None)
        if close is not None:
            close()
        self.cancelled = True
        self._finish()
        logger.warning("Run %r cancelled after %d steps", self.name, self.step_count)

    def _finish(self) -> None:
        self.finished = True
        if self._guarded:
            self._guarded = False
            self.grid.end_run()

    def _require_finished(self) -> None:
        if not self.finished:
            raise RuntimeError(f"Run {self.name!r} has not finished yet")

    def __enter__(self) -> "StepRun":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self.finished:
            self.cancel()
        return False


class GenerationRun(StepRun):
    def result(self) -> GenerationResult:
        self._require_finished()
        return GenerationResult(
            algorithm=self.name,
            width=self.grid.width,
            height=self.grid.height,
            steps=self.step_count,
            completed=self.completed,
            cancelled=self.cancelled,
            wall_count=len(self.grid.cells_of_type(CellType.WALL)),
        )


class SearchRun(StepRun):
    def __init__(
        self,
        name: str,
        grid: Grid,
        steps: Iterator[Cell],
        options: Optional[RunOptions] = None,
        *,
        start: Cell,
        target: Cell,
        guarded: bool = True,
    ) -> None:
        super().__init__(name, grid, steps, options, guarded=guarded)
        self.start = start
        self.target = target

    @property
    def reached(self) -> bool:
        return self.completed and bool(self.outcome)

    def result(self) -> PathResult:
        self._require_finished()
        path = reconstruct_path(self.grid, self.target, self.start) if self.reached else []
        return PathResult(
            algorithm=self.name,
            start=self.start.position,
            target=self.target.position,
            path=path,
            reached=self.reached,
            steps=self.step_count,
            cancelled=self.cancelled,
        )


class AbstractMazeGenerator(ABC):
    """Base class for algorithms that carve a wall pattern into a grid."""

    name: str = ""
    slug: str = ""
    #: every cell is forced to this type before carving starts
    initial_type: CellType = CellType.WALL

    def start(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        *,
        options: Optional[RunOptions] = None,
    ) -> GenerationRun:
        """Claim the grid, reset it and return a run positioned before the first step."""

        if grid is None:
            raise InvalidInput("A grid is required to generate a maze")
        rng = rng if rng is not None else random.Random()
        grid.begin_run(self.name)
        grid.reset_for_run(self.initial_type)
        return GenerationRun(self.name, grid, self.carve(grid, rng), options)

    def generate(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        *,
        options: Optional[RunOptions] = None,
    ) -> GenerationResult:
        """Run the generator to completion (or cancellation)."""

        with self.start(grid, rng, options=options) as run:
            run.run()
        return run.result()

    @abstractmethod
    def carve(self, grid: Grid, rng: random.Random) -> Iterator[Cell]:
        """Mutate cell types in place, yielding once per step."""

    def describe(self) -> Dict[str, Any]:
        return {"slug": self.slug, "name": self.name}


class AbstractPathfinder(ABC):
    """Base class for search engines that build a parent tree rooted at the start."""

    name: str = ""
    slug: str = ""

    def start(
        self,
        grid: Grid,
        start: CellRef,
        target: CellRef,
        rng: Optional[random.Random] = None,
        *,
        options: Optional[RunOptions] = None,
    ) -> SearchRun:
        """Validate the request, claim and reset the grid, and return a run.

        ``rng`` is accepted so every engine shares one signature; the bundled
        engines are deterministic and ignore it.
        """

        if grid is None:
            raise InvalidInput("A grid is required to search for a path")
        start_cell = grid.resolve(start)
        target_cell = grid.resolve(target)
        if start_cell is target_cell:
            return SearchRun(
                self.name,
                grid,
                _already_there(),
                options,
                start=start_cell,
                target=target_cell,
                guarded=False,
            )
        grid.begin_run(self.name)
        grid.reset_for_run()
        return SearchRun(
            self.name,
            grid,
            self.search(grid, start_cell, target_cell),
            options,
            start=start_cell,
            target=target_cell,
        )

    def find_path(
        self,
        grid: Grid,
        start: CellRef,
        target: CellRef,
        rng: Optional[random.Random] = None,
        *,
        options: Optional[RunOptions] = None,
    ) -> PathResult:
        with self.start(grid, start, target, rng, options=options) as run:
            run.run()
        return run.result()

    @abstractmethod
    def search(self, grid: Grid, start: Cell, target: Cell) -> SearchSteps:
        """Expand cells one step at a time; return True once the target is reached."""

    def describe(self) -> Dict[str, Any]:
        return {"slug": self.slug, "name": self.name}


def _already_there() -> SearchSteps:
    return True
    yield  # pragma: no cover


__all__ = [
    "AbstractMazeGenerator",
    "AbstractPathfinder",
    "GenerationResult",
    "GenerationRun",
    "PathResult",
    "SearchRun",
    "StepRun",
]
