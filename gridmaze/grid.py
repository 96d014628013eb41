"""Grid and cell model shared by every maze generator and search engine."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import GridSettings, get_logger
from .errors import ConcurrentRunError, InvalidDimensions, InvalidInput

logger = get_logger(__name__)

Coordinate = Tuple[int, int]


class CellType(IntEnum):
    EMPTY = 0
    WALL = 1
    TARGET = 2
    START = 3


CELL_SYMBOLS: Dict[CellType, str] = {
    CellType.EMPTY: ".",
    CellType.WALL: "#",
    CellType.TARGET: "T",
    CellType.START: "S",
}
PATH_SYMBOL = "*"
_SYMBOL_TYPES = {symbol: cell_type for cell_type, symbol in CELL_SYMBOLS.items()}


@dataclass(eq=False)
class Cell:
    """A single lattice position and the per-run state algorithms attach to it.

    ``parent`` holds the coordinate of the parent cell rather than the cell
    itself; the grid stays the only owner of its cells.
    """

    x: int
    y: int
    type: CellType = CellType.EMPTY
    visited: bool = False
    helper_number: int = 0
    parent: Optional[Coordinate] = None

    @property
    def position(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def is_wall(self) -> bool:
        return self.type is CellType.WALL

    def reset(self, cell_type: Optional[CellType] = None) -> None:
        self.visited = False
        self.helper_number = 0
        self.parent = None
        if cell_type is not None:
            self.type = cell_type

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "type": self.type.name,
            "visited": self.visited,
            "helper_number": self.helper_number,
            "parent": list(self.parent) if self.parent is not None else None,
        }

    def __repr__(self) -> str:
        return f"Cell({self.x}, {self.y}, {self.type.name})"


CellRef = Union[Cell, Sequence[int]]


class Grid:
    """A fixed W x H lattice of cells indexed ``grid[x][y]``."""

    def __init__(self, width: int, height: int) -> None:
        GridSettings(width=width, height=height).validate()
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for y in range(height)] for x in range(width)
        ]
        self._run_lock = threading.Lock()
        self._active_run: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: GridSettings) -> "Grid":
        settings.validate()
        return cls(settings.width, settings.height)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from text rows where ``rows[y][x]`` is a cell symbol."""

        if not rows or not rows[0]:
            raise InvalidDimensions("Grid rows must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidDimensions("Grid rows must all have the same length")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, symbol in enumerate(row):
                try:
                    grid.cells[x][y].type = _SYMBOL_TYPES[symbol]
                except KeyError as exc:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({x}, {y})") from exc
        return grid

    def __getitem__(self, x: int) -> List[Cell]:
        return self.cells[x]

    def __iter__(self) -> Iterator[Cell]:
        for column in self.cells:
            yield from column

    def __len__(self) -> int:
        return self.width * self.height

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return self.cells[x][y]

    def contains(self, cell: Cell) -> bool:
        return self.in_bounds(cell.x, cell.y) and self.cells[cell.x][cell.y] is cell

    def resolve(self, ref: Optional[CellRef]) -> Cell:
        """Return the grid cell for a cell object or an ``(x, y)`` pair."""

        if isinstance(ref, Cell):
            if not self.contains(ref):
                raise InvalidInput(f"{ref!r} does not belong to this grid")
            return ref
        if ref is None:
            raise InvalidInput("A cell reference is required")
        try:
            x, y = (int(value) for value in ref)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"Cannot interpret {ref!r} as a grid coordinate") from exc
        if not self.in_bounds(x, y):
            raise InvalidInput(f"({x}, {y}) is outside a {self.width}x{self.height} grid")
        return self.cells[x][y]

    def parent_of(self, cell: Cell) -> Optional[Cell]:
        if cell.parent is None:
            return None
        px, py = cell.parent
        return self.cells[px][py]

    def cells_of_type(self, cell_type: CellType) -> List[Cell]:
        return [cell for cell in self if cell.type is cell_type]

    def reset_for_run(self, default_type: Optional[CellType] = None) -> None:
        for cell in self:
            cell.reset(default_type)

    # ------------------------------------------------------------------
    # Snapshots for external renderers

    def type_array(self) -> np.ndarray:
        return np.array([[int(cell.type) for cell in column] for column in self.cells], dtype=np.int8)

    def visited_array(self) -> np.ndarray:
        return np.array([[cell.visited for cell in column] for column in self.cells], dtype=bool)

    def distance_array(self) -> np.ndarray:
        return np.array([[cell.helper_number for cell in column] for column in self.cells], dtype=np.int64)

    def to_rows(self, path: Optional[Sequence[Cell]] = None) -> List[str]:
        on_path = {cell.position for cell in path or ()}
        rows: List[str] = []
        for y in range(self.height):
            symbols = []
            for x in range(self.width):
                cell = self.cells[x][y]
                if (x, y) in on_path and cell.type is CellType.EMPTY:
                    symbols.append(PATH_SYMBOL)
                else:
                    symbols.append(CELL_SYMBOLS[cell.type])
            rows.append("".join(symbols))
        return rows

    # ------------------------------------------------------------------
    # Run guard

    @property
    def active_run(self) -> Optional[str]:
        return self._active_run

    @property
    def is_running(self) -> bool:
        return self._active_run is not None

    def begin_run(self, name: str) -> None:
        if not self._run_lock.acquire(blocking=False):
            raise ConcurrentRunError(
                f"Cannot start {name!r}: {self._active_run!r} is still running on this grid"
            )
        self._active_run = name
        logger.debug("Run %r started on %dx%d grid", name, self.width, self.height)

    def end_run(self) -> None:
        if self._active_run is None:
            return
        logger.debug("Run %r released the grid", self._active_run)
        self._active_run = None
        self._run_lock.release()

    @contextmanager
    def exclusive(self, name: str) -> Iterator["Grid"]:
        self.begin_run(name)
        try:
            yield self
        finally:
            self.end_run()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "rows": self.to_rows(),
        }


def build_grid(width: int, height: int) -> Grid:
    """Allocate a W x H grid of EMPTY cells."""

    return Grid(width, height)


__all__ = [
    "Cell",
    "CellRef",
    "CellType",
    "Coordinate",
    "Grid",
    "build_grid",
    "CELL_SYMBOLS",
    "PATH_SYMBOL",
]
