"""Command line driver: carve a maze, pick endpoints and search for a path."""

from __future__ import annotations

import argparse
import json
import random
from pathlib import Path
from typing import List, Optional, Sequence

from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, PRESETS, GridSettings, RunOptions, get_logger, setup_logging
from .errors import InvalidDimensions
from .generators import available_generators, create_generator
from .grid import Cell, CellType, Grid
from .search import available_pathfinders, create_pathfinder

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a maze and search it for a path")
    parser.add_argument("--generator", choices=available_generators(), default="recursive-backtracking")
    parser.add_argument("--search", choices=available_pathfinders(), default="bfs")
    parser.add_argument("--preset", choices=sorted(PRESETS), default=None, help="Named grid size")
    parser.add_argument("--width", type=int, default=None, help=f"Cells along x (default {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=None, help=f"Cells along y (default {DEFAULT_HEIGHT})")
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--target", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay", type=float, default=0.0, help="Seconds to pause between algorithm steps")
    parser.add_argument("--show", action="store_true", help="Include the grid as text rows in the report")
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument("--log-file", type=Path, default=None)
    return parser


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _grid_settings(args: argparse.Namespace) -> GridSettings:
    base = PRESETS[args.preset] if args.preset else GridSettings()
    return GridSettings(
        width=args.width if args.width is not None else base.width,
        height=args.height if args.height is not None else base.height,
        cell_size=base.cell_size,
        gap=base.gap,
    )


def _pick_endpoint(
    parser: argparse.ArgumentParser,
    grid: Grid,
    requested: Optional[Sequence[int]],
    rng: random.Random,
    label: str,
    *,
    avoid: Optional[Cell] = None,
) -> Cell:
    if requested is not None:
        x, y = requested
        if not grid.in_bounds(x, y):
            parser.error(f"{label} ({x}, {y}) is outside the {grid.width}x{grid.height} grid")
        cell = grid.cells[x][y]
        if cell.is_wall:
            parser.error(f"{label} ({x}, {y}) is a wall")
        return cell

    open_cells = [cell for cell in grid if not cell.is_wall]
    if not open_cells:
        parser.error(f"The generated maze has no open cell for the {label}")
    preferred = [cell for cell in open_cells if cell is not avoid]
    return rng.choice(preferred or open_cells)


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative")
    try:
        setup_logging(args.log_level, args.log_file)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        grid = Grid.from_settings(_grid_settings(args))
    except InvalidDimensions as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed)
    options = RunOptions(delay=args.delay)

    generator = create_generator(args.generator)
    generation = generator.generate(grid, rng, options=options)
    logger.info("%s carved a %dx%d grid in %d steps", generator.name, grid.width, grid.height, generation.steps)

    start = _pick_endpoint(parser, grid, args.start, rng, "start")
    target = _pick_endpoint(parser, grid, args.target, rng, "target", avoid=start)
    start.type = CellType.START
    if target is not start:
        target.type = CellType.TARGET

    pathfinder = create_pathfinder(args.search)
    result = pathfinder.find_path(grid, start, target, options=options)
    if result.reached:
        logger.info("%s reached %s in %d steps, distance %d", pathfinder.name, result.target, result.steps, result.distance)
    else:
        logger.info("%s found no path from %s to %s", pathfinder.name, result.start, result.target)

    report = {
        "grid": _grid_settings(args).to_dict(),
        "generation": generation.to_dict(),
        "search": result.to_dict(),
    }
    if args.show:
        report["rows"] = grid.to_rows(result.path)
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
