#!/usr/bin/env python3
"""Run every maze generator against every search engine and report the cost of each pair."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import List, Optional, Tuple

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gridmaze import Grid, create_generator, create_pathfinder
from gridmaze.config import get_logger, setup_logging
from gridmaze.generators import available_generators
from gridmaze.grid import Cell
from gridmaze.search import available_pathfinders

logger = get_logger("gridmaze.scripts.compare")


def _endpoints(grid: Grid) -> Optional[Tuple[Cell, Cell]]:
    """First and last open cell in x-major order, or None when fewer than two exist."""

    open_cells = [cell for cell in grid if not cell.is_wall]
    if len(open_cells) < 2:
        return None
    return open_cells[0], open_cells[-1]


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--width", type=int, default=31, help="Cells along x")
    parser.add_argument("--height", type=int, default=31, help="Cells along y")
    parser.add_argument("--trials", type=int, default=5, help="Seeded grids per generator")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first trial")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional JSON file receiving one record per run",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    setup_logging(args.log_level)
    if args.trials <= 0:
        raise ValueError("--trials must be positive")

    records: List[dict] = []
    pairs = [(g, s) for g in available_generators() for s in available_pathfinders()]
    for index, (generator_slug, search_slug) in enumerate(pairs, start=1):
        generator = create_generator(generator_slug)
        pathfinder = create_pathfinder(search_slug)
        steps: List[int] = []
        distances: List[int] = []
        unreachable = 0
        for trial in range(args.trials):
            seed = args.seed + trial
            grid = Grid(args.width, args.height)
            generator.generate(grid, random.Random(seed))
            endpoints = _endpoints(grid)
            if endpoints is None:
                logger.warning("%s left fewer than two open cells (seed %d)", generator.name, seed)
                unreachable += 1
                continue
            result = pathfinder.find_path(grid, *endpoints)
            records.append(
                {
                    "generator": generator_slug,
                    "search": search_slug,
                    "seed": seed,
                    **result.to_dict(),
                }
            )
            if result.reached:
                steps.append(result.steps)
                distances.append(result.distance)
            else:
                unreachable += 1

        mean_steps = sum(steps) / len(steps) if steps else 0.0
        mean_distance = sum(distances) / len(distances) if distances else 0.0
        print(
            f"[{index}/{len(pairs)}] {generator.name} + {pathfinder.name}: "
            f"steps={mean_steps:.1f} distance={mean_distance:.1f} unreachable={unreachable}"
        )

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(records, indent=2), encoding="utf-8")
        print(f"Wrote {len(records)} runs to {args.output}")


if __name__ == "__main__":
    main()
