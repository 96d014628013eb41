"""
Configuration and logging helpers for gridmaze.

This module provides:
- Default grid dimensions and algorithm constants
- Logging setup for the command line tools
- Grid presets and per-run options

Library modules only ask for loggers through get_logger(); handlers are
installed by setup_logging(), which the CLI and scripts call once at start-up.
"""

from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from .errors import InvalidDimensions

# ============================================================================
# CONFIGURATION CONSTANTS
# ============================================================================

DEFAULT_WIDTH = 15  # cells along x
DEFAULT_HEIGHT = 15  # cells along y

WALL_PROBABILITY = 0.40  # random walls fill rate
MIN_SPAN = 3  # recursive division stops below this chamber span

LOGGER_NAME = "gridmaze"
LOG_FORMAT = "[%(asctime)s] - [%(name)s] - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the root logger for command line use.

    Args:
        level: Logging level name or number
        log_file: Optional path of a file that receives a copy of every record

    Returns:
        logging.Logger: the package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        logging.Logger instance
    """
    return logging.getLogger(name or LOGGER_NAME)


# ============================================================================
# GRID AND RUN SETTINGS
# ============================================================================

@dataclass
class GridSettings:
    """Grid dimensions plus the cosmetic layout values a renderer may use."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell_size: float = 1.0
    gap: float = 0.0

    def validate(self) -> "GridSettings":
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensions(f"Grid {label} must be a positive integer, got {value!r}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
            "gap": self.gap,
        }


PRESETS: Dict[str, GridSettings] = {
    "small": GridSettings(width=15, height=15, cell_size=1.0, gap=0.1),
    "medium": GridSettings(width=31, height=31, cell_size=0.5, gap=0.05),
    "large": GridSettings(width=61, height=41, cell_size=0.25, gap=0.02),
}


StepCallback = Callable[[int, Any], None]
CompleteCallback = Callable[[Any], None]


@dataclass
class RunOptions:
    """Per-run pacing, progress and cancellation hooks.

    ``delay`` is the pause in seconds between two steps, ``on_step`` receives the
    running step number and the cell touched by that step, ``on_complete``
    receives the finished run and ``cancel`` is polled between steps.
    """

    delay: float = 0.0
    on_step: Optional[StepCallback] = None
    on_complete: Optional[CompleteCallback] = None
    cancel: Optional[threading.Event] = None

    def __post_init__(self) -> None:
        if self.delay < 0:
            raise ValueError("delay must not be negative")


__all__ = [
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "WALL_PROBABILITY",
    "MIN_SPAN",
    "LOGGER_NAME",
    "GridSettings",
    "PRESETS",
    "RunOptions",
    "setup_logging",
    "get_logger",
]
