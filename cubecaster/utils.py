"""Small helpers shared across the game."""

from __future__ import annotations

import math
import sys

EXIT_FAILURE = 1


class CubError(Exception):
    """Base class for every error the game reports."""


def contains_cub(filename: str) -> bool:
    """Return True when the text after the last dot of *filename* is ``.cub``."""
    dot = filename.rfind(".")
    if dot < 0:
        return False
    return filename[dot:] == ".cub"


def is_valid_char(c: str) -> bool:
    """Accept any single character; map contents are checked by the validator."""
    return len(c) == 1


def report_error(message: str) -> int:
    """Write *message* and a newline to standard error and return the failure status."""
    sys.stderr.write(f"{message}\n")
    sys.stderr.flush()
    return EXIT_FAILURE


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def is_in_minimap_circle(x: int, y: int, radius: int) -> bool:
    """True when the offset (x, y) lies within a circle of *radius*."""
    return x * x + y * y <= radius * radius