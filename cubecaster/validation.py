"""Checks that a parsed scene is playable: map contents, closure and textures."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .constants import SPAWN_CHARS
from .mapfile import MapConfig
from .utils import CubError

_VALID_MAP_CHARS = frozenset("01NSEW DO")
_WALKABLE = frozenset("0NSEW")


class MapValidationError(CubError):
    """Raised when a map or its texture references are not usable."""


def is_valid_map_char(c: str) -> bool:
    """True for the characters a map row may hold."""
    return c in _VALID_MAP_CHARS and len(c) == 1


def check_map_characters(grid: Sequence[str]) -> bool:
    """True when every cell of *grid* holds a valid map character."""
    return all(is_valid_map_char(c) for row in grid for c in row)


def count_player_spawns(grid: Sequence[str]) -> int:
    """Number of spawn markers (N, S, E, W) in *grid*."""
    return sum(c in SPAWN_CHARS for row in grid for c in row)


def check_border_position(grid: Sequence[str], i: int, j: int) -> bool:
    """False when cell (row *i*, column *j*) lies on the edge of the map."""
    return not (
        i == 0
        or i == len(grid) - 1
        or j == 0
        or j == len(grid[i]) - 1
    )


def _char_at(row: str, j: int) -> str:
    # Cells past the end of a shorter row read as the end of that row, not as blank.
    return row[j] if 0 <= j < len(row) else ""


def check_adjacent_spaces(grid: Sequence[str], i: int, j: int) -> bool:
    """False when any of the four neighbours of (row *i*, column *j*) is a blank."""
    neighbours = (
        _char_at(grid[i - 1], j),
        _char_at(grid[i + 1], j),
        _char_at(grid[i], j - 1),
        _char_at(grid[i], j + 1),
    )
    return " " not in neighbours


def check_map_closed(grid: Sequence[str]) -> bool:
    """True when every walkable cell is away from the edge and not next to a blank."""
    for i, row in enumerate(grid):
        for j, c in enumerate(row):
            if c not in _WALKABLE:
                continue
            if not check_border_position(grid, i, j):
                return False
            if not check_adjacent_spaces(grid, i, j):
                return False
    return True


def validate_map(grid: Sequence[str]) -> None:
    """Raise :class:`MapValidationError` unless *grid* is a playable map."""
    if not check_map_characters(grid):
        raise MapValidationError("Invalid character in map")
    if count_player_spawns(grid) != 1:
        raise MapValidationError("Map must have exactly one player spawn")
    if not check_map_closed(grid):
        raise MapValidationError("Map must be closed/surrounded by walls")


def _file_exists(path: str) -> bool:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def validate_textures(config: MapConfig) -> None:
    """Raise :class:`MapValidationError` unless all four wall textures can be opened."""
    for path in (
        config.north_texture,
        config.south_texture,
        config.west_texture,
        config.east_texture,
    ):
        if path is None:
            raise MapValidationError("Missing texture path")
        if not _file_exists(path):
            raise MapValidationError("Texture file does not exist")