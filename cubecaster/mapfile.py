"""Reading ``.cub`` scene description files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .colors import validate_color
from .constants import COLOR_BLACK, COLOR_WHITE
from .utils import CubError

_MAP_LINE_STARTS = frozenset("10 ")

_TEXTURE_PREFIXES = (
    ("NO ", "north_texture"),
    ("SO ", "south_texture"),
    ("WE ", "west_texture"),
    ("EA ", "east_texture"),
)

_COLOR_PREFIXES = (
    ("F ", "floor_color"),
    ("C ", "ceiling_color"),
)


class MapFileError(CubError):
    """Raised when a map file cannot be read or holds no map."""


@dataclass
class MapConfig:
    """Everything a ``.cub`` file describes: the grid, wall textures and colours."""

    grid: list[str] = field(default_factory=list)
    north_texture: str | None = None
    south_texture: str | None = None
    west_texture: str | None = None
    east_texture: str | None = None
    floor_color: int = COLOR_BLACK
    ceiling_color: int = COLOR_WHITE

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        """Length of the first map row."""
        return len(self.grid[0]) if self.grid else 0


def trim_spaces(text: str) -> str:
    """Drop leading blanks and trailing blanks/newlines, always keeping the first kept character."""
    rest = text.lstrip(" \t")
    if not rest:
        return ""
    return rest[0] + rest[1:].rstrip(" \t\n")


def trim_newline(text: str) -> str:
    """Remove a single trailing newline, if any."""
    return text[:-1] if text.endswith("\n") else text


def is_map_line(line: str) -> bool:
    """True when *line* starts with a character that opens a map row."""
    return bool(line) and line[0] in _MAP_LINE_STARTS


def _read_lines(path: str | PathLike[str]) -> Iterator[str]:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapFileError(f"cannot read map file {path}: {exc.strerror or exc}") from exc
    parts = data.decode("utf-8", errors="replace").split("\n")
    for part in parts[:-1]:
        yield part + "\n"
    if parts[-1]:
        yield parts[-1]


def count_map_lines(path: str | PathLike[str]) -> int:
    """Number of lines in the file at *path* that look like map rows."""
    return sum(1 for line in _read_lines(path) if is_map_line(line))


def parse_texture_line(line: str, config: MapConfig) -> bool:
    """Apply a texture or colour identifier line to *config*; False if unrecognised."""
    for prefix, attribute in _TEXTURE_PREFIXES:
        if line.startswith(prefix):
            setattr(config, attribute, trim_spaces(line[len(prefix):]))
            return True
    for prefix, attribute in _COLOR_PREFIXES:
        if line.startswith(prefix):
            setattr(config, attribute, validate_color(trim_spaces(line[len(prefix):])))
            return True
    return False


def parse_map_lines(lines: Iterable[str]) -> MapConfig:
    """Build a :class:`MapConfig` from the raw lines of a ``.cub`` file."""
    config = MapConfig()
    map_started = False
    for line in lines:
        if is_map_line(line):
            map_started = True
            config.grid.append(trim_newline(line))
        elif not map_started:
            parse_texture_line(line, config)
    if not config.grid:
        raise MapFileError("map file holds no map lines")
    return config


def parse_map_file(path: str | PathLike[str]) -> MapConfig:
    """Read and parse the ``.cub`` file at *path*."""
    return parse_map_lines(_read_lines(path))