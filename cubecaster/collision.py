"""Collision tests between world positions and map cells."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import COLLISION_MARGIN, MAP_SCALE

_BLOCKING = frozenset("1D")


def _cell(grid: Sequence[str], map_x: int, map_y: int) -> str | None:
    if 0 <= map_y < len(grid) and 0 <= map_x < len(grid[map_y]):
        return grid[map_y][map_x]
    return None


def check_single_point(grid: Sequence[str], map_x: int, map_y: int) -> bool:
    """True when cell (*map_x*, *map_y*) is a wall, a closed door or off the map."""
    cell = _cell(grid, map_x, map_y)
    return cell is None or cell in _BLOCKING


def check_collision(grid: Sequence[str], x: float, y: float) -> bool:
    """True when a small square around world point (*x*, *y*) touches a blocking cell."""
    m = COLLISION_MARGIN
    corners = ((x + m, y + m), (x - m, y - m), (x + m, y - m), (x - m, y + m))
    return any(
        check_single_point(grid, int(cx / MAP_SCALE), int(cy / MAP_SCALE))
        for cx, cy in corners
    )


def touch(grid: Sequence[str], ray_x: float, ray_y: float) -> bool:
    """True when world point (*ray_x*, *ray_y*) lies in a wall or off the map."""
    cell = _cell(grid, int(ray_x / MAP_SCALE), int(ray_y / MAP_SCALE))
    return cell is None or cell == "1"