"""The round minimap drawn in the bottom-right corner of the frame."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import (
    MAP_SCALE,
    MINIMAP_BG,
    MINIMAP_BORDER,
    MINIMAP_DIRECTION,
    MINIMAP_FLOOR,
    MINIMAP_MARGIN,
    MINIMAP_PLAYER_DOT,
    MINIMAP_RADIUS,
    MINIMAP_WALL,
)
from .framebuffer import FrameBuffer
from .player import Player
from .utils import is_in_minimap_circle

_WORLD_STEP = 4
_BORDER_WIDTH = 3
_PADDING = 5
_INNER_RADIUS = MINIMAP_RADIUS - 2


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def minimap_center(width: int, height: int) -> tuple[int, int]:
    """Screen position of the minimap's centre for a frame of the given size."""
    return (
        width - MINIMAP_RADIUS - MINIMAP_MARGIN,
        height - MINIMAP_RADIUS - MINIMAP_MARGIN,
    )


def draw_background_and_border(frame: FrameBuffer) -> None:
    """Fill the minimap disc and draw its ring-shaped border."""
    cx, cy = minimap_center(frame.width, frame.height)
    extent = MINIMAP_RADIUS + _PADDING
    for y in range(cy - extent, cy + extent + 1):
        for x in range(cx - extent, cx + extent + 1):
            dx, dy = x - cx, y - cy
            if not is_in_minimap_circle(dx, dy, MINIMAP_RADIUS + _BORDER_WIDTH):
                continue
            if is_in_minimap_circle(dx, dy, MINIMAP_RADIUS):
                frame.put_pixel(x, y, MINIMAP_BG)
            else:
                frame.put_pixel(x, y, MINIMAP_BORDER)


def _draw_cell(frame: FrameBuffer, grid: Sequence[str], player: Player,
               world_x: int, world_y: int, cx: int, cy: int) -> None:
    screen_x = cx + _tdiv(int(player.pos.x) - world_x, _WORLD_STEP)
    screen_y = cy + _tdiv(int(player.pos.y) - world_y, _WORLD_STEP)
    if not is_in_minimap_circle(screen_x - cx, screen_y - cy, _INNER_RADIUS):
        return
    map_x = _tdiv(world_x, MAP_SCALE)
    map_y = _tdiv(world_y, MAP_SCALE)
    if not (0 <= map_y < len(grid) and 0 <= map_x < len(grid[map_y])):
        return
    cell = grid[map_y][map_x]
    if cell == "1":
        frame.put_pixel(screen_x, screen_y, MINIMAP_WALL)
    elif cell == "0":
        frame.put_pixel(screen_x, screen_y, MINIMAP_FLOOR)


def draw_world_cells(frame: FrameBuffer, grid: Sequence[str], player: Player) -> None:
    """Plot walls and floor around the player, sampling the world every few units."""
    cx, cy = minimap_center(frame.width, frame.height)
    px, py = int(player.pos.x), int(player.pos.y)
    reach = MINIMAP_RADIUS * _WORLD_STEP
    for world_y in range(py - reach, py + reach, _WORLD_STEP):
        for world_x in range(px - reach, px + reach, _WORLD_STEP):
            _draw_cell(frame, grid, player, world_x, world_y, cx, cy)


def draw_player(frame: FrameBuffer, player: Player) -> None:
    """Draw a small cross at the centre and a line showing the player's facing."""
    cx, cy = minimap_center(frame.width, frame.height)
    for i in range(-3, 4):
        if is_in_minimap_circle(i, 0, _INNER_RADIUS):
            frame.put_pixel(cx + i, cy, MINIMAP_PLAYER_DOT)
        if is_in_minimap_circle(0, i, _INNER_RADIUS):
            frame.put_pixel(cx, cy + i, MINIMAP_PLAYER_DOT)
    for i in range(4, 16):
        ox = -int(player.dir.x * i)
        oy = -int(player.dir.y * i)
        if is_in_minimap_circle(ox, oy, _INNER_RADIUS):
            frame.put_pixel(cx + ox, cy + oy, MINIMAP_DIRECTION)


def draw_minimap(frame: FrameBuffer, grid: Sequence[str], player: Player) -> None:
    """Draw the whole minimap: background, world cells, then the player marker."""
    draw_background_and_border(frame)
    draw_world_cells(frame, grid, player)
    draw_player(frame, player)