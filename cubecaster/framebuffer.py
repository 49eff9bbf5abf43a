"""An in-memory RGB frame and the primitive drawing operations on it."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import COLOR_BLACK, COLOR_BLUE, COLOR_RED, COLOR_WHITE, MAP_SCALE, MINIMAP_WALL
from .player import Player

_DIRECTION_LINE_LENGTH = 20


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class FrameBuffer:
    """A width x height grid of ``0xRRGGBB`` colours; writes outside it are dropped."""

    def __init__(self, width: int, height: int, fill: int = COLOR_BLACK) -> None:
        self.width = width
        self.height = height
        self.pixels = [fill] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel, ignoring coordinates outside the frame."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour at (*x*, *y*); raises IndexError outside the frame."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return self.pixels[y * self.width + x]

    def clear(self, color: int) -> None:
        """Fill the whole frame with *color*."""
        self.pixels = [color & 0xFFFFFFFF] * (self.width * self.height)

    def draw_square(self, x: int, y: int, size: int, color: int) -> None:
        """Fill a *size* x *size* square whose top-left corner is (*x*, *y*)."""
        for row in range(y, y + size):
            for col in range(x, x + size):
                self.put_pixel(col, row, color)

    def draw_line(self, start_x: int, start_y: int, end_x: int, end_y: int) -> None:
        """Draw a blue line between two points; a zero-length line draws nothing."""
        dx = end_x - start_x
        dy = end_y - start_y
        steps = max(abs(dx), abs(dy))
        if steps == 0:
            return
        for i in range(steps + 1):
            self.put_pixel(
                start_x + _tdiv(dx * i, steps),
                start_y + _tdiv(dy * i, steps),
                COLOR_BLUE,
            )

    def draw_direction_line(self, player: Player, player_x: int, player_y: int) -> None:
        """Draw a short red line from (*player_x*, *player_y*) along the player's facing."""
        for i in range(_DIRECTION_LINE_LENGTH + 1):
            self.put_pixel(
                player_x + int(player.dir.x * i),
                player_y + int(player.dir.y * i),
                COLOR_RED,
            )

    def draw_map(self, grid: Sequence[str]) -> None:
        """Draw a top-down view of *grid*: walls white, floor dark grey."""
        for y, row in enumerate(grid):
            if y * MAP_SCALE >= self.height:
                break
            for x, cell in enumerate(row):
                if x * MAP_SCALE >= self.width:
                    break
                if cell == "1":
                    self.draw_square(x * MAP_SCALE, y * MAP_SCALE, MAP_SCALE, COLOR_WHITE)
                elif cell == "0":
                    self.draw_square(x * MAP_SCALE, y * MAP_SCALE, MAP_SCALE, MINIMAP_WALL)

    def to_rgb_bytes(self) -> bytes:
        """Row-major packed RGB bytes of the frame."""
        out = bytearray()
        for color in self.pixels:
            out += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        return bytes(out)