"""Everything the renderer needs for one frame: map, player, textures, doors and the frame."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field

from .constants import WINDOW_HEIGHT, WINDOW_WIDTH
from .doors import DoorSystem
from .framebuffer import FrameBuffer
from .mapfile import MapConfig
from .player import Player
from .textures import Texture


def _default_frame() -> FrameBuffer:
    return FrameBuffer(WINDOW_WIDTH, WINDOW_HEIGHT)


@dataclass
class Scene:
    """The world state drawn each frame."""

    config: MapConfig
    player: Player
    textures: Sequence[Texture]
    door_texture: Texture
    doors: DoorSystem | None = None
    frame: FrameBuffer = field(default_factory=_default_frame)

    @property
    def grid(self) -> MutableSequence[str]:
        return self.config.grid

    @property
    def width(self) -> int:
        return self.frame.width

    @property
    def height(self) -> int:
        return self.frame.height

    @property
    def floor_color(self) -> int:
        return self.config.floor_color

    @property
    def ceiling_color(self) -> int:
        return self.config.ceiling_color

    def in_bounds(self, x: int, y: int) -> bool:
        """True when map cell (*x*, *y*) exists."""
        grid = self.grid
        return 0 <= y < len(grid) and 0 <= x < len(grid[y])

    def cell(self, x: int, y: int) -> str | None:
        """The character at map cell (*x*, *y*), or None outside the map."""
        return self.grid[y][x] if self.in_bounds(x, y) else None