"""A single camera ray and the grid traversal (DDA) that finds the wall it hits."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .constants import MAP_SCALE
from .player import Player, Vector

_BLOCKING = ("1", "D")
_MIN_DIST = 1e-6
_FAR = 1e30


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _ieee_div(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0:
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass
class Ray:
    """One screen column's ray, in map-cell units."""

    dir: Vector = field(default_factory=Vector)
    delta_dist: Vector = field(default_factory=Vector)
    side_dist: Vector = field(default_factory=Vector)
    step_x: int = 0
    step_y: int = 0
    map_x: int = 0
    map_y: int = 0
    perp_wall_dist: float = 0.0
    hit: bool = False
    side: int = 0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0
    tex_x: int = 0

    @classmethod
    def from_camera(cls, player: Player, x: int, screen_width: int) -> Ray:
        """The ray through screen column *x* of a *screen_width*-wide view."""
        camera_x = 2 * x / float(screen_width) - 1
        direction = Vector(
            player.dir.x + player.plane.x * camera_x,
            player.dir.y + player.plane.y * camera_x,
        )
        delta = Vector(
            _FAR if direction.x == 0 else abs(1 / direction.x),
            _FAR if direction.y == 0 else abs(1 / direction.y),
        )
        return cls(
            dir=direction,
            delta_dist=delta,
            map_x=_tdiv(int(player.pos.x), MAP_SCALE),
            map_y=_tdiv(int(player.pos.y), MAP_SCALE),
        )

    def compute_step(self, player: Player) -> None:
        """Set the step direction and the distance to the first cell boundary on each axis."""
        px = player.pos.x / MAP_SCALE
        py = player.pos.y / MAP_SCALE
        if self.dir.x < 0:
            self.step_x = -1
            self.side_dist.x = (px - self.map_x) * self.delta_dist.x
        else:
            self.step_x = 1
            self.side_dist.x = (self.map_x + 1.0 - px) * self.delta_dist.x
        if self.dir.y < 0:
            self.step_y = -1
            self.side_dist.y = (py - self.map_y) * self.delta_dist.y
        else:
            self.step_y = 1
            self.side_dist.y = (self.map_y + 1.0 - py) * self.delta_dist.y

    def perform_dda(self, grid: Sequence[str]) -> None:
        """Step cell by cell until a wall, a closed door or the map edge is reached."""
        while not self.hit:
            if self.side_dist.x < self.side_dist.y:
                self.side_dist.x += self.delta_dist.x
                self.map_x += self.step_x
                self.side = 0
            else:
                self.side_dist.y += self.delta_dist.y
                self.map_y += self.step_y
                self.side = 1
            if not (0 <= self.map_y < len(grid) and 0 <= self.map_x < len(grid[self.map_y])):
                self.hit = True
            elif grid[self.map_y][self.map_x] in _BLOCKING:
                self.hit = True

    def _raw_distance(self, player: Player) -> tuple[float, float]:
        if self.side == 0:
            return (
                self.map_x - player.pos.x / MAP_SCALE + (1 - self.step_x) / 2,
                self.dir.x,
            )
        return (
            self.map_y - player.pos.y / MAP_SCALE + (1 - self.step_y) / 2,
            self.dir.y,
        )

    def calculate_wall_distance(self, player: Player) -> None:
        """Perpendicular distance to the hit wall, without any guarding."""
        numerator, denominator = self._raw_distance(player)
        self.perp_wall_dist = _ieee_div(numerator, denominator)

    def calculate_perp_wall_dist(self, player: Player) -> None:
        """Perpendicular distance to the hit wall, kept finite and positive."""
        numerator, denominator = self._raw_distance(player)
        if denominator == 0:
            denominator = _MIN_DIST
        self.perp_wall_dist = max(numerator / denominator, _MIN_DIST)

    def calculate_line_height(self, screen_height: int) -> None:
        """Height of the wall slice on screen and the rows it spans."""
        if self.perp_wall_dist < _MIN_DIST:
            self.perp_wall_dist = _MIN_DIST
        self.line_height = int(screen_height / self.perp_wall_dist)
        half_screen = _tdiv(screen_height, 2)
        self.draw_start = max(_tdiv(-self.line_height, 2) + half_screen, 0)
        self.draw_end = min(_tdiv(self.line_height, 2) + half_screen, screen_height - 1)

    def texture_index(self) -> int:
        """Index of the wall texture for the face that was hit (0 to 3)."""
        if self.side == 0:
            return 0 if self.dir.x > 0 else 1
        return 2 if self.dir.y > 0 else 3

    def calculate_texture_x(self, player: Player, texture_width: int) -> int:
        """Texture column where the ray meets the wall; stored in ``tex_x`` and returned."""
        if self.side == 0:
            wall_x = player.pos.y / MAP_SCALE + self.perp_wall_dist * self.dir.y
        else:
            wall_x = player.pos.x / MAP_SCALE + self.perp_wall_dist * self.dir.x
        wall_x -= math.floor(wall_x)
        tex_x = int(wall_x * float(texture_width))
        if (self.side == 0 and self.dir.x > 0) or (self.side == 1 and self.dir.y < 0):
            tex_x = texture_width - tex_x - 1
        self.tex_x = tex_x
        return tex_x