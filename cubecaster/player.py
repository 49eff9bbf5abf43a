"""The player: position, facing and camera plane, and spawning from the map."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field

from .constants import MAP_SCALE, MOVE_SPEED, ROT_SPEED, SPAWN_CHARS
from .validation import MapValidationError


@dataclass
class Vector:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0


_FACINGS = {
    "N": ((0.0, -1.0), (0.66, 0.0)),
    "S": ((0.0, 1.0), (-0.66, 0.0)),
    "E": ((1.0, 0.0), (0.0, 0.66)),
    "W": ((-1.0, 0.0), (0.0, -0.66)),
}


@dataclass
class Player:
    """Player state in world units (one map cell is ``MAP_SCALE`` units wide)."""

    pos: Vector = field(default_factory=Vector)
    dir: Vector = field(default_factory=Vector)
    plane: Vector = field(default_factory=Vector)
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED

    def face(self, spawn: str) -> None:
        """Point the player along the compass direction *spawn*; other values are ignored."""
        facing = _FACINGS.get(spawn)
        if facing is None:
            return
        (dx, dy), (px, py) = facing
        self.dir = Vector(dx, dy)
        self.plane = Vector(px, py)


def find_player_spawn(grid: Sequence[str]) -> tuple[int, int, str] | None:
    """Column, row and marker of the first spawn in *grid*, or None."""
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c in SPAWN_CHARS:
                return x, y, c
    return None


def spawn_player(grid: MutableSequence[str]) -> Player:
    """Create the player at the spawn marker and turn that cell into floor."""
    found = find_player_spawn(grid)
    if found is None:
        raise MapValidationError("No player spawn found")
    x, y, marker = found
    player = Player(
        pos=Vector(float(x * MAP_SCALE + MAP_SCALE // 2), float(y * MAP_SCALE + MAP_SCALE // 2))
    )
    player.face(marker)
    row = grid[y]
    grid[y] = row[:x] + "0" + row[x + 1:]
    return player