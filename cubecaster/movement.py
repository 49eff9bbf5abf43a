"""Keyboard-driven movement and turning of the player."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .collision import check_collision
from .constants import SPRINT_SPEED
from .player import Player


@dataclass
class Keys:
    """Which movement keys are currently held."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False
    shift: bool = False


def calculate_movement(player: Player, keys: Keys) -> tuple[float, float]:
    """The displacement the held keys ask for this frame."""
    speed = SPRINT_SPEED if keys.shift else player.move_speed
    dx, dy = player.dir.x, player.dir.y
    move_x = move_y = 0.0
    if keys.w:
        move_x += dx * speed
        move_y += dy * speed
    if keys.s:
        move_x -= dx * speed
        move_y -= dy * speed
    if keys.a:
        move_x += dy * speed
        move_y -= dx * speed
    if keys.d:
        move_x -= dy * speed
        move_y += dx * speed
    return move_x, move_y


def process_movement(player: Player, keys: Keys, grid: Sequence[str]) -> None:
    """Move the player, sliding along walls one axis at a time."""
    move_x, move_y = calculate_movement(player, keys)
    new_x = player.pos.x + move_x
    new_y = player.pos.y + move_y
    if not check_collision(grid, new_x, player.pos.y):
        player.pos.x = new_x
    if not check_collision(grid, player.pos.x, new_y):
        player.pos.y = new_y


def _rotate(x: float, y: float, angle: float) -> tuple[float, float]:
    c, s = math.cos(angle), math.sin(angle)
    return x * c - y * s, x * s + y * c


def process_rotation(player: Player, keys: Keys) -> None:
    """Turn the player's direction and camera plane; left wins over right."""
    if keys.left:
        angle = -player.rot_speed
    elif keys.right:
        angle = player.rot_speed
    else:
        return
    player.dir.x, player.dir.y = _rotate(player.dir.x, player.dir.y, angle)
    player.plane.x, player.plane.y = _rotate(player.plane.x, player.plane.y, angle)