"""Sliding doors: per-cell open/close targets and their animation over time."""

from __future__ import annotations

import time
from collections.abc import Callable, MutableSequence

from .constants import (
    DOOR_CLOSE_DELAY,
    DOOR_DT_CAP,
    DOOR_SPEED_CLOSE,
    DOOR_SPEED_OPEN,
    MAP_SCALE,
)
from .player import Player


def now_seconds() -> float:
    """Wall-clock time in seconds."""
    return time.time()


def _player_cell(player: Player) -> tuple[int, int]:
    return int(player.pos.x / MAP_SCALE), int(player.pos.y / MAP_SCALE)


class DoorSystem:
    """Tracks every door cell of a map grid and animates it, rewriting the grid.

    A closed door is ``'D'`` in the grid and an open one ``'O'``.
    """

    def __init__(
        self, grid: MutableSequence[str], clock: Callable[[], float] = now_seconds
    ) -> None:
        self.grid = grid
        self._clock = clock
        self._mask = [[c in ("D", "O") for c in row] for row in grid]
        self._prog = [[1.0 if c == "O" else 0.0 for c in row] for row in grid]
        self._target = [[c == "O" for c in row] for row in grid]
        self.last_ts = clock()
        self.last_interact = 0.0

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])

    def _set_cell(self, x: int, y: int, ch: str) -> None:
        row = self.grid[y]
        self.grid[y] = row[:x] + ch + row[x + 1:]

    def is_door(self, x: int, y: int) -> bool:
        """True when cell (*x*, *y*) started out as a door."""
        return self._inside(x, y) and self._mask[y][x]

    def progress(self, x: int, y: int) -> float:
        """How far open the door at (*x*, *y*) is, from 0.0 to 1.0."""
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) outside the map")
        return self._prog[y][x]

    def set_target(self, x: int, y: int, opening: bool) -> None:
        """Make the door at (*x*, *y*) move towards open or closed; other cells are ignored."""
        if not self._inside(x, y) or not self._mask[y][x]:
            return
        self._target[y][x] = bool(opening)

    def try_toggle(self, player: Player) -> None:
        """Open or close the door in the cell the player is facing."""
        mx = int(player.pos.x / MAP_SCALE + player.dir.x)
        my = int(player.pos.y / MAP_SCALE + player.dir.y)
        if not self._inside(mx, my):
            return
        cell = self.grid[my][mx]
        if cell == "D":
            self.set_target(mx, my, True)
        elif cell == "O":
            self.set_target(mx, my, False)
        self.last_interact = self._clock()

    def update_auto_close_targets(self, player: Player) -> None:
        """Aim every fully open door the player is not standing in at closed."""
        px, py = _player_cell(player)
        for y, row in enumerate(self._mask):
            for x, is_door in enumerate(row[: len(self.grid[y])]):
                if is_door and (x, y) != (px, py) and self._prog[y][x] >= 1.0:
                    self._target[y][x] = False

    def update_cell(self, x: int, y: int, dt: float) -> None:
        """Advance the door at (*x*, *y*) towards its target by *dt* seconds."""
        p = self._prog[y][x]
        opening = self._target[y][x]
        speed = DOOR_SPEED_OPEN if opening else DOOR_SPEED_CLOSE
        if opening and p < 1.0:
            p += speed * dt
        elif not opening and p > 0.0:
            p -= speed * dt
        p = min(max(p, 0.0), 1.0)
        self._prog[y][x] = p
        if p >= 1.0:
            self._set_cell(x, y, "O")
        elif p <= 0.0:
            self._set_cell(x, y, "D")

    def process_cell(self, x: int, y: int, dt: float, player: Player) -> None:
        """Open a door the player stands in at once, otherwise animate a door that is not open."""
        if not self._mask[y][x]:
            return
        if _player_cell(player) == (x, y):
            self._target[y][x] = True
            self._prog[y][x] = 1.0
            self._set_cell(x, y, "O")
            return
        if self.grid[y][x] != "O":
            self.update_cell(x, y, dt)

    def update(self, player: Player) -> None:
        """Advance every door by the time since the previous update, capped per frame."""
        now = self._clock()
        dt = min(now - self.last_ts, DOOR_DT_CAP)
        self.last_ts = now
        if now - self.last_interact > DOOR_CLOSE_DELAY:
            self.update_auto_close_targets(player)
        for y in range(len(self.grid)):
            for x in range(len(self.grid[y])):
                self.process_cell(x, y, dt, player)