"""The game state and the per-frame update: input flags, movement, doors and drawing."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .constants import (
    COLOR_BLACK,
    FULLSCREEN_HEIGHT,
    FULLSCREEN_WIDTH,
    KEY_A,
    KEY_D,
    KEY_E,
    KEY_ESC,
    KEY_F,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_SHIFT,
    KEY_W,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .doors import DoorSystem, now_seconds
from .framebuffer import FrameBuffer
from .mapfile import MapConfig
from .minimap import draw_minimap
from .movement import Keys, process_movement, process_rotation
from .player import spawn_player
from .renderer import render_3d_view
from .scene import Scene
from .textures import Texture

_HELD_KEYS = {
    KEY_W: "w",
    KEY_A: "a",
    KEY_S: "s",
    KEY_D: "d",
    KEY_LEFT: "left",
    KEY_RIGHT: "right",
    KEY_SHIFT: "shift",
}


class Game:
    """A running game: the player spawned on the map, held keys, doors and the frame."""

    def __init__(
        self,
        config: MapConfig,
        textures: Sequence[Texture],
        door_texture: Texture,
        clock: Callable[[], float] = now_seconds,
    ) -> None:
        self.config = config
        self.player = spawn_player(config.grid)
        self.keys = Keys()
        self.doors = DoorSystem(config.grid, clock)
        self.fullscreen = False
        self.running = True
        self.scene = Scene(
            config=config,
            player=self.player,
            textures=list(textures),
            door_texture=door_texture,
            doors=self.doors,
            frame=FrameBuffer(WINDOW_WIDTH, WINDOW_HEIGHT),
        )

    @property
    def frame(self) -> FrameBuffer:
        """The frame the game draws into."""
        return self.scene.frame

    def handle_key_press(self, keycode: int) -> None:
        """React to a key going down."""
        if keycode == KEY_ESC:
            self.close()
            return
        attribute = _HELD_KEYS.get(keycode)
        if attribute is not None:
            setattr(self.keys, attribute, True)
        if keycode == KEY_F:
            self.toggle_fullscreen()
        if keycode == KEY_E:
            self.doors.try_toggle(self.player)

    def handle_key_release(self, keycode: int) -> None:
        """React to a key coming up."""
        attribute = _HELD_KEYS.get(keycode)
        if attribute is not None:
            setattr(self.keys, attribute, False)

    def toggle_fullscreen(self) -> None:
        """Switch the frame between the window size and the large size."""
        if self.fullscreen:
            width, height = WINDOW_WIDTH, WINDOW_HEIGHT
        else:
            width, height = FULLSCREEN_WIDTH, FULLSCREEN_HEIGHT
        self.scene.frame = FrameBuffer(width, height)
        self.fullscreen = not self.fullscreen

    def close(self) -> None:
        """Stop the game; the main loop ends on its next check."""
        self.running = False

    def tick(self) -> FrameBuffer:
        """Advance one frame and draw it; returns the finished frame."""
        process_movement(self.player, self.keys, self.config.grid)
        process_rotation(self.player, self.keys)
        self.doors.update(self.player)
        frame = self.scene.frame
        frame.clear(COLOR_BLACK)
        render_3d_view(self.scene)
        draw_minimap(frame, self.config.grid, self.player)
        return frame