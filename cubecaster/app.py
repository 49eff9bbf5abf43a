"""The window, the event loop and the command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from os import PathLike

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .constants import (  # noqa: E402
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
)
from .game import Game  # noqa: E402
from .mapfile import MapFileError, parse_map_file  # noqa: E402
from .textures import load_textures  # noqa: E402
from .utils import CubError, contains_cub, report_error  # noqa: E402
from .validation import validate_map, validate_textures  # noqa: E402

WINDOW_TITLE = "Cub3D"
FRAME_RATE = 60

_KEYMAP = {
    pygame.K_w: KEY_W,
    pygame.K_a: KEY_A,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_LSHIFT: KEY_SHIFT,
    pygame.K_f: KEY_F,
    pygame.K_e: KEY_E,
}


def translate_key(key: int) -> int | None:
    """The game key code for a pygame key, or None for keys the game ignores."""
    return _KEYMAP.get(key)


def load_game(path: str | PathLike[str]) -> Game:
    """Read, validate and load everything a ``.cub`` file names, ready to play."""
    if not contains_cub(os.fspath(path)):
        raise MapFileError("Map file must have a .cub extension")
    config = parse_map_file(path)
    validate_map(config.grid)
    validate_textures(config)
    walls, door = load_textures(config)
    return Game(config, walls, door)


def _blit(screen: pygame.Surface, game: Game) -> pygame.Surface:
    frame = game.frame
    size = (frame.width, frame.height)
    if screen.get_size() != size:
        screen = pygame.display.set_mode(size)
    image = pygame.image.frombuffer(frame.to_rgb_bytes(), size, "RGB")
    screen.blit(image, (0, 0))
    pygame.display.flip()
    return screen


def run(game: Game) -> int:
    """Open a window and play *game* until it is closed; returns the exit status."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.close()
                elif event.type == pygame.KEYDOWN:
                    code = translate_key(event.key)
                    if code is not None:
                        game.handle_key_press(code)
                elif event.type == pygame.KEYUP:
                    code = translate_key(event.key)
                    if code is not None:
                        game.handle_key_release(code)
            if not game.running:
                break
            game.tick()
            screen = _blit(screen, game)
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``cubecaster <map.cub>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return report_error("Error: Usage: cubecaster <map.cub>")
    try:
        game = load_game(args[0])
    except CubError as exc:
        return report_error(f"Error: {exc}")
    try:
        return run(game)
    except pygame.error as exc:
        return report_error(f"Error: {exc}")