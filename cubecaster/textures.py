"""Wall and door textures: loading images and sampling their colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from PIL import Image

from .constants import DOOR_TEXTURE_PATH
from .mapfile import MapConfig
from .utils import CubError

TRANSPARENT = -1
"""Colour stored for fully transparent texels; negative so it reads as see-through."""


class TextureError(CubError):
    """Raised when a texture is missing or cannot be loaded."""


@dataclass
class Texture:
    """A width x height image of ``0xRRGGBB`` colours stored row by row."""

    width: int
    height: int
    pixels: list[int]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def color_at(self, x: int, y: int) -> int:
        """Colour of texel (*x*, *y*); 0 for coordinates outside the texture."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return self.pixels[y * self.width + x]


def _texture_from_image(image: Image.Image) -> Texture:
    rgba = image.convert("RGBA")
    data = rgba.tobytes()
    pixels = [
        TRANSPARENT if a == 0 else (r << 16) | (g << 8) | b
        for r, g, b, a in zip(data[0::4], data[1::4], data[2::4], data[3::4])
    ]
    width, height = rgba.size
    return Texture(width, height, pixels)


def load_texture(path: str | PathLike[str] | None) -> Texture:
    """Load the image at *path* as a :class:`Texture`."""
    if path is None:
        raise TextureError("Missing texture path")
    try:
        with Image.open(path) as image:
            image.load()
            return _texture_from_image(image)
    except (OSError, ValueError, SyntaxError) as exc:
        raise TextureError(f"cannot load texture {path}: {exc}") from exc


def load_textures(
    config: MapConfig, door_path: str | PathLike[str] = DOOR_TEXTURE_PATH
) -> tuple[list[Texture], Texture]:
    """Load the north, south, west and east wall textures, then the door texture."""
    paths: Sequence[str | None] = (
        config.north_texture,
        config.south_texture,
        config.west_texture,
        config.east_texture,
    )
    if any(path is None for path in paths):
        raise TextureError("Missing texture path")
    walls = [load_texture(path) for path in paths]
    return walls, load_texture(door_path)