"""Textured wall rendering: one ray per screen column, with see-through door texels."""

from __future__ import annotations

import copy

from .raycast import Ray
from .scene import Scene
from .textures import Texture

_HALF_INTENSITY_MASK = 0x7F7F7F
_TRANSPARENT_SAMPLE = -1


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def shade(color: int, side: int) -> int:
    """Halve the brightness of *color* for faces hit on a horizontal grid line."""
    if side == 1:
        return (color >> 1) & _HALF_INTENSITY_MASK
    return color


def compute_tex_y(ray: Ray, texture: Texture, y: int, screen_height: int) -> int:
    """Texture row for screen row *y* of the ray's wall slice, clamped to the texture."""
    if ray.line_height <= 0:
        return 0
    d = y * 256 - screen_height * 128 + ray.line_height * 128
    tex_y = _tdiv(_tdiv(d * texture.height, ray.line_height), 256)
    if tex_y >= texture.height:
        tex_y = texture.height - 1
    return max(tex_y, 0)


def wall_texture_for(scene: Scene, ray: Ray) -> Texture:
    """The texture of the face the ray hit; the door texture for a closed door."""
    if scene.cell(ray.map_x, ray.map_y) == "D":
        return scene.door_texture
    return scene.textures[ray.texture_index()]


def _sample_door(scene: Scene, ray: Ray, texture: Texture, tex_y: int) -> int:
    if scene.doors is None:
        return texture.color_at(ray.tex_x, tex_y)
    offset = int(scene.doors.progress(ray.map_x, ray.map_y) * texture.width)
    forward = ray.dir.x > 0 if ray.side == 0 else ray.dir.y > 0
    tex_x = ray.tex_x + offset if forward else ray.tex_x - offset
    if not 0 <= tex_x < texture.width:
        return _TRANSPARENT_SAMPLE
    return texture.color_at(tex_x, tex_y)


def sample_wall_color(scene: Scene, ray: Ray, texture: Texture, tex_y: int) -> int:
    """Colour of the wall texel; negative where a sliding door leaves a gap."""
    if texture is scene.door_texture:
        return _sample_door(scene, ray, texture, tex_y)
    return texture.color_at(ray.tex_x, tex_y)


def advance_to_next_wall(scene: Scene, ray: Ray) -> None:
    """Continue the ray's traversal until it reaches a solid wall or leaves the map."""
    while True:
        if ray.side_dist.x < ray.side_dist.y:
            ray.side_dist.x += ray.delta_dist.x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist.y += ray.delta_dist.y
            ray.map_y += ray.step_y
            ray.side = 1
        cell = scene.cell(ray.map_x, ray.map_y)
        if cell is None or cell == "1":
            return


def background_color(scene: Scene, ray: Ray, y: int) -> int:
    """Colour seen at screen row *y* behind the surface *ray* hit."""
    behind = copy.deepcopy(ray)
    advance_to_next_wall(scene, behind)
    behind.calculate_perp_wall_dist(scene.player)
    behind.calculate_line_height(scene.height)
    if y < behind.draw_start:
        return scene.ceiling_color
    if y > behind.draw_end:
        return scene.floor_color
    texture = scene.textures[behind.texture_index()]
    behind.calculate_texture_x(scene.player, texture.width)
    step = texture.height / behind.line_height if behind.line_height else 0.0
    tex_y = int((y - behind.draw_start) * step) & (texture.height - 1)
    return shade(texture.color_at(behind.tex_x, tex_y), behind.side)


def draw_wall_slice(scene: Scene, ray: Ray, x: int) -> None:
    """Draw screen column *x*: ceiling, the textured wall slice, then floor."""
    frame = scene.frame
    texture = wall_texture_for(scene, ray)
    for y in range(scene.height):
        if y < ray.draw_start:
            frame.put_pixel(x, y, scene.ceiling_color)
        elif y <= ray.draw_end:
            tex_y = compute_tex_y(ray, texture, y, scene.height)
            color = sample_wall_color(scene, ray, texture, tex_y)
            if color < 0:
                frame.put_pixel(x, y, background_color(scene, ray, y))
            else:
                frame.put_pixel(x, y, shade(color, ray.side))
        else:
            frame.put_pixel(x, y, scene.floor_color)


def cast_column(scene: Scene, x: int) -> Ray:
    """Cast and draw the ray for screen column *x*; returns the ray used."""
    player = scene.player
    ray = Ray.from_camera(player, x, scene.width)
    ray.compute_step(player)
    ray.perform_dda(scene.grid)
    ray.calculate_perp_wall_dist(player)
    ray.calculate_line_height(scene.height)
    texture = wall_texture_for(scene, ray)
    ray.calculate_texture_x(player, texture.width)
    draw_wall_slice(scene, ray, x)
    return ray


def render_3d_view(scene: Scene) -> None:
    """Draw the first-person view into the scene's frame, one column at a time."""
    for x in range(scene.width):
        cast_column(scene, x)