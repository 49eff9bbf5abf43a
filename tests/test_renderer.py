from cubecaster.doors import DoorSystem
from cubecaster.framebuffer import FrameBuffer
from cubecaster.mapfile import MapConfig
from cubecaster.player import spawn_player
from cubecaster.raycast import Ray
from cubecaster.renderer import (
    advance_to_next_wall,
    background_color,
    cast_column,
    compute_tex_y,
    render_3d_view,
    sample_wall_color,
    shade,
    wall_texture_for,
)
from cubecaster.scene import Scene
from cubecaster.textures import TRANSPARENT, Texture

WALL_COLORS = (0x112233, 0x445566, 0x778899, 0xAABBCC)
CEILING = 0x0000AA
FLOOR = 0x00AA00
WIDTH = 64
HEIGHT = 48

ROOM = ["11111", "10001", "10N01", "10001", "11111"]
DOOR_ROOM = ["11111", "10001", "10D01", "10N01", "11111"]


def solid(color, size=8):
    return Texture(size, size, [color] * (size * size))


def make_scene(rows, door_texture=None, with_doors=False):
    config = MapConfig(grid=list(rows), floor_color=FLOOR, ceiling_color=CEILING)
    player = spawn_player(config.grid)
    walls = [solid(c) for c in WALL_COLORS]
    door = door_texture if door_texture is not None else solid(0x123456)
    doors = DoorSystem(config.grid, clock=lambda: 0.0) if with_doors else None
    return Scene(config, player, walls, door, doors, FrameBuffer(WIDTH, HEIGHT))


def centre_ray(scene):
    ray = Ray.from_camera(scene.player, WIDTH // 2, WIDTH)
    ray.compute_step(scene.player)
    ray.perform_dda(scene.grid)
    return ray


def test_shade_halves_side_one():
    assert shade(0xFFFFFF, 1) == 0x7F7F7F
    assert shade(0x123456, 0) == 0x123456


def test_shade_keeps_channels_separate():
    for color in WALL_COLORS:
        shaded = shade(color, 1)
        for bits in (16, 8, 0):
            assert (shaded >> bits) & 0xFF == ((color >> bits) & 0xFF) >> 1


def test_compute_tex_y_is_clamped_and_monotonic():
    texture = solid(0, size=8)
    ray = Ray(line_height=HEIGHT)
    rows = [compute_tex_y(ray, texture, y, HEIGHT) for y in range(HEIGHT)]
    assert rows[0] == 0
    assert rows[-1] == texture.height - 1
    assert rows == sorted(rows)
    assert all(0 <= r < texture.height for r in rows)


def test_compute_tex_y_clamps_outside_slice():
    texture = solid(0, size=8)
    ray = Ray(line_height=10)
    assert compute_tex_y(ray, texture, 0, HEIGHT) == 0
    assert compute_tex_y(ray, texture, HEIGHT - 1, HEIGHT) == texture.height - 1


def test_wall_texture_for_plain_wall_and_door():
    scene = make_scene(DOOR_ROOM)
    ray = centre_ray(scene)
    assert scene.cell(ray.map_x, ray.map_y) == "D"
    assert wall_texture_for(scene, ray) is scene.door_texture
    room = make_scene(ROOM)
    wall_ray = centre_ray(room)
    assert wall_texture_for(room, wall_ray) is room.textures[wall_ray.texture_index()]


def test_sample_wall_color_plain_texture():
    scene = make_scene(ROOM)
    texture = Texture(2, 2, [1, 2, 3, 4])
    ray = Ray(tex_x=1)
    assert sample_wall_color(scene, ray, texture, 1) == texture.color_at(1, 1)


def test_sample_door_without_door_system_reads_texture():
    door = Texture(2, 2, [5, 6, 7, 8])
    scene = make_scene(DOOR_ROOM, door_texture=door)
    ray = Ray(tex_x=0, map_x=2, map_y=2)
    assert sample_wall_color(scene, ray, door, 1) == door.color_at(0, 1)


def test_closed_door_samples_unshifted():
    door = Texture(2, 2, [5, 6, 7, 8])
    scene = make_scene(DOOR_ROOM, door_texture=door, with_doors=True)
    ray = Ray(tex_x=1, map_x=2, map_y=2, side=0)
    ray.dir.x = 1.0
    assert sample_wall_color(scene, ray, door, 0) == door.color_at(1, 0)


def test_open_door_slides_out_of_view():
    rows = ["11111", "10001", "10O01", "10N01", "11111"]
    door = Texture(2, 2, [5, 6, 7, 8])
    scene = make_scene(rows, door_texture=door, with_doors=True)
    assert scene.doors.progress(2, 2) == 1.0
    ray = Ray(tex_x=0, map_x=2, map_y=2, side=0)
    ray.dir.x = 1.0
    assert sample_wall_color(scene, ray, door, 0) < 0


def test_advance_to_next_wall_passes_doors():
    scene = make_scene(DOOR_ROOM)
    ray = centre_ray(scene)
    advance_to_next_wall(scene, ray)
    assert scene.cell(ray.map_x, ray.map_y) == "1"


def test_background_color_does_not_move_ray():
    scene = make_scene(DOOR_ROOM)
    ray = centre_ray(scene)
    before = (ray.map_x, ray.map_y, ray.side)
    assert background_color(scene, ray, 0) == CEILING
    assert background_color(scene, ray, HEIGHT - 1) == FLOOR
    assert (ray.map_x, ray.map_y, ray.side) == before


def test_cast_column_draws_ceiling_wall_floor():
    scene = make_scene(ROOM)
    ray = cast_column(scene, WIDTH // 2)
    assert ray.side == 1
    frame = scene.frame
    assert frame.get_pixel(WIDTH // 2, 0) == CEILING
    assert frame.get_pixel(WIDTH // 2, HEIGHT - 1) == FLOOR
    expected = shade(WALL_COLORS[ray.texture_index()], 1)
    assert frame.get_pixel(WIDTH // 2, HEIGHT // 2) == expected
    assert ray.draw_start <= HEIGHT // 2 <= ray.draw_end


def test_transparent_door_shows_what_is_behind():
    door = Texture(8, 8, [TRANSPARENT] * 64)
    scene = make_scene(DOOR_ROOM, door_texture=door)
    ray = cast_column(scene, WIDTH // 2)
    assert scene.cell(ray.map_x, ray.map_y) == "D"
    frame = scene.frame
    assert frame.get_pixel(WIDTH // 2, 0) == CEILING
    assert frame.get_pixel(WIDTH // 2, HEIGHT - 1) == FLOOR
    assert frame.get_pixel(WIDTH // 2, HEIGHT // 2) == shade(WALL_COLORS[3], 1)


def test_render_3d_view_fills_every_column():
    scene = make_scene(ROOM)
    render_3d_view(scene)
    frame = scene.frame
    for x in range(WIDTH):
        assert frame.get_pixel(x, 0) == CEILING
        assert frame.get_pixel(x, HEIGHT - 1) == FLOOR
    wall_colors = {shade(c, s) for c in WALL_COLORS for s in (0, 1)}
    assert frame.get_pixel(WIDTH // 2, HEIGHT // 2) in wall_colors