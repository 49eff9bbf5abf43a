# cubecaster

A compact raycasting engine that turns a `.cub` map file into a walkable
first-person maze. It has textured walls, a round minimap in the bottom-right
corner and sliding doors.

## Installing

```
pip install .
```

## Playing

```
cubecaster maps/level.cub
```

The command takes exactly one argument, and the file name must end in `.cub`.
If the arguments are wrong or the map cannot be loaded, a line starting with
`Error:` goes to standard error and the command exits with status 1.

The game opens a 1024×768 window. `F` switches to a 1700×970 view and back.

| Key            | Action                         |
| -------------- | ------------------------------ |
| `W` / `S`      | move forward / backward        |
| `A` / `D`      | strafe left / right            |
| `←` / `→`      | turn                           |
| left `Shift`   | run                            |
| `E`            | act on the door in front of you |
| `F`            | toggle the larger view         |
| `Esc`          | quit                           |

Walls and closed doors block movement. The player slides along a wall one
axis at a time.

## The `.cub` format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100D01
10N001
111111
```

- `NO`, `SO`, `WE` and `EA` name the wall textures. All four are required and
  every file must exist. Any image format Pillow can read will do.
- `F` and `C` set the floor and ceiling colours as `R,G,B`. The text may hold
  only digits and exactly two commas, and each value must be 0–255. Without
  them the floor is black and the ceiling white.
- A line that starts with `1`, `0` or a space is a map row. Identifier lines
  are read only before the first map row. Other lines after it are ignored.
- Allowed cells are `0` (floor), `1` (wall), `D` (closed door), `O` (open
  door), a space (void) and exactly one spawn. The spawn is `N`, `S`, `E` or
  `W`, and its letter sets the initial heading.
- A floor or spawn cell may not lie on the edge of the map or touch a space.

A door texture is also loaded from `./textures/door/door.xpm`, relative to the
current directory.

## Doors

`E` aims the door in the cell in front of you at open when it is closed. The
door then slides open over a fraction of a second. A door you stand in opens
at once.

Once a door is fully open (`O`), it is no longer animated. It stays open even
if `E` or the automatic closing marks it to close.

## Using it as a library

The pieces work on their own. For example, to check maps during a build:

```python
from cubecaster.mapfile import parse_map_file
from cubecaster.validation import validate_map, validate_textures

config = parse_map_file("maps/level.cub")
validate_map(config.grid)      # raises MapValidationError
validate_textures(config)      # raises MapValidationError
```

Every error the package raises derives from `cubecaster.utils.CubError`.
This includes `MapFileError`, `ColorError`, `MapValidationError` and
`TextureError`.

Rendering needs no window:

```python
from cubecaster.framebuffer import FrameBuffer
from cubecaster.mapfile import parse_map_lines
from cubecaster.player import spawn_player
from cubecaster.renderer import render_3d_view
from cubecaster.scene import Scene
from cubecaster.textures import Texture

config = parse_map_lines(["111\n", "1N1\n", "111\n"])
player = spawn_player(config.grid)
walls = [Texture(1, 1, [0xFF0000]) for _ in range(4)]
scene = Scene(config, player, walls, Texture(1, 1, [0x00FF00]),
              frame=FrameBuffer(64, 48))
render_3d_view(scene)
print(hex(scene.frame.get_pixel(32, 24)))
```

`cubecaster.app.load_game(path)` reads, validates and loads a `.cub` file into
a `cubecaster.game.Game`. `Game.tick()` advances one frame and returns the
drawn `FrameBuffer`.

## Tests

```
pip install .[test]
pytest
```