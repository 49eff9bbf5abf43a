"""Game-wide constants: window sizes, speeds, key codes and colours."""

import math

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
FULLSCREEN_WIDTH = 1700
FULLSCREEN_HEIGHT = 970
TEXTURE_SIZE = 64
FOV = 60
MOVE_SPEED = 1.0
SPRINT_SPEED = 4.0
ROT_SPEED = 0.05
MAP_SCALE = 40
COLLISION_MARGIN = 5

MINIMAP_SIZE = 150
MINIMAP_SCALE = 8
MINIMAP_MARGIN = 20
MINIMAP_RADIUS = 70
MINIMAP_VIEW_DISTANCE = 10

DOOR_CLOSE_DELAY = 2.0
DOOR_SPEED_OPEN = 3.0
DOOR_SPEED_CLOSE = 2.0
DOOR_DT_CAP = 0.02
DOOR_OPEN_EPS = 0.99
DOOR_TEXTURE_PATH = "./textures/door/door.xpm"

PI = math.pi

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_ESC = 65307
KEY_SHIFT = 65505
KEY_F = 102
KEY_E = 101

COLOR_RED = 0xFF0000
COLOR_GREEN = 0x00FF00
COLOR_BLUE = 0x0000FF
COLOR_WHITE = 0xFFFFFF
COLOR_BLACK = 0x000000

MINIMAP_BG = 0x1A1A1A
MINIMAP_WALL = 0x404040
MINIMAP_FLOOR = 0x2A2A2A
MINIMAP_PLAYER = 0x00AAFF
MINIMAP_PLAYER_DOT = 0xFFFFFF
MINIMAP_DIRECTION = 0x00FFAA
MINIMAP_BORDER = 0x555555
MINIMAP_BORDER_OUTER = 0x000000

SPAWN_CHARS = frozenset("NSEW")