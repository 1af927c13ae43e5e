"""Scene constants and the small value types used by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

DEBUG = False
UNASSIGNED = -1

SCALE_FACTOR = 40

DRAW_DISTANCE = 50
FOV = 90
WIDTH = 1280
HEIGHT = 720
PIXEL_SIZE = 128
BLOCK_SIZE = 64
PLAYER_SIZE = 20

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_TURN_LEFT = 65361
KEY_TURN_RIGHT = 65363
TURN_SPEED = 0.02
MOVE_SPEED = 0.03

PI = 3.14159265359


class TextureId(IntEnum):
    """Index of each wall texture."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vec2:
        return self.scale(factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class IntVec2:
    """A two-dimensional vector of integers, used for grid cells and steps."""

    x: int = 0
    y: int = 0


@dataclass
class Color:
    """An RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class Ray:
    """State of one ray while it walks the map grid."""

    start: Vec2 = field(default_factory=Vec2)
    dir: Vec2 = field(default_factory=Vec2)
    step: Vec2 = field(default_factory=Vec2)
    len: Vec2 = field(default_factory=Vec2)
    intersection: Vec2 = field(default_factory=Vec2)
    map_check: IntVec2 = field(default_factory=IntVec2)
    v_step: IntVec2 = field(default_factory=IntVec2)
    screen_x: float = 0.0
    travel_dist: float = 0.0
    perp_dist: float = 0.0
    side: bool = False
    hit: bool = False


@dataclass
class RenderValues:
    """Working values for drawing one screen column."""

    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0
    screen_y: int = 0
    color: int = 0
    ceiling_color: int = 0
    floor_color: int = 0
    tex_id: int = 0
    tex_x: int = 0
    tex_y: int = 0
    shading_factor: float = 0.0
    floor_ceiling_shading_factor: float = 0.0
    dist: float = 0.0
    p: float = 0.0
    tex_step: float = 0.0
    tex_pos: float = 0.0