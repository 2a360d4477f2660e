"""Per-frame scene state: animation, camera matrices and background."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .isosurface import Vec3, Vertex
from .settings import Settings

Matrix = tuple[tuple[float, float, float, float], ...]
Vec4 = tuple[float, float, float, float]

CAMERA_EYE: Vec3 = (0.0, 0.0, -0.8)
CAMERA_AT: Vec3 = (0.0, 0.0, 0.0)
CAMERA_UP: Vec3 = (0.0, 1.0, 0.0)
NEAR_PLANE = 0.05
FAR_PLANE = 100.0

# Environment cube, drawn inside out as six two-triangle strips: (position, normal).
CUBE_VERTICES: tuple[tuple[Vec3, Vec3], ...] = (
    ((-1.0, 1.0, -1.0), (0.0, 0.0, 1.0)),
    ((1.0, 1.0, -1.0), (0.0, 0.0, 1.0)),
    ((-1.0, -1.0, -1.0), (0.0, 0.0, 1.0)),
    ((1.0, -1.0, -1.0), (0.0, 0.0, 1.0)),
    ((-1.0, 1.0, 1.0), (0.0, 0.0, -1.0)),
    ((-1.0, -1.0, 1.0), (0.0, 0.0, -1.0)),
    ((1.0, 1.0, 1.0), (0.0, 0.0, -1.0)),
    ((1.0, -1.0, 1.0), (0.0, 0.0, -1.0)),
    ((-1.0, 1.0, 1.0), (0.0, -1.0, 0.0)),
    ((1.0, 1.0, 1.0), (0.0, -1.0, 0.0)),
    ((-1.0, 1.0, -1.0), (0.0, -1.0, 0.0)),
    ((1.0, 1.0, -1.0), (0.0, -1.0, 0.0)),
    ((-1.0, -1.0, 1.0), (0.0, 1.0, 0.0)),
    ((-1.0, -1.0, -1.0), (0.0, 1.0, 0.0)),
    ((1.0, -1.0, 1.0), (0.0, 1.0, 0.0)),
    ((1.0, -1.0, -1.0), (0.0, 1.0, 0.0)),
    ((1.0, 1.0, -1.0), (-1.0, 0.0, 0.0)),
    ((1.0, 1.0, 1.0), (-1.0, 0.0, 0.0)),
    ((1.0, -1.0, -1.0), (-1.0, 0.0, 0.0)),
    ((1.0, -1.0, 1.0), (-1.0, 0.0, 0.0)),
    ((-1.0, 1.0, -1.0), (1.0, 0.0, 0.0)),
    ((-1.0, -1.0, -1.0), (1.0, 0.0, 0.0)),
    ((-1.0, 1.0, 1.0), (1.0, 0.0, 0.0)),
    ((-1.0, -1.0, 1.0), (1.0, 0.0, 0.0)),
)


@dataclass(frozen=True)
class BackgroundVertex:
    """A screen-space vertex of the gradient background."""

    position: Vec4
    color: int


def gradient_background(
    width: int, height: int, top_color: int, bottom_color: int
) -> list[BackgroundVertex]:
    """Return a four-vertex strip covering the whole screen."""
    x1, y1 = -0.5, -0.5
    x2, y2 = width - 0.5, height - 0.5
    return [
        BackgroundVertex((x2, y1, 0.0, 1.0), top_color),
        BackgroundVertex((x2, y2, 0.0, 1.0), bottom_color),
        BackgroundVertex((x1, y1, 0.0, 1.0), top_color),
        BackgroundVertex((x1, y2, 0.0, 1.0), bottom_color),
    ]


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    columns = tuple(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )


def yaw_pitch_roll_matrix(yaw: float, pitch: float, roll: float) -> Matrix:
    """Return the row-vector rotation: roll about Z, then pitch about X, then yaw about Y."""
    cy, sy = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cr, sr = math.cos(roll), math.sin(roll)
    rot_z = ((cr, sr, 0.0, 0.0), (-sr, cr, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    rot_x = ((1.0, 0.0, 0.0, 0.0), (0.0, cp, sp, 0.0), (0.0, -sp, cp, 0.0), (0.0, 0.0, 0.0, 1.0))
    rot_y = ((cy, 0.0, -sy, 0.0), (0.0, 1.0, 0.0, 0.0), (sy, 0.0, cy, 0.0), (0.0, 0.0, 0.0, 1.0))
    return _matmul(_matmul(rot_z, rot_x), rot_y)


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _unit(v: Vec3) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def look_at_lh(eye: Vec3, at: Vec3, up: Vec3) -> Matrix:
    """Return a left-handed view matrix looking from eye towards at."""
    zaxis = _unit(_sub(at, eye))
    xaxis = _unit(_cross(up, zaxis))
    yaxis = _cross(zaxis, xaxis)
    return (
        (xaxis[0], yaxis[0], zaxis[0], 0.0),
        (xaxis[1], yaxis[1], zaxis[1], 0.0),
        (xaxis[2], yaxis[2], zaxis[2], 0.0),
        (-_dot(xaxis, eye), -_dot(yaxis, eye), -_dot(zaxis, eye), 1.0),
    )


def perspective_fov_lh(fov: float, aspect: float, near: float, far: float) -> Matrix:
    """Return a left-handed perspective projection; fov is vertical, in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    y_scale = 1.0 / math.tan(fov / 2.0)
    x_scale = y_scale / aspect
    depth = far / (far - near)
    return (
        (x_scale, 0.0, 0.0, 0.0),
        (0.0, y_scale, 0.0, 0.0),
        (0.0, 0.0, depth, 1.0),
        (0.0, 0.0, -near * depth, 0.0),
    )


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw one frame."""

    ticks: float
    world: Matrix
    view: Matrix
    projection: Matrix
    show_cube: bool
    cube: tuple[tuple[Vec3, Vec3], ...] | None
    background: list[BackgroundVertex] | None
    vertices: list[Vertex]
    face_count: int
    blend_style: int


class Screensaver:
    """Animates the metaballs and produces one frame at a time."""

    def __init__(self, settings: Settings, width: int, height: int) -> None:
        self.settings = settings
        self.width = width
        self.height = height
        self.blobby = settings.make_blobby()
        self.background = gradient_background(
            width, height, settings.bg_top_color, settings.bg_bottom_color
        )
        self.ticks = 0.0

    def frame(self) -> Frame:
        """Animate, polygonise and return the current frame, then advance time."""
        settings = self.settings
        ticks = self.ticks
        self.blobby.animate_points(ticks)
        self.blobby.march()

        rx, ry, rz = settings.world_rot_speeds
        world = yaw_pitch_roll_matrix(rx * ticks, ry * ticks, rz * ticks)
        view = look_at_lh(CAMERA_EYE, CAMERA_AT, CAMERA_UP)
        projection = perspective_fov_lh(
            math.radians(settings.fov), settings.aspect_ratio, NEAR_PLANE, FAR_PLANE
        )
        result = Frame(
            ticks=ticks,
            world=world,
            view=view,
            projection=projection,
            show_cube=settings.show_cube,
            cube=CUBE_VERTICES if settings.show_cube else None,
            background=None if settings.show_cube else list(self.background),
            vertices=self.blobby.render_vertices(),
            face_count=self.blobby.face_count,
            blend_style=settings.blend_style,
        )
        self.ticks += settings.tick_speed
        return result