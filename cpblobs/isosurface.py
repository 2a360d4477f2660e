"""Polygonisation of a scalar field with the marching cubes algorithm."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .tables import (
    CUBE_EDGE_DIRECTIONS,
    CUBE_EDGES,
    CUBE_OFFSET_VERTICES,
    EDGE_FLAGS,
    corner_flag_index,
    edge_triangles,
)

Vec3 = tuple[float, float, float]

# Upper bound on the number of vertices kept from one march.
MAX_VERTICES = 32000

WHITE = 0xFFFFFFFF

_NORMAL_DELTA = 0.01


@dataclass(frozen=True)
class Vertex:
    """A vertex ready for drawing: centred position, normal, colour and UV."""

    position: Vec3
    normal: Vec3
    color: int
    tu: float
    tv: float


def interpolation_offset(val1: float, val2: float, wanted: float) -> float:
    """Return how far along an edge from val1 to val2 the value wanted lies."""
    delta = val2 - val1
    if delta == 0.0:
        return 0.5
    return (wanted - val1) / delta


def _normalize(vector: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in vector))
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    x, y, z = vector
    return (x / length, y / length, z / length)


class IsoSurface:
    """A surface of constant value through a scalar field on the unit cube.

    Subclasses provide the field by overriding :meth:`sample`.
    """

    def __init__(self, density: int = 24, target_value: float = 18.0) -> None:
        self.target_value = target_value
        self.vertices: list[Vec3] = []
        self.normals: list[Vec3] = []
        self.face_count = 0
        self.set_density(density)

    def set_density(self, density: int) -> None:
        """Set the number of cubes along each axis of the unit cube."""
        if density <= 0:
            raise ValueError(f"density must be positive, got {density}")
        self.density = density
        self.step_size = 1.0 / density

    def sample(self, x: float, y: float, z: float) -> float:
        """Return the field value at a point; the base field is zero everywhere."""
        return 0.0

    def normal_at(self, x: float, y: float, z: float) -> Vec3:
        """Return the unit surface normal at a point, from the field's gradient."""
        d = _NORMAL_DELTA
        s = self.sample
        return _normalize(
            (
                s(x - d, y, z) - s(x + d, y, z),
                s(x, y - d, z) - s(x, y + d, z),
                s(x, y, z - d) - s(x, y, z),
            )
        )

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def march(self) -> None:
        """Rebuild the triangle list by marching every cube of the grid."""
        self.vertices = []
        self.normals = []
        self.face_count = 0
        step = self.step_size
        for ix in range(self.density):
            for iy in range(self.density):
                for iz in range(self.density):
                    self._march_cube(ix * step, iy * step, iz * step, step)

    def _march_cube(self, x: float, y: float, z: float, scale: float) -> None:
        origin = (x, y, z)
        values = [
            self.sample(*(o + c * scale for o, c in zip(origin, corner)))
            for corner in CUBE_OFFSET_VERTICES
        ]
        flag_index = corner_flag_index(values, self.target_value)
        edge_flags = EDGE_FLAGS[flag_index]
        if not edge_flags:
            return

        edge_points: dict[int, tuple[Vec3, Vec3]] = {}
        for edge, (start, end) in enumerate(CUBE_EDGES):
            if not edge_flags & (1 << edge):
                continue
            offset = interpolation_offset(values[start], values[end], self.target_value)
            px, py, pz = (
                o + (c + offset * d) * scale
                for o, c, d in zip(
                    origin, CUBE_OFFSET_VERTICES[start], CUBE_EDGE_DIRECTIONS[edge]
                )
            )
            point = (px, py, pz)
            edge_points[edge] = (point, self.normal_at(*point))

        for triangle in edge_triangles(flag_index):
            for edge in triangle:
                if len(self.vertices) < MAX_VERTICES:
                    point, normal = edge_points[edge]
                    self.vertices.append(point)
                    self.normals.append(normal)
            self.face_count += 1

    def render_vertices(self) -> list[Vertex]:
        """Return the marched vertices centred on the origin, ready for drawing."""
        return [
            Vertex(
                position=(x - 0.5, y - 0.5, z - 0.5),
                normal=normal,
                color=WHITE,
                tu=x,
                tv=y,
            )
            for (x, y, z), normal in zip(self.vertices, self.normals)
        ]