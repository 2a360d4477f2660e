"""Metaballs: an iso-surface made from a handful of moving points."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .isosurface import IsoSurface, Vec3

MAX_BLOB_POINTS = 5


@dataclass
class BlobPoint:
    """One metaball: its centre, its strength and its speed along each axis."""

    position: Vec3
    influence: float
    speeds: Vec3 = (0.0, 0.0, 0.0)


class Blobby(IsoSurface):
    """An iso-surface whose field is the summed influence of blob points."""

    def __init__(
        self,
        points: Iterable[BlobPoint] = (),
        move_scale: float = 0.3,
        density: int = 24,
        target_value: float = 18.0,
    ) -> None:
        super().__init__(density, target_value)
        self.points = list(points)
        if len(self.points) > MAX_BLOB_POINTS:
            raise ValueError(
                f"at most {MAX_BLOB_POINTS} blob points are allowed, got {len(self.points)}"
            )
        self.move_scale = move_scale

    def sample(self, x: float, y: float, z: float) -> float:
        """Return the sum of each point's influence over its squared distance."""
        result = 0.0
        for point in self.points:
            px, py, pz = point.position
            dist2 = (x - px) ** 2 + (y - py) ** 2 + (z - pz) ** 2
            if dist2 == 0.0:
                if point.influence == 0.0:
                    return math.nan
                result += math.copysign(math.inf, point.influence)
            else:
                result += point.influence / dist2
        return result

    def animate_points(self, ticks: float) -> None:
        """Move each point along every axis whose speed is not zero."""
        for point in self.points:
            point.position = tuple(
                math.sin(ticks * speed) * self.move_scale + 0.5 if speed != 0.0 else coord
                for coord, speed in zip(point.position, point.speeds)
            )