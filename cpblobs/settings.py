"""Screensaver settings: defaults and the configuration file reader."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from .blobby import MAX_BLOB_POINTS, Blobby, BlobPoint
from .isosurface import Vec3
from .xmldocument import XmlDocument

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _scan(text: str, pattern: re.Pattern[str], count: int, convert: Callable[[str], float]) -> list:
    values = []
    pos = 0
    for _ in range(count):
        match = pattern.match(text, pos)
        if match is None:
            raise ValueError(f"expected {count} numbers in {text!r}")
        values.append(convert(match.group(1)))
        pos = match.end()
    return values


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def parse_vector(text: str) -> Vec3:
    """Parse three whitespace-separated numbers."""
    x, y, z = _scan(text, _FLOAT_PREFIX, 3, float)
    return (x, y, z)


def parse_color(text: str) -> int:
    """Parse "r g b" into an opaque ARGB colour value."""
    r, g, b = _scan(text, _INT_PREFIX, 3, int)
    return (0xFF << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def parse_blob(text: str) -> BlobPoint:
    """Parse "x y z influence vx vy vz" into a blob point."""
    x, y, z, influence, vx, vy, vz = _scan(text, _FLOAT_PREFIX, 7, float)
    return BlobPoint(position=(x, y, z), influence=influence, speeds=(vx, vy, vz))


def _default_blobs() -> list[BlobPoint]:
    return [
        BlobPoint((0.5, 0.5, 0.5), 0.25, (2.0, 4.0, 0.0)),
        BlobPoint((0.6, 0.5, 0.5), 0.51, (-4.0, 2.0, 0.0)),
        BlobPoint((0.3, 0.5, 0.3), 0.1, (-2.0, 0.0, 3.0)),
        BlobPoint((0.5, 0.5, 0.5), 0.25, (0.0, 2.0, 1.0)),
        BlobPoint((0.5, 0.5, 0.5), 0.15, (0.5, 0.0, 1.0)),
    ]


@dataclass
class Settings:
    """Every user-controllable parameter of the screensaver."""

    fov: float = 45.0
    aspect_ratio: float = 1.33
    world_rot_speeds: Vec3 = (1.0, 0.5, 0.25)
    cubemap: str = "data\\nvlobby_cube_mipmap.dds"
    diffuse_cubemap: str = "data\\nvlobby_cube_mipmap_diffuse.dds"
    specular_cubemap: str = "data\\nvlobby_cube_mipmap_specular.dds"
    move_scale: float = 0.3
    show_cube: bool = True
    blobs: list[BlobPoint] = field(default_factory=_default_blobs)
    num_points: int = 5
    density: int = 32
    target_value: float = 24.0
    tick_speed: float = 0.01
    blend_style: int = 0
    bg_top_color: int = 0
    bg_bottom_color: int = 0

    def make_blobby(self) -> Blobby:
        """Build a metaball surface from these settings, using copies of the blobs."""
        if not 0 <= self.num_points <= len(self.blobs):
            raise ValueError(
                f"number of blobs must be between 0 and {len(self.blobs)}, got {self.num_points}"
            )
        return Blobby(
            (replace(blob) for blob in self.blobs[: self.num_points]),
            self.move_scale,
            self.density,
            self.target_value,
        )


def default_settings() -> Settings:
    """Return the settings used when no configuration is given."""
    return Settings()


_FIELDS: tuple[tuple[str, str, Callable[[str], object]], ...] = (
    ("fov", "fov", _atof),
    ("aspectratio", "aspect_ratio", _atof),
    ("showcube", "show_cube", lambda text: text.lower() == "true"),
    ("bgtopcolor", "bg_top_color", parse_color),
    ("bgbottomcolor", "bg_bottom_color", parse_color),
    ("globalspeed", "tick_speed", _atof),
    ("worldrot", "world_rot_speeds", parse_vector),
    ("numblobs", "num_points", _atoi),
    ("cubemap", "cubemap", str),
    ("diffusecubemap", "diffuse_cubemap", str),
    ("specularcubemap", "specular_cubemap", str),
    ("blendstyle", "blend_style", lambda text: _atoi(text) & 0xFFFFFFFF),
    ("movescale", "move_scale", _atof),
    ("smoothness", "density", _atoi),
    ("blobbiness", "target_value", _atof),
)


def _apply(settings: Settings, doc: XmlDocument, node: int) -> None:
    def child_text(tag: str) -> str | None:
        child = doc.child_node(node, tag)
        if child is None:
            return None
        return doc.node_text(child) or ""

    for tag, attribute, convert in _FIELDS:
        text = child_text(tag)
        if text is not None:
            setattr(settings, attribute, convert(text))
    for index in range(MAX_BLOB_POINTS):
        text = child_text(f"blob{index + 1}")
        if text is not None:
            settings.blobs[index] = parse_blob(text)


def parse_settings(text: str) -> Settings:
    """Return the defaults overridden by every <screensaver> element in text."""
    settings = default_settings()
    doc = XmlDocument(text)
    for node in doc.iter_nodes("screensaver"):
        _apply(settings, doc, node)
    return settings


def load_settings(path: str | os.PathLike[str]) -> Settings:
    """Read settings from a file; a missing or empty file gives the defaults."""
    try:
        doc = XmlDocument.load(path)
    except (OSError, ValueError):
        return default_settings()
    return parse_settings(doc.text)