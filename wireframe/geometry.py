"""Three-component vectors and rotations about the coordinate axes."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Vec3:
    """A point in space carrying the colour it is drawn with."""

    x: float
    y: float
    z: float
    color: int = 0

    def scaled(self, factor: float) -> "Vec3":
        """This vector with every coordinate multiplied by ``factor``."""
        return replace(self, x=self.x * factor, y=self.y * factor, z=self.z * factor)


def _sin_cos(angle: float) -> tuple[float, float]:
    radians = angle * math.pi / 180.0
    return math.sin(radians), math.cos(radians)


def rotate_x(v: Vec3, angle: float) -> Vec3:
    """Rotate ``v`` about the x axis by ``angle`` degrees."""
    s, c = _sin_cos(angle)
    return replace(v, y=v.y * c - v.z * s, z=v.y * s + v.z * c)


def rotate_y(v: Vec3, angle: float) -> Vec3:
    """Rotate ``v`` about the y axis by ``angle`` degrees."""
    s, c = _sin_cos(angle)
    return replace(v, z=v.z * c - v.x * s, x=v.z * s + v.x * c)


def rotate_z(v: Vec3, angle: float) -> Vec3:
    """Rotate ``v`` about the z axis by ``angle`` degrees."""
    s, c = _sin_cos(angle)
    return replace(v, x=v.x * c - v.y * s, y=v.x * s + v.y * c)