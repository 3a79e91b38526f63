"""
2D vector math and the single-point toroidal wrap.

The play field is centred on the origin with y growing upward, so a field of
width w spans x in [-w/2, w/2] (and likewise for height).

Rotation convention: a positive angle turns a vector clockwise. Everything that
rotates (outline placement, velocity direction) goes through `rotate()` so the
convention stays consistent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from config import FIELD_WIDTH, FIELD_HEIGHT


@dataclass(frozen=True, slots=True)
class Vector:
    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Size of the toroidal field."""

    width: float
    height: float

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"field bounds must be positive, got {self.width}x{self.height}")

    @property
    def left(self) -> float:
        return -self.width / 2.0

    @property
    def right(self) -> float:
        return self.width / 2.0

    @property
    def top(self) -> float:
        return self.height / 2.0

    @property
    def bottom(self) -> float:
        return -self.height / 2.0


FIELD = Bounds(FIELD_WIDTH, FIELD_HEIGHT)


def add(u: Vector, v: Vector) -> Vector:
    return Vector(u.x + v.x, u.y + v.y)


def mul(s: float, v: Vector) -> Vector:
    return Vector(s * v.x, s * v.y)


def rotate(theta: float, v: Vector) -> Vector:
    """Rotate `v` clockwise by `theta` radians."""
    c = math.cos(theta)
    s = math.sin(theta)
    return Vector(v.x * c + v.y * s, v.y * c - v.x * s)


def _wrap_axis(value: float, low: float, span: float) -> float:
    if low <= value <= low + span:
        return value
    return (value - low) % span + low


def wrap(bounds: Bounds, v: Vector) -> Vector:
    """
    Bring `v` back inside the field by whole field widths/heights.

    Points already inside (edges included) come back unchanged.
    """
    x = _wrap_axis(v.x, bounds.left, bounds.width)
    y = _wrap_axis(v.y, bounds.bottom, bounds.height)
    if x == v.x and y == v.y:
        return v
    return Vector(x, y)
