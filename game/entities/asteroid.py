"""
Asteroid value type.
"""

from __future__ import annotations

from dataclasses import dataclass

from game.geometry.vector import Vector


@dataclass(frozen=True, slots=True)
class Asteroid:
    """
    One rock in the field.

    `points` is the outline in the rock's local frame (unrotated, around the
    local origin, which sits at `position` in the world). Rocks are never mutated:
    ticking and splitting both produce new values.
    """

    position: Vector
    velocity: Vector
    rotation: float
    rotation_velocity: float
    size: int
    points: tuple[Vector, ...]
