"""
Seeded asteroid generation.

Every generator here returns a SeededValue; nothing draws from a shared RNG, so the
same seed always rebuilds the same field.
"""

from __future__ import annotations

import math
from typing import Optional

from config import (
    SAFE_ZONE_SIZE,
    ASTEROID_RADIUS_PER_SIZE,
    ASTEROID_RADIUS_JITTER,
    ASTEROID_MIN_SPEED,
    ASTEROID_MAX_SPEED,
    ASTEROID_MAX_SPIN,
    ASTEROID_MIN_VERTICES,
    ASTEROID_MAX_VERTICES,
    ASTEROID_ANGLE_JITTER,
    ASTEROID_VERTEX_RADIUS_JITTER,
    START_COUNT_MIN,
    START_COUNT_MAX,
    START_SIZE_MIN,
    START_SIZE_MAX,
)
from game.entities.asteroid import Asteroid
from game.geometry.vector import FIELD, Bounds, Vector, mul, rotate
from game.sim.determinism import SeededValue, rand_float, rand_int, replicate, seeded

TAU = 2.0 * math.pi


def random_angle() -> SeededValue[float]:
    return rand_float(0.0, TAU)


@seeded
def random_outline(radius: float):
    """
    Irregular star-shaped outline around the origin.

    Each vertex stays within its own angular sector (jitter is bounded to a fraction
    of the sector), so neighbours never swap order and the polygon stays simple.
    """
    count = yield rand_int(ASTEROID_MIN_VERTICES, ASTEROID_MAX_VERTICES)
    sector = TAU / count
    jitter = ASTEROID_ANGLE_JITTER * sector
    r_lo = (1.0 - ASTEROID_VERTEX_RADIUS_JITTER) * radius
    r_hi = (1.0 + ASTEROID_VERTEX_RADIUS_JITTER) * radius

    points = []
    for index in range(count, 0, -1):
        offset = yield rand_float(-jitter, jitter)
        r = yield rand_float(r_lo, r_hi)
        angle = index * sector + offset
        points.append(Vector(r * math.cos(angle), r * math.sin(angle)))
    return tuple(points)


def push_out_of_safe_zone(pos: Vector, min_distance: float) -> Vector:
    """Move `pos` outward along its own direction until it is `min_distance` from the centre."""
    dist = pos.length()
    if dist >= min_distance:
        return pos
    if dist == 0.0:
        return Vector(min_distance, 0.0)
    return mul(min_distance / dist, pos)


@seeded
def random_spawn_position(radius: float, bounds: Bounds = FIELD, safe_zone: float = SAFE_ZONE_SIZE):
    x = yield rand_float(bounds.left, bounds.right)
    y = yield rand_float(bounds.bottom, bounds.top)
    return push_out_of_safe_zone(Vector(x, y), safe_zone + radius)


@seeded
def init_asteroid(
    spawn_pos: Optional[Vector],
    min_size: int,
    max_size: int,
    bounds: Bounds = FIELD,
    safe_zone: float = SAFE_ZONE_SIZE,
):
    """
    Generate one asteroid of tier min_size..max_size.

    With `spawn_pos` (fission), the rock starts exactly there; otherwise it is placed
    anywhere in the field outside the safe zone. Bigger rocks drift slower.
    """
    size = yield rand_int(min_size, max_size)
    direction = yield random_angle()
    speed = yield rand_float(ASTEROID_MIN_SPEED, ASTEROID_MAX_SPEED / (size * size))
    rotation = yield random_angle()
    rotation_velocity = yield rand_float(-ASTEROID_MAX_SPIN, ASTEROID_MAX_SPIN)

    ideal_radius = size * ASTEROID_RADIUS_PER_SIZE
    radius = yield rand_float(
        (1.0 - ASTEROID_RADIUS_JITTER) * ideal_radius,
        (1.0 + ASTEROID_RADIUS_JITTER) * ideal_radius,
    )

    if spawn_pos is not None:
        position = spawn_pos
    else:
        position = yield random_spawn_position(radius, bounds, safe_zone)

    points = yield random_outline(radius)

    return Asteroid(
        position=position,
        velocity=rotate(direction, Vector(speed, 0.0)),
        rotation=rotation,
        rotation_velocity=rotation_velocity,
        size=size,
        points=points,
    )


def init(bounds: Bounds = FIELD, safe_zone: float = SAFE_ZONE_SIZE) -> SeededValue[list[Asteroid]]:
    """Fresh starting population: a couple of large rocks away from the centre."""
    rock = init_asteroid(None, START_SIZE_MIN, START_SIZE_MAX, bounds, safe_zone)
    return rand_int(START_COUNT_MIN, START_COUNT_MAX).bind(lambda n: replicate(n, rock))
