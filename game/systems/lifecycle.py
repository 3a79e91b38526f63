"""
Asteroid time-stepping and fission.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Sequence

from config import SPLIT_CHILDREN_MIN, SPLIT_CHILDREN_MAX
from game.entities.asteroid import Asteroid
from game.geometry.shapes import Segment, segments
from game.geometry.vector import FIELD, Bounds, Vector, add, mul, wrap
from game.graphics.vfx import segment_particles
from game.sim.debug import debug_log
from game.sim.determinism import SeededValue, rand_int, replicate, seeded
from game.systems.asteroid_gen import init_asteroid

ParticleGenerator = Callable[[Vector, Sequence[Segment]], SeededValue[list]]


def tick(dt: float, asteroids: Sequence[Asteroid], bounds: Bounds = FIELD) -> list[Asteroid]:
    """
    Advance every rock by `dt` seconds.

    Position wraps across the field; rotation just accumulates (only its sin/cos
    are ever used).
    """
    return [
        replace(
            a,
            position=wrap(bounds, add(a.position, mul(dt, a.velocity))),
            rotation=a.rotation + a.rotation_velocity * dt,
        )
        for a in asteroids
    ]


@seeded
def split(asteroid: Asteroid, particles: ParticleGenerator = segment_particles):
    """
    Break `asteroid` apart.

    Returns (children, debris). Debris is always produced; children are one tier
    smaller, spawn at the parent's position, and there are none once the parent
    was the smallest tier.
    """
    debris = yield particles(asteroid.velocity, segments(asteroid))

    child_size = asteroid.size - 1
    if child_size <= 0:
        debug_log("split", f"size {asteroid.size} rock destroyed, {len(debris)} debris")
        return [], debris

    count = yield rand_int(SPLIT_CHILDREN_MIN, SPLIT_CHILDREN_MAX)
    children = yield replicate(count, init_asteroid(asteroid.position, child_size, child_size))
    debug_log("split", f"size {asteroid.size} rock -> {count} x size {child_size}, {len(debris)} debris")
    return children, debris

