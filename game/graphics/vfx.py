from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pygame

from config import (
    COLOR_DEBRIS,
    DEBRIS_MIN_SPEED,
    DEBRIS_MAX_SPEED,
    DEBRIS_MIN_LIFE,
    DEBRIS_MAX_LIFE,
)
from game.geometry.vector import FIELD, Bounds, Vector, add, mul, rotate, wrap
from game.sim.determinism import SeededValue, rand_float, seeded, sequence


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    color: Tuple[int, int, int] = COLOR_DEBRIS
    size: int = 2


@seeded
def _edge_particle(velocity: Vector, a: Vector, b: Vector):
    t = yield rand_float(0.0, 1.0)
    ang = yield rand_float(0.0, 2.0 * math.pi)
    spd = yield rand_float(DEBRIS_MIN_SPEED, DEBRIS_MAX_SPEED)
    life = yield rand_float(DEBRIS_MIN_LIFE, DEBRIS_MAX_LIFE)

    pos = add(a, mul(t, add(b, mul(-1.0, a))))
    vel = add(velocity, rotate(ang, Vector(spd, 0.0)))
    return Particle(x=pos.x, y=pos.y, vx=vel.x, vy=vel.y, life=life)


def segment_particles(velocity: Vector, segments: Sequence) -> SeededValue[list[Particle]]:
    """One debris particle per outline edge, drifting with the broken rock."""
    return sequence([_edge_particle(velocity, s.a, s.b) for s in segments])


class VFXSystem:
    """
    Tiny, non-blocking debris system for split feedback.

    Expected engine integration:
    - emit(particles)
    - update(dt)
    - render(surface, bounds)
    """

    def __init__(self, bounds: Bounds = FIELD):
        self._particles: List[Particle] = []
        self.bounds = bounds
        self.enabled = True

    @property
    def particles(self) -> List[Particle]:
        return self._particles

    def emit(self, particles: Sequence[Particle]):
        if not self.enabled:
            return
        self._particles.extend(particles)

    def clear(self):
        self._particles.clear()

    def update(self, dt: float):
        if not self.enabled:
            self._particles.clear()
            return
        dt = float(dt)
        if dt <= 0:
            return

        alive: List[Particle] = []
        for p in self._particles:
            p.life -= dt
            if p.life <= 0:
                continue
            # light drag so debris trails behind the fragments
            p.vx *= 0.98
            p.vy *= 0.98
            pos = wrap(self.bounds, Vector(p.x + p.vx * dt, p.y + p.vy * dt))
            p.x = pos.x
            p.y = pos.y
            alive.append(p)
        self._particles = alive

    def render(self, surface: pygame.Surface):
        if not self.enabled:
            return
        b = self.bounds
        for p in self._particles:
            sx = int(p.x - b.left)
            sy = int(b.top - p.y)
            # Pixel-y squares (no alpha blending for crispness)
            pygame.draw.rect(surface, p.color, pygame.Rect(sx, sy, int(p.size), int(p.size)))
