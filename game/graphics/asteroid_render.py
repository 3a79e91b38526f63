"""
Asteroid outline rendering (render-only; never affects simulation outcomes).

World space is centred with y up; screen space has its origin top-left with y down.
"""

from __future__ import annotations

from typing import Sequence

import pygame

from config import COLOR_ASTEROID, COLOR_ASTEROID_FILL
from game.entities.asteroid import Asteroid
from game.geometry.shapes import draw_shapes
from game.geometry.vector import FIELD, Bounds, Vector


def world_to_screen(bounds: Bounds, v: Vector) -> tuple[float, float]:
    return (v.x - bounds.left, bounds.top - v.y)


def screen_to_world(bounds: Bounds, sx: float, sy: float) -> Vector:
    return Vector(float(sx) + bounds.left, bounds.top - float(sy))


def render_asteroids(surface: pygame.Surface, asteroids: Sequence[Asteroid], bounds: Bounds = FIELD):
    for rock in asteroids:
        for outline in draw_shapes(rock, bounds):
            pts = [world_to_screen(bounds, p) for p in outline]
            if len(pts) < 3:
                continue
            pygame.draw.polygon(surface, COLOR_ASTEROID_FILL, pts)
            pygame.draw.polygon(surface, COLOR_ASTEROID, pts, width=1)
