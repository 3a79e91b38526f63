"""
Outline segments, fan triangulation and point containment for asteroids.

All views here are in absolute (rotated + translated) world coordinates and are
recomputed on demand from an Asteroid; nothing is cached on the rock.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from game.entities.asteroid import Asteroid
from game.geometry.vector import FIELD, Bounds, Vector, add, rotate
from game.geometry.wrap import WrapEngine, polygon_wrap


@dataclass(frozen=True, slots=True)
class Segment:
    a: Vector
    b: Vector

    def vertices(self) -> tuple[Vector, Vector]:
        return (self.a, self.b)

    def translated(self, offset: Vector) -> "Segment":
        return Segment(add(self.a, offset), add(self.b, offset))


@dataclass(frozen=True, slots=True)
class Triangle:
    a: Vector
    b: Vector
    c: Vector

    def vertices(self) -> tuple[Vector, Vector, Vector]:
        return (self.a, self.b, self.c)

    def translated(self, offset: Vector) -> "Triangle":
        return Triangle(add(self.a, offset), add(self.b, offset), add(self.c, offset))

    def contains(self, p: Vector) -> bool:
        """Same-sign cross product test; points on an edge count as inside."""
        d1 = _cross(self.a, self.b, p)
        d2 = _cross(self.b, self.c, p)
        d3 = _cross(self.c, self.a, p)
        has_neg = d1 < 0 or d2 < 0 or d3 < 0
        has_pos = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_neg and has_pos)


def _cross(o: Vector, a: Vector, p: Vector) -> float:
    return (a.x - o.x) * (p.y - o.y) - (a.y - o.y) * (p.x - o.x)


@functools.lru_cache(maxsize=None)
def segment_wrap(bounds: Bounds) -> WrapEngine:
    return WrapEngine.from_points(bounds, Segment.vertices, Segment.translated)


@functools.lru_cache(maxsize=None)
def triangle_wrap(bounds: Bounds) -> WrapEngine:
    return WrapEngine.from_points(bounds, Triangle.vertices, Triangle.translated)


def absolute_points(asteroid: Asteroid) -> list[Vector]:
    """Outline in world coordinates: rotate each local point, then translate."""
    return [add(asteroid.position, rotate(asteroid.rotation, p)) for p in asteroid.points]


def segments(asteroid: Asteroid) -> list[Segment]:
    """Closed loop of outline edges; the last point pairs with the first."""
    pts = absolute_points(asteroid)
    n = len(pts)
    return [Segment(pts[i], pts[(i + 1) % n]) for i in range(n)]


def triangles(asteroid: Asteroid) -> list[Triangle]:
    """Fan triangulation from the rock's position to each edge."""
    return [Triangle(s.a, s.b, asteroid.position) for s in segments(asteroid)]


def lies_inside(point: Vector, asteroid: Asteroid, bounds: Bounds = FIELD) -> bool:
    if not asteroid.points:
        return False
    wrap_triangle = triangle_wrap(bounds)
    for tri in triangles(asteroid):
        for copy in wrap_triangle(tri):
            if copy.contains(point):
                return True
    return False


def wrapped_segments(asteroid: Asteroid, bounds: Bounds = FIELD) -> list[Segment]:
    """Every outline edge plus its copies across whichever field edges it straddles."""
    wrap_segment = segment_wrap(bounds)
    out: list[Segment] = []
    for seg in segments(asteroid):
        out.extend(wrap_segment(seg))
    return out


def draw_shapes(asteroid: Asteroid, bounds: Bounds = FIELD) -> list[tuple[Vector, ...]]:
    """Absolute outline and its wrapped copies, ready for a renderer to draw."""
    if not asteroid.points:
        return []
    return polygon_wrap(bounds)(tuple(absolute_points(asteroid)))
