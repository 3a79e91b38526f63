"""
Toroidal wrap engine.

A shape that straddles a field edge has to be drawn (and hit-tested) twice: once
where it is and once shifted by a full field dimension onto the opposite side.
A shape sitting on a corner needs four copies, the fourth shifted diagonally.

`WrapEngine` is built once per shape kind (polygon, segment, triangle) from four
edge-crossing predicates plus a translate function, then called per shape.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from game.geometry.vector import Bounds, Vector, add

S = TypeVar("S")


@dataclass(frozen=True)
class WrapEngine(Generic[S]):
    bounds: Bounds
    crosses_left: Callable[[S, Bounds], bool]
    crosses_right: Callable[[S, Bounds], bool]
    crosses_top: Callable[[S, Bounds], bool]
    crosses_bottom: Callable[[S, Bounds], bool]
    translate: Callable[[S, Vector], S]

    @classmethod
    def from_points(
        cls,
        bounds: Bounds,
        points_of: Callable[[S], Sequence[Vector]],
        translate: Callable[[S, Vector], S],
    ) -> "WrapEngine[S]":
        """Engine whose crossing tests ask whether any vertex lies beyond an edge."""
        return cls(
            bounds=bounds,
            crosses_left=lambda s, b: any(p.x < b.left for p in points_of(s)),
            crosses_right=lambda s, b: any(p.x > b.right for p in points_of(s)),
            crosses_top=lambda s, b: any(p.y > b.top for p in points_of(s)),
            crosses_bottom=lambda s, b: any(p.y < b.bottom for p in points_of(s)),
            translate=translate,
        )

    def offsets(self, shape: S) -> list[Vector]:
        """
        Translations needed for `shape`, the zero offset first.

        Left/right are mutually exclusive (left wins), as are bottom/top (bottom
        wins); a horizontal and a vertical crossing combine into a diagonal copy.
        """
        b = self.bounds
        xs = [0.0]
        if self.crosses_left(shape, b):
            xs.append(b.width)
        elif self.crosses_right(shape, b):
            xs.append(-b.width)

        ys = [0.0]
        if self.crosses_bottom(shape, b):
            ys.append(b.height)
        elif self.crosses_top(shape, b):
            ys.append(-b.height)

        return [Vector(dx, dy) for dx in xs for dy in ys]

    def __call__(self, shape: S) -> list[S]:
        out: list[S] = []
        for off in self.offsets(shape):
            if off.x == 0.0 and off.y == 0.0:
                out.append(shape)
            else:
                out.append(self.translate(shape, off))
        return out


def _translate_polygon(points: Sequence[Vector], offset: Vector) -> tuple[Vector, ...]:
    return tuple(add(p, offset) for p in points)


@functools.lru_cache(maxsize=None)
def polygon_wrap(bounds: Bounds) -> WrapEngine:
    """Engine for outlines given as a sequence of absolute points."""
    return WrapEngine.from_points(bounds, lambda pts: pts, _translate_polygon)

