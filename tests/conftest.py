import pytest

from game.entities.asteroid import Asteroid
from game.geometry.vector import Bounds, Vector


@pytest.fixture
def field():
    return Bounds(800, 600)


def diamond(x=0.0, y=0.0, radius=10.0, rotation=0.0, size=2, velocity=(0.0, 0.0), spin=0.0):
    """Four-point rock with its vertices on the axes."""
    return Asteroid(
        position=Vector(x, y),
        velocity=Vector(*velocity),
        rotation=rotation,
        rotation_velocity=spin,
        size=size,
        points=(
            Vector(radius, 0.0),
            Vector(0.0, radius),
            Vector(-radius, 0.0),
            Vector(0.0, -radius),
        ),
    )


@pytest.fixture
def make_diamond():
    return diamond
