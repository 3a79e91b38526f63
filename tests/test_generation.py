"""Tests for seeded asteroid generation."""
import math

import pytest

from config import SAFE_ZONE_SIZE
from game.geometry.vector import Bounds, Vector
from game.systems.asteroid_gen import init, init_asteroid, push_out_of_safe_zone, random_outline

SEEDS = range(40)


def _angle_steps(points):
    """Clockwise angular gap between consecutive outline vertices."""
    angles = [math.atan2(p.y, p.x) for p in points]
    n = len(angles)
    return [(angles[i] - angles[(i + 1) % n]) % (2 * math.pi) for i in range(n)]


class TestInitialPopulation:

    @pytest.mark.parametrize("seed", SEEDS)
    def test_population_shape(self, seed):
        rocks = init().eval(seed)
        assert 2 <= len(rocks) <= 3
        for rock in rocks:
            assert rock.size in (4, 5)
            assert 10 <= len(rock.points) <= 16

    @pytest.mark.parametrize("seed", SEEDS)
    def test_outside_safe_zone(self, seed):
        for rock in init().eval(seed):
            min_radius = 0.95 * 16.0 * rock.size
            assert rock.position.length() >= SAFE_ZONE_SIZE + min_radius - 1e-9

    def test_deterministic(self):
        assert init().run(2024) == init().run(2024)

    def test_seeds_differ(self):
        assert init().eval(1) != init().eval(2)

    def test_custom_field(self):
        small = Bounds(400, 300)
        for seed in SEEDS:
            for rock in init(small, safe_zone=20.0).eval(seed):
                assert rock.position.length() >= 20.0 + 0.95 * 16.0 * rock.size - 1e-9


class TestInitAsteroid:

    def test_spawn_position_used_verbatim(self):
        spawn = Vector(12.5, -7.25)
        rock = init_asteroid(spawn, 3, 3).eval(9)
        assert rock.position is spawn
        assert rock.size == 3

    @pytest.mark.parametrize("seed", SEEDS)
    def test_size_range(self, seed):
        assert 1 <= init_asteroid(None, 1, 3).eval(seed).size <= 3

    @pytest.mark.parametrize("seed", SEEDS)
    def test_kinematics_ranges(self, seed):
        rock = init_asteroid(Vector(0.0, 0.0), 1, 3).eval(seed)
        speed = rock.velocity.length()
        upper = 180.0 / rock.size ** 2
        assert min(60.0, upper) - 1e-9 <= speed <= max(60.0, upper) + 1e-9
        assert -0.5 <= rock.rotation_velocity <= 0.5
        assert 0.0 <= rock.rotation <= 2 * math.pi

    @pytest.mark.parametrize("seed", SEEDS)
    def test_outline_radii(self, seed):
        rock = init_asteroid(Vector(0.0, 0.0), 2, 2).eval(seed)
        ideal = 2 * 16.0
        for p in rock.points:
            assert 0.8 * 0.95 * ideal - 1e-9 <= p.length() <= 1.2 * 1.05 * ideal + 1e-9

    @pytest.mark.parametrize("seed", SEEDS)
    def test_outline_is_star_shaped(self, seed):
        points = init_asteroid(None, 5, 5).eval(seed).points
        steps = _angle_steps(points)
        sector = 2 * math.pi / len(points)
        # Each vertex stays within 30% of its own sector, so neighbours never swap.
        assert all(0.4 * sector - 1e-9 <= s <= 1.6 * sector + 1e-9 for s in steps)
        assert sum(steps) == pytest.approx(2 * math.pi)

    def test_outline_vertex_count(self):
        counts = {len(random_outline(10.0).eval(seed)) for seed in range(200)}
        assert counts <= set(range(10, 17))
        assert len(counts) > 3


class TestSafeZonePush:

    def test_pushed_along_own_direction(self):
        pushed = push_out_of_safe_zone(Vector(3.0, 4.0), 10.0)
        assert pushed.x == pytest.approx(6.0)
        assert pushed.y == pytest.approx(8.0)

    def test_far_point_unchanged(self):
        v = Vector(300.0, 0.0)
        assert push_out_of_safe_zone(v, 150.0) is v

    def test_exact_centre(self):
        assert push_out_of_safe_zone(Vector(0.0, 0.0), 10.0) == Vector(10.0, 0.0)
