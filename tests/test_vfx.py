"""Tests for debris particles."""
import pytest

from config import DEBRIS_MIN_LIFE, DEBRIS_MAX_LIFE
from game.geometry.shapes import Segment
from game.geometry.vector import Bounds, Vector
from game.graphics.vfx import Particle, VFXSystem, segment_particles


class TestSegmentParticles:

    def test_one_particle_per_segment_on_the_edge(self):
        segs = [Segment(Vector(0.0, 5.0), Vector(10.0, 5.0)), Segment(Vector(10.0, 5.0), Vector(10.0, 15.0))]
        first, second = segment_particles(Vector(0.0, 0.0), segs).eval(21)
        assert first.y == pytest.approx(5.0)
        assert 0.0 <= first.x <= 10.0
        assert second.x == pytest.approx(10.0)
        assert 5.0 <= second.y <= 15.0
        for p in (first, second):
            assert DEBRIS_MIN_LIFE <= p.life <= DEBRIS_MAX_LIFE

    def test_no_segments_no_particles(self):
        assert segment_particles(Vector(1.0, 1.0), []).run(8) == ([], 8)

    def test_deterministic(self):
        segs = [Segment(Vector(0.0, 0.0), Vector(1.0, 1.0))]
        assert segment_particles(Vector(2.0, 0.0), segs).run(3) == segment_particles(Vector(2.0, 0.0), segs).run(3)


class TestVFXSystem:

    def test_expired_particles_removed(self):
        vfx = VFXSystem(Bounds(100, 100))
        vfx.emit([Particle(0.0, 0.0, 0.0, 0.0, life=0.1), Particle(0.0, 0.0, 0.0, 0.0, life=1.0)])
        vfx.update(0.5)
        assert len(vfx.particles) == 1

    def test_particles_wrap(self):
        vfx = VFXSystem(Bounds(100, 100))
        vfx.emit([Particle(49.0, 0.0, 100.0, 0.0, life=5.0)])
        vfx.update(0.1)
        assert -50.0 <= vfx.particles[0].x <= 50.0

    def test_disabled_drops_everything(self):
        vfx = VFXSystem()
        vfx.emit([Particle(0.0, 0.0, 0.0, 0.0, life=1.0)])
        vfx.enabled = False
        vfx.update(0.1)
        assert vfx.particles == []
