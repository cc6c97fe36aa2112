"""Tests for nearest-hit queries over a collection of shapes."""

import numpy as np
import pytest

from ray_intersect import Line, Plane, Sphere, Triangle, find_closest_hit, is_occluded


@pytest.fixture
def scene(sphere_r2):
    floor = Plane((0.0, 0.0, -5.0), (0.0, 0.0, 1.0))
    wall = Triangle((-10.0, -10.0, -3.0), (10.0, -10.0, -3.0), (0.0, 10.0, -3.0))
    return [floor, wall, sphere_r2]


class TestFindClosestHit:
    """Tests for find_closest_hit."""

    def test_nearest_shape_wins(self, scene, sphere_r2):
        line = Line((0.0, 0.0, 10.0), (0.0, 0.0, 9.0))
        hit = find_closest_hit(line, scene)
        assert hit is not None
        assert hit.shape is sphere_r2
        assert hit.t == pytest.approx(8.0)
        np.testing.assert_allclose(hit.point, (0.0, 0.0, 2.0))
        np.testing.assert_allclose(hit.normal, (0.0, 0.0, 1.0))

    def test_order_does_not_change_result(self, scene, sphere_r2):
        line = Line((0.0, 0.0, 10.0), (0.0, 0.0, 9.0))
        assert find_closest_hit(line, list(reversed(scene))).shape is sphere_r2

    def test_triangle_hit_carries_barycentric(self, scene):
        line = Line((0.0, 5.0, 10.0), (0.0, 5.0, 9.0))
        hit = find_closest_hit(line, scene)
        assert isinstance(hit.shape, Triangle)
        assert hit.t == pytest.approx(13.0)
        assert hit.intersection.barycentric.sum() == pytest.approx(1.0)

    def test_max_distance_limits_hits(self, scene):
        line = Line((0.0, 0.0, 10.0), (0.0, 0.0, 9.0))
        assert find_closest_hit(line, scene, max_distance=5.0) is None

    def test_shapes_behind_pivot_are_ignored(self, scene):
        line = Line((0.0, 0.0, 10.0), (0.0, 0.0, 11.0))
        assert find_closest_hit(line, scene) is None

    def test_tie_keeps_first_shape(self):
        first = Sphere((0.0, 0.0, 0.0), 1.0)
        second = Sphere((0.0, 0.0, 0.0), 1.0)
        line = Line((0.0, 0.0, 5.0), (0.0, 0.0, 4.0))
        assert find_closest_hit(line, [first, second]).shape is first

    def test_empty_scene(self):
        line = Line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
        assert find_closest_hit(line, []) is None


class TestIsOccluded:
    """Tests for is_occluded."""

    def test_blocked_segment(self, sphere_r2):
        line = Line((0.0, 0.0, 10.0), (0.0, 0.0, -10.0))
        assert is_occluded(line, [sphere_r2])

    def test_clear_segment(self, sphere_r2):
        line = Line((0.0, 0.0, 10.0), (0.0, 0.0, 5.0))
        assert not is_occluded(line, [sphere_r2])
        assert is_occluded(line, [sphere_r2], max_distance=2.0)


def test_hit_normal_cannot_change_shape():
    """Shading code flipping a hit normal must not reach back into the shape."""
    floor = Plane((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
    line = Line((0.0, 0.0, 5.0), (0.0, 0.0, 4.0))
    hit = find_closest_hit(line, [floor])
    with pytest.raises(ValueError):
        hit.normal *= -1.0
    facing = -hit.normal
    np.testing.assert_allclose(facing, (0.0, 0.0, -1.0))
    np.testing.assert_allclose(floor.n, (0.0, 0.0, 1.0))
