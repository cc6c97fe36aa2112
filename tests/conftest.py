"""Shared fixtures for the intersection tests."""

import pytest

from ray_intersect import Plane, Sphere, Triangle


@pytest.fixture
def sphere_r2():
    """Sphere of radius 2 centered at the origin."""
    return Sphere((0.0, 0.0, 0.0), 2.0)


@pytest.fixture
def diagonal_plane():
    """Plane through the origin with normal (1, 1, 0)."""
    return Plane((0.0, 0.0, 0.0), (1.0, 1.0, 0.0))


@pytest.fixture
def yz_triangle():
    """Triangle in the x=0 plane with vertices (0,0,0), (0,0,10), (0,10,0)."""
    return Triangle((0.0, 0.0, 0.0), (0.0, 0.0, 10.0), (0.0, 10.0, 0.0))
