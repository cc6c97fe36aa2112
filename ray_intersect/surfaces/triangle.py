from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np
import numpy.typing as npt

from ray_intersect.surfaces.plane import Plane
from ray_intersect.surfaces.shape import Shape
from ray_intersect.typings.intersection import Intersection
from ray_intersect.typings.line import Line
from ray_intersect.utils.vector_operations import (
    as_vector,
    format_vector,
    freeze_vector,
    is_zero_vector,
    vector_cross,
    vector_dot,
    vector_length,
)

logger = logging.getLogger(__name__)


class Triangle(Shape):
    """A triangle with vertices `a`, `b`, `c` in counter-clockwise order seen from its visible face.

    The vertex order fixes the normal direction (ab x ac). Intersections go
    through the triangle's own Plane and are then classified with barycentric
    coordinates, which are handed back with the hit so callers can interpolate
    per-vertex attributes.
    """

    __slots__ = ("a", "b", "c", "ab", "ac", "d00", "d01", "d11", "denom", "plane")

    def __init__(self, a: np.ndarray, b: np.ndarray, c: np.ndarray) -> None:
        self.a: np.ndarray = freeze_vector(a)
        self.b: np.ndarray = freeze_vector(b)
        self.c: np.ndarray = freeze_vector(c)

        self.ab: np.ndarray = freeze_vector(self.b - self.a)
        self.ac: np.ndarray = freeze_vector(self.c - self.a)

        # Gram matrix of the (ab, ac) basis, reused by every barycentric solve
        self.d00: float = vector_dot(self.ab, self.ab)
        self.d01: float = vector_dot(self.ab, self.ac)
        self.d11: float = vector_dot(self.ac, self.ac)
        self.denom: float = self.d00 * self.d11 - self.d01 * self.d01
        face_normal = vector_cross(self.ab, self.ac)
        if self.denom == 0.0 or is_zero_vector(face_normal):
            logger.debug(
                "Rejected triangle %s %s %s",
                format_vector(self.a),
                format_vector(self.b),
                format_vector(self.c),
            )
            raise ValueError("Triangle vertices are collinear")

        # Plane normalizes the raw face normal
        self.plane: Plane = Plane(self.a, face_normal)

    @property
    def vertices(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.a, self.b, self.c

    @property
    def area(self) -> float:
        return 0.5 * vector_length(vector_cross(self.ab, self.ac))

    def barycentric(self, p: np.ndarray) -> np.ndarray:
        """Barycentric coordinates (alpha, beta, gamma) of `p`, aligned with vertices (a, b, c).

        The components always sum to 1. For a point coplanar with the
        triangle, all three in [0, 1] means the point is inside or on an edge,
        and `alpha * a + beta * b + gamma * c` gives the point back.
        """
        ap = as_vector(p) - self.a
        d20 = vector_dot(ap, self.ab)
        d21 = vector_dot(ap, self.ac)
        beta = (self.d11 * d20 - self.d01 * d21) / self.denom
        gamma = (self.d00 * d21 - self.d01 * d20) / self.denom
        return np.array([1.0 - beta - gamma, beta, gamma], dtype=float)

    @staticmethod
    def contains_barycentric(barycentric: np.ndarray) -> bool:
        return bool(np.all((barycentric >= 0.0) & (barycentric <= 1.0)))

    @staticmethod
    def interpolate(
        barycentric: np.ndarray,
        value_a: npt.ArrayLike,
        value_b: npt.ArrayLike,
        value_c: npt.ArrayLike,
    ) -> np.ndarray:
        """Blend per-vertex attributes (scalars or vectors) with barycentric weights."""
        alpha, beta, gamma = (float(weight) for weight in barycentric)
        return (
            alpha * np.asarray(value_a, dtype=float)
            + beta * np.asarray(value_b, dtype=float)
            + gamma * np.asarray(value_c, dtype=float)
        )

    def normal(self, point: np.ndarray) -> np.ndarray:
        return self.plane.n

    def intersects(self, line: Line) -> List[float]:
        intersections = self.plane.intersects(line)
        if not intersections:
            return intersections

        hit_point = line.calc_point(intersections[0])
        if self.contains_barycentric(self.barycentric(hit_point)):
            return intersections
        return []

    def closest_intersection(self, line: Line) -> Intersection | None:
        plane_intersection = self.plane.closest_intersection(line)
        if plane_intersection is None:
            return None

        hit_point = line.calc_point(plane_intersection.lambda_)
        barycentric = self.barycentric(hit_point)
        if not self.contains_barycentric(barycentric):
            return None
        return Intersection(lambda_=plane_intersection.lambda_, barycentric=barycentric)

    def __repr__(self) -> str:
        return f"Triangle(a={format_vector(self.a)}, b={format_vector(self.b)}, c={format_vector(self.c)})"
