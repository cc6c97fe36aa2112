from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from ray_intersect.surfaces.shape import Shape
from ray_intersect.typings.intersection import Intersection
from ray_intersect.typings.line import Line
from ray_intersect.utils.vector_operations import (
    as_vector,
    format_vector,
    freeze_vector,
    normalize_direction,
    vector_dot,
    vector_length_squared,
)


class Sphere(Shape):
    __slots__ = ("c", "r")

    def __init__(self, c: np.ndarray, r: float) -> None:
        self.c: np.ndarray = freeze_vector(c)
        self.r: float = float(r)

    def normal(self, point: np.ndarray) -> np.ndarray:
        """Outward normal; only meaningful for points on the surface."""
        return normalize_direction(as_vector(point) - self.c)

    def _quadratic(self, line: Line) -> Tuple[float, float]:
        # qa * lambda^2 + b * lambda + c = 0, with qa = |v|^2 != 0 guaranteed by Line
        center_to_pivot = line.a - self.c
        quadratic_b = 2.0 * vector_dot(line.v, center_to_pivot)
        quadratic_c = vector_length_squared(center_to_pivot) - self.r * self.r
        discriminant = quadratic_b * quadratic_b - 4.0 * line.qa * quadratic_c
        return quadratic_b, discriminant

    def intersects(self, line: Line) -> List[float]:
        quadratic_b, discriminant = self._quadratic(line)
        if discriminant > 0.0:
            sqrt_discriminant = math.sqrt(discriminant)
            return [
                (-quadratic_b + sqrt_discriminant) / (2.0 * line.qa),
                (-quadratic_b - sqrt_discriminant) / (2.0 * line.qa),
            ]
        if discriminant == 0.0:
            # tangent
            return [-quadratic_b / (2.0 * line.qa)]
        return []

    def closest_intersection(self, line: Line) -> Intersection | None:
        quadratic_b, discriminant = self._quadratic(line)
        if discriminant > 0.0:
            sqrt_discriminant = math.sqrt(discriminant)
            t_far = (-quadratic_b + sqrt_discriminant) / (2.0 * line.qa)
            t_near = (-quadratic_b - sqrt_discriminant) / (2.0 * line.qa)
            if t_near > t_far:
                t_near, t_far = t_far, t_near

            if t_near > 0.0:
                return Intersection(lambda_=t_near)
            if t_far > 0.0:
                return Intersection(lambda_=t_far)
            return None

        if discriminant == 0.0:
            t_tangent = -quadratic_b / (2.0 * line.qa)
            if t_tangent > 0.0:
                return Intersection(lambda_=t_tangent)
        return None

    def __repr__(self) -> str:
        return f"Sphere(c={format_vector(self.c)}, r={self.r:g})"
