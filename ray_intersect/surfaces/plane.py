from __future__ import annotations

import logging
from typing import List

import numpy as np

from ray_intersect.surfaces.shape import Shape
from ray_intersect.typings.intersection import Intersection
from ray_intersect.typings.line import Line
from ray_intersect.utils.vector_operations import (
    as_vector,
    format_vector,
    freeze_vector,
    is_zero_vector,
    normalize_vector,
    vector_dot,
)

logger = logging.getLogger(__name__)


class Plane(Shape):
    __slots__ = ("a", "n", "d")

    def __init__(self, a: np.ndarray, n: np.ndarray) -> None:
        pivot = freeze_vector(a)
        normal = as_vector(n)
        if is_zero_vector(normal):
            logger.debug("Rejected plane through %s with zero normal", format_vector(pivot))
            raise ValueError("Plane normal cannot be zero")

        self.a: np.ndarray = pivot
        self.n: np.ndarray = freeze_vector(normalize_vector(normal))
        self.d: float = -vector_dot(self.n, pivot)  # independent term of n.x + d = 0

    def normal(self, point: np.ndarray) -> np.ndarray:
        return self.n

    def _lambda(self, line: Line) -> float | None:
        denom = vector_dot(self.n, line.v)
        # Parallel and embedded lines both report no discrete intersection.
        if denom == 0.0:
            return None
        return (-vector_dot(self.n, line.a) - self.d) / denom

    def intersects(self, line: Line) -> List[float]:
        lambda_ = self._lambda(line)
        if lambda_ is None:
            return []
        return [lambda_]

    def closest_intersection(self, line: Line) -> Intersection | None:
        lambda_ = self._lambda(line)
        if lambda_ is None:
            return None
        return Intersection(lambda_=lambda_)

    def __repr__(self) -> str:
        return f"Plane(a={format_vector(self.a)}, n={format_vector(self.n)})"
