from __future__ import annotations

import logging
import math

import numpy as np

from ray_intersect.utils.vector_operations import (
    as_vector,
    format_vector,
    freeze_vector,
    vector_cross,
    vector_length,
    vector_length_squared,
)

logger = logging.getLogger(__name__)


class Line:
    """A line (ray) through pivot point `a` with director vector `v = b - a`.

    Points on the line are `a + v * lambda_`: lambda_ = 0 is `a`, lambda_ = 1 is `b`,
    positive values lie ahead of the pivot. `qa` (|v|^2) is kept for the
    quadratic solves done by the surfaces.
    """

    __slots__ = ("_a", "_v", "_qa")

    def __init__(self, a: np.ndarray, b: np.ndarray) -> None:
        point_a = freeze_vector(a)
        director = freeze_vector(as_vector(b) - point_a)
        qa = vector_length_squared(director)
        if qa == 0.0:
            logger.debug("Rejected line with coincident points %s", format_vector(point_a))
            raise ValueError("Line requires two distinct points")
        self._a: np.ndarray = point_a
        self._v: np.ndarray = director
        self._qa: float = qa

    @property
    def a(self) -> np.ndarray:
        return self._a

    @property
    def v(self) -> np.ndarray:
        return self._v

    @property
    def qa(self) -> float:
        return self._qa

    @property
    def direction(self) -> np.ndarray:
        """Unit-length director vector."""
        return self._v / math.sqrt(self._qa)

    def calc_point(self, lambda_: float) -> np.ndarray:
        return self._a + self._v * lambda_

    def dist_point(self, p: np.ndarray) -> float:
        """Perpendicular distance from `p` to the infinite line.

        |ap x v| is the area of the parallelogram spanned by ap and v; dividing
        by |v| leaves its height, which is the distance.
        """
        ap = as_vector(p) - self._a
        return vector_length(vector_cross(ap, self._v)) / math.sqrt(self._qa)

    def __repr__(self) -> str:
        return f"Line(a={format_vector(self._a)}, v={format_vector(self._v)})"
