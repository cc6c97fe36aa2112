from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from ray_intersect.typings.intersection import Intersection
from ray_intersect.typings.line import Line


class Shape(ABC):
    """A surface that can be intersected by a Line.

    Lambdas returned by `intersects` and `closest_intersection` are line
    parameters: `line.calc_point(lambda_)` gives the hit point and
    `shape.normal(point)` the surface normal there.
    """

    __slots__ = ()

    @abstractmethod
    def normal(self, point: np.ndarray) -> np.ndarray:
        """Unit normal of the shape at `point`."""

    @abstractmethod
    def intersects(self, line: Line) -> List[float]:
        """Every lambda where the line meets the shape.

        A line parallel to the shape, or lying in it, gives an empty list.
        """

    @abstractmethod
    def closest_intersection(self, line: Line) -> Intersection | None:
        """The nearest intersection ahead of the line pivot (lambda_ > 0), if any.

        Shapes that can be hit at most once (planes, triangles) return that
        hit whatever the sign of its lambda_; callers wanting forward hits only
        filter on `lambda_ > 0`.
        """
