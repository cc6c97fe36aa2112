from __future__ import annotations

import logging
from typing import Iterable

from ray_intersect.surfaces.shape import Shape
from ray_intersect.typings.hit import Hit
from ray_intersect.typings.line import Line

logger = logging.getLogger(__name__)


def find_closest_hit(
    line: Line,
    shapes: Iterable[Shape],
    max_distance: float = float("inf"),
) -> Hit | None:
    """Find the nearest forward intersection of the line with any of the shapes.

    Only lambdas in (0, max_distance) count. On equal lambdas the shape seen
    first wins.
    """
    best_shape: Shape | None = None
    best_intersection = None
    for shape in shapes:
        intersection = shape.closest_intersection(line)
        if intersection is None:
            continue
        if intersection.lambda_ <= 0.0 or intersection.lambda_ >= max_distance:
            continue
        best_shape = shape
        best_intersection = intersection
        max_distance = intersection.lambda_

    if best_shape is None:
        return None

    hit_point = line.calc_point(best_intersection.lambda_)
    logger.debug("Closest hit on %r at lambda=%g", best_shape, best_intersection.lambda_)
    return Hit(
        intersection=best_intersection,
        point=hit_point,
        normal=best_shape.normal(hit_point),
        shape=best_shape,
    )


def is_occluded(line: Line, shapes: Iterable[Shape], max_distance: float = 1.0) -> bool:
    """Check if any shape blocks the line between its pivot and `calc_point(max_distance)`."""
    for shape in shapes:
        intersection = shape.closest_intersection(line)
        if intersection is not None and 0.0 < intersection.lambda_ < max_distance:
            return True
    return False
