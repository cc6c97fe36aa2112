"""Ray intersection kernel for planes, spheres and triangles.

    >>> from ray_intersect import Line, Sphere
    >>> line = Line((0, 0, -10), (0, 0, 0))
    >>> Sphere((0, 0, 0), 2.0).closest_intersection(line).lambda_
    0.8
"""

from ray_intersect.surfaces import Plane, Shape, Sphere, Triangle
from ray_intersect.typings import Hit, Intersection, Line
from ray_intersect.utils.closest_hit import find_closest_hit, is_occluded
from ray_intersect.utils.vector_operations import EPSILON, as_vector, vectors_equal

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "Hit",
    "Intersection",
    "Line",
    "Plane",
    "Shape",
    "Sphere",
    "Triangle",
    "as_vector",
    "find_closest_hit",
    "is_occluded",
    "vectors_equal",
]
