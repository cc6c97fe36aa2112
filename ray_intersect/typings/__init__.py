from ray_intersect.typings.hit import Hit
from ray_intersect.typings.intersection import Intersection
from ray_intersect.typings.line import Line

__all__ = ["Hit", "Intersection", "Line"]
