from ray_intersect.surfaces.plane import Plane
from ray_intersect.surfaces.shape import Shape
from ray_intersect.surfaces.sphere import Sphere
from ray_intersect.surfaces.triangle import Triangle

__all__ = ["Plane", "Shape", "Sphere", "Triangle"]
