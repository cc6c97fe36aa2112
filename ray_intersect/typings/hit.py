from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ray_intersect.typings.intersection import Intersection

if TYPE_CHECKING:
    from ray_intersect.surfaces.shape import Shape


@dataclass(frozen=True, slots=True)
class Hit:
    intersection: Intersection
    point: np.ndarray
    normal: np.ndarray
    shape: Shape

    @property
    def t(self) -> float:
        return self.intersection.lambda_
