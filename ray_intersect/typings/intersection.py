from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Intersection:
    lambda_: float
    barycentric: np.ndarray | None = None
