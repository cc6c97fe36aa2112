from __future__ import annotations

import numpy as np

EPSILON: float = 1e-9  # tolerance for vector equality


def as_vector(v) -> np.ndarray:
    """Converts any three-number array-like into a float vector of shape (3,)."""
    vector_array = np.array(v, dtype=float)
    if vector_array.shape != (3,):
        raise ValueError(f"Expected a 3D vector, got shape {vector_array.shape}")
    return vector_array


def freeze_vector(v) -> np.ndarray:
    """Read-only float copy of `v`, for vectors stored on value objects."""
    vector_array = as_vector(v)
    vector_array.flags.writeable = False
    return vector_array


def vector_length_squared(v: np.ndarray) -> float:
    x, y, z = (float(component) for component in v)
    return x * x + y * y + z * z


def vector_length(v: np.ndarray) -> float: # Euclidean length (magnitude) of a vector
    vector_array = np.asarray(v, dtype=float)
    return float(np.linalg.norm(vector_array))


def is_zero_vector(v: np.ndarray) -> bool:
    # exact zero only
    return not np.any(np.asarray(v, dtype=float))


def _scaled(v: np.ndarray) -> np.ndarray | None:
    # dividing by the largest component first keeps tiny vectors from underflowing in the norm
    vector_array = np.asarray(v, dtype=float)
    scale = float(np.max(np.abs(vector_array)))
    if scale == 0.0:
        return None
    return vector_array / scale


def normalize_vector(v: np.ndarray) -> np.ndarray:
    scaled = _scaled(v)
    if scaled is None:
        raise ValueError("Cannot normalize zero vector")
    return scaled / np.linalg.norm(scaled)


def normalize_direction(v: np.ndarray) -> np.ndarray:
    """Like normalize_vector, but a zero input yields the zero vector instead of raising."""
    scaled = _scaled(v)
    if scaled is None:
        return np.zeros(3, dtype=float)
    return scaled / np.linalg.norm(scaled)


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray: # cross product of two vectors (3D)
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return np.cross(vector_a, vector_b)


def vectors_equal(a: np.ndarray, b: np.ndarray, tolerance: float = EPSILON) -> bool:
    """Component-wise equality within an absolute tolerance (no relative term)."""
    return bool(np.allclose(np.asarray(a, dtype=float), np.asarray(b, dtype=float), rtol=0.0, atol=tolerance))


def format_vector(v: np.ndarray) -> str:
    x, y, z = (float(component) for component in v)
    return f"({x:g}, {y:g}, {z:g})"
