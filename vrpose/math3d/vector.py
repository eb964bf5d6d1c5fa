"""3-component vector helpers (positions and directions, meters)."""

from __future__ import annotations

import math

import numpy as np


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=np.float64)


def as_vec3(v) -> np.ndarray:
    """Return a fresh float64 copy of v with shape (3,)."""
    arr = np.array(v, dtype=np.float64)
    if arr.size != 3:
        raise ValueError(f"Expected 3-component vector, got shape {arr.shape}")
    return arr.reshape(3)


def add(a, b) -> np.ndarray:
    return as_vec3(a) + as_vec3(b)


def scale(v, k: float) -> np.ndarray:
    return as_vec3(v) * float(k)


def negate(v) -> np.ndarray:
    return -as_vec3(v)


def dot(a, b) -> float:
    return float(np.dot(as_vec3(a), as_vec3(b)))


def length(v) -> float:
    x, y, z = as_vec3(v)
    return math.sqrt(x * x + y * y + z * z)


def rotate(v, t) -> np.ndarray:
    """Re-express direction v through the rotation of transform t: v' = R*v.

    The translation column of t is ignored.
    """
    m = np.asarray(t, dtype=np.float64)
    if m.shape != (3, 4):
        raise ValueError(f"Expected 3x4 transform, got {m.shape}")
    return m[:, :3] @ as_vec3(v)
