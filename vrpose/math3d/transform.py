"""Rigid 3x4 transform algebra for tracking-space poses.

A transform is a float64 array of shape (3, 4). Each row holds one rotation
row followed by one translation component:

    [[r00, r01, r02, tx],
     [r10, r11, r12, ty],
     [r20, r21, r22, tz]]

The bottom row [0, 0, 0, 1] of the equivalent 4x4 matrix is implicit.
Every function returns a new array; inputs are never written to.
"""

from __future__ import annotations

import math

import numpy as np

from . import vector


def identity() -> np.ndarray:
    m = np.zeros((3, 4), dtype=np.float64)
    m[0, 0] = m[1, 1] = m[2, 2] = 1.0
    return m


def as_transform(m) -> np.ndarray:
    """Return a fresh (3, 4) float64 copy of m.

    Accepts a 3x4 nested sequence or 12 row-major values (m0..m11).
    """
    arr = np.array(m, dtype=np.float64)
    if arr.shape == (3, 4):
        return arr
    if arr.size == 12 and arr.ndim == 1:
        return arr.reshape(3, 4)
    raise ValueError(f"Expected 3x4 transform, got shape {arr.shape}")


def translation_matrix(v) -> np.ndarray:
    m = identity()
    m[:, 3] = vector.as_vec3(v)
    return m


def _radians(angle: float, degrees: bool) -> float:
    return math.radians(angle) if degrees else float(angle)


def rotation_x(angle: float, degrees: bool = True) -> np.ndarray:
    a = _radians(angle, degrees)
    c, s = math.cos(a), math.sin(a)
    m = identity()
    m[1, 1], m[1, 2] = c, -s
    m[2, 1], m[2, 2] = s, c
    return m


def rotation_y(angle: float, degrees: bool = True) -> np.ndarray:
    a = _radians(angle, degrees)
    c, s = math.cos(a), math.sin(a)
    m = identity()
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return m


def rotation_z(angle: float, degrees: bool = True) -> np.ndarray:
    a = _radians(angle, degrees)
    c, s = math.cos(a), math.sin(a)
    m = identity()
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def multiply(a, b) -> np.ndarray:
    """Compose two transforms: the result applies b first, then a.

    Callers rely on this order for local-vs-world offsets, so it must not be
    swapped.
    """
    a = as_transform(a)
    b = as_transform(b)
    out = np.empty((3, 4), dtype=np.float64)
    out[:, :3] = a[:, :3] @ b[:, :3]
    out[:, 3] = a[:, :3] @ b[:, 3] + a[:, 3]
    return out


def multiply_scalar(m, k: float) -> np.ndarray:
    """Scale all 12 components. Only meaningful for blending helpers."""
    return as_transform(m) * float(k)


def translate(m, v, local_axis: bool = True) -> np.ndarray:
    """Offset m by v, along m's own axes (local_axis) or the world axes."""
    if not local_axis:
        return add_vector(m, v)
    return multiply(m, translation_matrix(v))


def rotate_x(m, angle: float, degrees: bool = True) -> np.ndarray:
    return multiply(m, rotation_x(angle, degrees))


def rotate_y(m, angle: float, degrees: bool = True) -> np.ndarray:
    return multiply(m, rotation_y(angle, degrees))


def rotate_z(m, angle: float, degrees: bool = True) -> np.ndarray:
    return multiply(m, rotation_z(angle, degrees))


def rotate(m, angle_x: float, angle_y: float, angle_z: float, degrees: bool = True) -> np.ndarray:
    """Rotate about X, then Y, then Z (local axes). The order is fixed."""
    out = rotate_x(m, angle_x, degrees)
    out = rotate_y(out, angle_y, degrees)
    return rotate_z(out, angle_z, degrees)


def rotate_vector_angles(m, angles, degrees: bool = True) -> np.ndarray:
    ax, ay, az = vector.as_vec3(angles)
    return rotate(m, ax, ay, az, degrees)


def add(a, b) -> np.ndarray:
    """Elementwise sum of all 12 components (a blend, not a composition)."""
    return as_transform(a) + as_transform(b)


def subtract(a, b) -> np.ndarray:
    return as_transform(a) - as_transform(b)


def add_vector(m, v) -> np.ndarray:
    """Add v to the translation column (world-space offset)."""
    out = as_transform(m)
    out[:, 3] += vector.as_vec3(v)
    return out


def subtract_vector(m, v) -> np.ndarray:
    out = as_transform(m)
    out[:, 3] -= vector.as_vec3(v)
    return out


def lerp(a, b, t: float) -> np.ndarray:
    """Elementwise linear interpolation of all 12 components.

    Not rotation-aware: the rotation block is not re-orthonormalized, so this
    is only a fair approximation for small angular differences.
    """
    a = as_transform(a)
    b = as_transform(b)
    return a + (b - a) * float(t)


def euler_angles(m) -> np.ndarray:
    """Closed-form Euler extraction for a rotation built as Ry*Rx*Rz.

    Returns [pitch, yaw, roll] in radians (x, y, z rotation amounts), the
    layout accepted by from_euler(). There is no gimbal-lock guard: results
    are unstable when |m[1, 2]| approaches 1. Use
    quaternion.matrix_to_ypr() where that matters.
    """
    m = as_transform(m)
    yaw = math.atan2(m[0, 2], m[2, 2])
    pitch = -math.asin(m[1, 2])
    roll = math.atan2(m[1, 0], m[1, 1])
    return np.array([pitch, yaw, roll], dtype=np.float64)


def from_euler(m, angles) -> np.ndarray:
    """Replace the rotation of m with Ry(angles[1]) * Rx(angles[0]) * Rz(angles[2]).

    Angles are radians. The translation of m is kept.
    """
    ax, ay, az = vector.as_vec3(angles)
    r = multiply(multiply(rotation_y(ay, False), rotation_x(ax, False)), rotation_z(az, False))
    out = as_transform(m)
    out[:, :3] = r[:, :3]
    return out


def get_position(m) -> np.ndarray:
    """Translation column with the first two components swapped.

    Output index 0 is translation y and index 1 is translation x; the
    consuming frame expects this layout.
    """
    m = as_transform(m)
    return np.array([m[1, 3], m[0, 3], m[2, 3]], dtype=np.float64)


def add_vector_local(m, v) -> np.ndarray:
    """Offset m along its own axes: rotate v into m's orientation, then add."""
    return add_vector(m, vector.rotate(v, as_transform(m)))


def angle_between(a, b) -> float:
    """Angle in degrees between the local +Z axes of two transforms."""
    forward = vector.vec3(0.0, 0.0, 1.0)
    va = vector.rotate(forward, as_transform(a))
    vb = vector.rotate(forward, as_transform(b))
    cos = vector.dot(va, vb)
    return math.degrees(math.acos(max(-1.0, min(1.0, cos))))


def to_value_string(m) -> str:
    m = as_transform(m)
    return "\n".join(
        " ".join(f"{m[r, c]: .3f}" for c in range(4)) for r in range(3)
    )
