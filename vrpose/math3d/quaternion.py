"""Quaternion bridge between 3x4 transforms and yaw/pitch/roll.

Quaternions are [w, x, y, z] float64 arrays. They are used here only as an
intermediate that avoids the discontinuities of direct matrix->Euler
extraction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .transform import as_transform

# |x*y + z*w| above this is treated as a pole.
POLE_THRESHOLD = 0.499


@dataclass(frozen=True)
class YPR:
    """Yaw/pitch/roll in radians.

    Naming follows the tracking runtime, not the textbook decomposition:
    yaw is heading about +Y, roll is the attitude about +Z and pitch is the
    bank about +X.
    """

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    @classmethod
    def from_vector(cls, v) -> "YPR":
        """Build from a [pitch, yaw, roll] vector (see transform.euler_angles)."""
        return cls(yaw=float(v[1]), pitch=float(v[0]), roll=float(v[2]))

    def as_vector(self) -> np.ndarray:
        return np.array([self.pitch, self.yaw, self.roll], dtype=np.float64)

    def degrees(self) -> tuple[float, float, float]:
        return (
            math.degrees(self.yaw),
            math.degrees(self.pitch),
            math.degrees(self.roll),
        )


def quaternion_from_matrix(m) -> np.ndarray:
    """Unit quaternion [w, x, y, z] of the rotation block of m.

    Uses the trace branch only: the rotation trace must stay above -1
    (rotations short of 180 degrees). At a half turn w -> 0, and once rounding
    pushes the trace below -1 the components come back NaN with a numpy
    RuntimeWarning. There is no alternate-axis fallback.
    """
    m = as_transform(m)
    w = np.sqrt(1.0 + m[0, 0] + m[1, 1] + m[2, 2]) / 2.0
    w4 = 4.0 * w
    return np.array(
        [
            w,
            (m[2, 1] - m[1, 2]) / w4,
            (m[0, 2] - m[2, 0]) / w4,
            (m[1, 0] - m[0, 1]) / w4,
        ],
        dtype=np.float64,
    )


def quaternion_to_ypr(q) -> YPR:
    """Gimbal-lock-safe Euler decomposition of q.

    Near the poles (attitude of +/-90 degrees) the bank is pinned to 0 and the
    whole remaining rotation is reported as yaw.
    """
    w, x, y, z = (float(c) for c in q)
    test = x * y + z * w
    if test > POLE_THRESHOLD:
        return YPR(yaw=2.0 * math.atan2(x, w), pitch=0.0, roll=math.pi / 2.0)
    if test < -POLE_THRESHOLD:
        return YPR(yaw=-2.0 * math.atan2(x, w), pitch=0.0, roll=-math.pi / 2.0)

    sqx, sqy, sqz = x * x, y * y, z * z
    return YPR(
        yaw=math.atan2(2.0 * y * w - 2.0 * x * z, 1.0 - 2.0 * sqy - 2.0 * sqz),
        pitch=math.atan2(2.0 * x * w - 2.0 * y * z, 1.0 - 2.0 * sqx - 2.0 * sqz),
        roll=math.asin(2.0 * test),
    )


def matrix_to_ypr(m) -> YPR:
    return quaternion_to_ypr(quaternion_from_matrix(m))


def transform_from_ypr(ypr: YPR) -> np.ndarray:
    """Rotation-only transform Ry(yaw) * Rz(roll) * Rx(pitch), zero translation.

    Inverse of matrix_to_ypr(). Note this is a different composition order
    from transform.from_euler().
    """
    ch, sh = math.cos(ypr.yaw), math.sin(ypr.yaw)
    ca, sa = math.cos(ypr.roll), math.sin(ypr.roll)
    cb, sb = math.cos(ypr.pitch), math.sin(ypr.pitch)
    return np.array(
        [
            [ch * ca, sh * sb - ch * sa * cb, ch * sa * sb + sh * cb, 0.0],
            [sa, ca * cb, -ca * sb, 0.0],
            [-sh * ca, sh * sa * cb + ch * sb, -sh * sa * sb + ch * cb, 0.0],
        ],
        dtype=np.float64,
    )
