"""Native tracking convention -> render engine convention.

Native tracking space is right-handed (x right, y up, -z forward). The
engine expects a left-handed frame where +z is forward. The mapping is a
fixed pair of sign flips:

- rotation: quaternion x and y negated (handedness flip about Z)
- position: z negated

These are the only conversions supported; there is no engine parameter.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .quaternion import quaternion_from_matrix
from .transform import as_transform


@dataclass(frozen=True)
class EnginePose:
    """Pose in engine convention.

    position:
      [x, y, z], meters.
    quaternion:
      [w, x, y, z].
    """

    position: np.ndarray
    quaternion: np.ndarray


def to_engine_rotation(m) -> np.ndarray:
    q = quaternion_from_matrix(m)
    return np.array([q[0], -q[1], -q[2], q[3]], dtype=np.float64)


def to_engine_position(m) -> np.ndarray:
    m = as_transform(m)
    return np.array([m[0, 3], m[1, 3], -m[2, 3]], dtype=np.float64)


def to_engine_pose(m) -> EnginePose:
    return EnginePose(position=to_engine_position(m), quaternion=to_engine_rotation(m))
