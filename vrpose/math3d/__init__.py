"""Pose math: vectors, 3x4 transforms, quaternions and convention changes."""

from .coords import EnginePose, to_engine_pose, to_engine_position, to_engine_rotation
from .quaternion import (
    YPR,
    matrix_to_ypr,
    quaternion_from_matrix,
    quaternion_to_ypr,
    transform_from_ypr,
)

__all__ = [
    "EnginePose",
    "YPR",
    "matrix_to_ypr",
    "quaternion_from_matrix",
    "quaternion_to_ypr",
    "to_engine_pose",
    "to_engine_position",
    "to_engine_rotation",
    "transform_from_ypr",
]
