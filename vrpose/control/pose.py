"""Pose data structures for tracked devices."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class TrackedPose:
    """Device pose in the standing tracking universe.

    transform:
      3x4 rigid transform, meters.
    valid:
      False when the runtime reported the pose as not tracked.
    """

    transform: np.ndarray
    valid: bool = True
