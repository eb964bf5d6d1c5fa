"""Pose source/sink interfaces.

The tracking runtime is reached only through these objects, injected into
the controller, so the math never depends on a live session.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..math3d.transform import as_transform
from .pose import TrackedPose


def _frozen_pose(m: np.ndarray, valid: bool = True) -> TrackedPose:
    arr = as_transform(m)
    arr.flags.writeable = False
    return TrackedPose(transform=arr, valid=valid)


class PoseSource:
    """Base interface for pose sources (runtime bindings, replays, fixed poses)."""

    def get_pose(self) -> TrackedPose:
        raise NotImplementedError

    def close(self) -> None:
        pass


class StaticPoseSource(PoseSource):
    """Always returns the same pose. Its transform is read-only."""

    def __init__(self, m: np.ndarray):
        self._pose = _frozen_pose(m)

    def get_pose(self) -> TrackedPose:
        return self._pose


class ScriptedPoseSource(PoseSource):
    """Replays a fixed sequence of poses, then repeats the last one.

    Entries may be transforms or TrackedPose values; None marks a dropped
    (untracked) sample.
    """

    def __init__(self, poses: Iterable):
        self._poses = []
        for p in poses:
            if p is None:
                self._poses.append(_frozen_pose(np.zeros((3, 4)), valid=False))
            elif isinstance(p, TrackedPose):
                self._poses.append(p)
            else:
                self._poses.append(_frozen_pose(p))
        if not self._poses:
            raise ValueError("ScriptedPoseSource needs at least one pose")
        self._i = 0

    def get_pose(self) -> TrackedPose:
        pose = self._poses[min(self._i, len(self._poses) - 1)]
        self._i += 1
        return pose


class PoseSink:
    """Base interface for consumers of adjusted poses."""

    def submit(self, m: np.ndarray) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class RecordingPoseSink(PoseSink):
    """Keeps every submitted transform in memory."""

    def __init__(self):
        self.submitted: list[np.ndarray] = []

    def submit(self, m: np.ndarray) -> None:
        self.submitted.append(as_transform(m))

    @property
    def last(self) -> np.ndarray | None:
        return self.submitted[-1] if self.submitted else None
