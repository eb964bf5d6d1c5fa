"""Control plane for mapping source pose -> adjusted pose -> sink."""

from __future__ import annotations

import logging
import time
from typing import Callable

import numpy as np

from ..math3d import transform
from ..math3d.coords import to_engine_pose
from ..math3d.easing import EasingFunc, linear, tween
from ..math3d.quaternion import quaternion_from_matrix, quaternion_to_ypr
from .display_provider import DisplayFrame, DisplayProvider, NullDisplayProvider
from .pose_provider import PoseSink, PoseSource

logger = logging.getLogger(__name__)


class PoseOffsetController:
    """Applies a fixed offset and rotation to every pose read from a source.

    Per tick the translation is applied first (along the pose's own axes when
    local_axis is set, world axes otherwise), then the X, Y, Z rotation.
    """

    def __init__(
        self,
        pose_source: PoseSource,
        pose_sink: PoseSink,
        offset: np.ndarray,
        rotation: np.ndarray,
        local_axis: bool = True,
        degrees: bool = True,
        display_provider: DisplayProvider | None = None,
        display_hz: float = 5.0,
        ramp_ticks: int = 0,
        easing: EasingFunc | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.pose_source = pose_source
        self.pose_sink = pose_sink
        self.offset = np.asarray(offset, dtype=np.float64).reshape(3)
        self.rotation = np.asarray(rotation, dtype=np.float64).reshape(3)
        self.local_axis = local_axis
        self.degrees = degrees
        self.display_provider = display_provider or NullDisplayProvider()
        self.display_interval = (1.0 / display_hz) if display_hz > 0.0 else 0.0
        self.ramp_ticks = max(0, int(ramp_ticks))
        self.easing = easing or linear
        self.clock = clock

        self.ticks = 0
        self.dropped = 0
        self.last_display_t = 0.0
        self.last_transform: np.ndarray | None = None

    def adjust(self, m: np.ndarray) -> np.ndarray:
        out = transform.translate(m, self.offset, local_axis=self.local_axis)
        ax, ay, az = self.rotation
        return transform.rotate(out, ax, ay, az, degrees=self.degrees)

    def ramp_progress(self) -> float:
        if self.ramp_ticks <= 0:
            return 1.0
        return min(1.0, self.ticks / self.ramp_ticks)

    def tick(self) -> np.ndarray | None:
        self.ticks += 1
        pose = self.pose_source.get_pose()
        if not pose.valid:
            self.dropped += 1
            logger.debug("[POSE] tick %d: pose not valid, skipped", self.ticks)
            return None
        m = transform.as_transform(pose.transform)
        if not np.isfinite(m).all():
            self.dropped += 1
            logger.warning("[POSE] tick %d: non-finite pose, skipped", self.ticks)
            return None

        adjusted = self.adjust(m)
        if self.ramp_ticks > 0:
            # Ease the adjustment in over the first ramp_ticks ticks.
            adjusted = tween(m, adjusted, self.ramp_progress(), self.easing)
        self.pose_sink.submit(adjusted)
        self.last_transform = adjusted

        now = self.clock()
        if self.display_interval > 0.0 and (now - self.last_display_t) >= self.display_interval:
            q = quaternion_from_matrix(adjusted)
            self.display_provider.update(
                DisplayFrame(
                    transform=adjusted,
                    ypr=quaternion_to_ypr(q),
                    quaternion=q,
                    engine_pose=to_engine_pose(adjusted),
                    ticks=self.ticks,
                    dropped=self.dropped,
                )
            )
            self.last_display_t = now
        return adjusted

    def run(self, ticks: int, interval_s: float = 0.0) -> None:
        for _ in range(ticks):
            self.tick()
            if interval_s > 0.0:
                time.sleep(interval_s)
        logger.info("[POSE] ran %d ticks, %d dropped", self.ticks, self.dropped)
