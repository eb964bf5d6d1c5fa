"""Display providers for rendering the adjusted pose as text."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

import numpy as np

from ..math3d.coords import EnginePose
from ..math3d.quaternion import YPR

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DisplayFrame:
    """Runtime frame data shared by all display providers."""

    transform: np.ndarray
    ypr: YPR
    quaternion: np.ndarray
    engine_pose: EnginePose
    ticks: int
    dropped: int


class DisplayProvider:
    """Base display provider interface."""

    def update(self, frame: DisplayFrame) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class NullDisplayProvider(DisplayProvider):
    def update(self, frame: DisplayFrame) -> None:  # noqa: ARG002
        pass


def _status_lines(frame: DisplayFrame) -> list[str]:
    m = frame.transform
    q = frame.quaternion
    ep = frame.engine_pose.position
    eq = frame.engine_pose.quaternion
    yaw, pitch, roll = frame.ypr.degrees()
    return [
        "vrpose adjusted pose",
        f"position xyz (m) = [{m[0, 3]: .3f}, {m[1, 3]: .3f}, {m[2, 3]: .3f}]",
        f"yaw/pitch/roll   = ({yaw: 7.2f}, {pitch: 7.2f}, {roll: 7.2f}) deg",
        f"q=[w,x,y,z]      = [{q[0]: .4f}, {q[1]: .4f}, {q[2]: .4f}, {q[3]: .4f}]",
        f"engine xyz (m)   = [{ep[0]: .3f}, {ep[1]: .3f}, {ep[2]: .3f}]",
        f"engine q         = [{eq[0]: .4f}, {eq[1]: .4f}, {eq[2]: .4f}, {eq[3]: .4f}]",
        f"ticks/dropped    = {frame.ticks}/{frame.dropped}",
    ]


class _CliStatsSink:
    def __init__(self, mode: str):
        self.mode = "live" if mode == "live" else "scroll"
        self._is_tty = bool(getattr(sys.stderr, "isatty", lambda: False)())
        self._live_enabled = self.mode == "live" and self._is_tty
        self._line_count = 0

    def emit(self, lines: list[str], scroll_line: str) -> None:
        if not self._live_enabled:
            logger.info(scroll_line)
            return

        out = sys.stderr
        if self._line_count > 0:
            out.write(f"\x1b[{self._line_count}F")

        max_lines = max(self._line_count, len(lines))
        for i in range(max_lines):
            line = lines[i] if i < len(lines) else ""
            out.write("\x1b[2K")
            out.write(line)
            out.write("\n")
        out.flush()
        self._line_count = len(lines)


class TuiDisplayProvider(DisplayProvider):
    """Terminal text display: in-place panel on a TTY, log lines otherwise."""

    def __init__(self, cli_output: str = "live"):
        self.cli_sink = _CliStatsSink(cli_output)

    def update(self, frame: DisplayFrame) -> None:
        m = frame.transform
        yaw, pitch, roll = frame.ypr.degrees()
        self.cli_sink.emit(
            lines=_status_lines(frame),
            scroll_line=(
                "[POSE] xyz=(%.3f, %.3f, %.3f) ypr=(%.2f, %.2f, %.2f) tick=%d dropped=%d"
                % (m[0, 3], m[1, 3], m[2, 3], yaw, pitch, roll, frame.ticks, frame.dropped)
            ),
        )
