"""
Pose offset demo:
- Fixed input pose from config (position + yaw/pitch/roll)
- Offset (local or world axes) + X/Y/Z rotation applied per tick
- Optional eased ramp-in of the adjustment
- Display provider renders position, YPR, quaternion and engine-convention pose
- Chaperone bounds for a box room shifted by the same offset (floor corners pinned)
"""

from __future__ import annotations

import logging
import math

import numpy as np

from .config import parse_args
from .control.chaperone import box_bounds, offset_bounds, offset_standing_pose, quad_centroid
from .control.controller import PoseOffsetController
from .control.display_provider import NullDisplayProvider, TuiDisplayProvider
from .control.pose_provider import RecordingPoseSink, StaticPoseSource
from .math3d import transform
from .math3d.coords import to_engine_pose
from .math3d.easing import get_easing
from .math3d.quaternion import YPR, transform_from_ypr

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_input_pose(cfg) -> np.ndarray:
    ypr = YPR(
        yaw=math.radians(cfg.pose_yaw),
        pitch=math.radians(cfg.pose_pitch),
        roll=math.radians(cfg.pose_roll),
    )
    m = transform.add_vector(
        transform_from_ypr(ypr),
        np.array([cfg.pose_x, cfg.pose_y, cfg.pose_z], dtype=np.float64),
    )
    logger.info("[SCENE] input pose:\n%s", transform.to_value_string(m))
    return m


def build_display_provider(cfg):
    if cfg.display_provider == "tui":
        return TuiDisplayProvider(cli_output=cfg.cli_output)
    if cfg.display_provider == "none":
        return NullDisplayProvider()
    raise RuntimeError(f"Unsupported display provider: {cfg.display_provider}")


def config_offset(cfg) -> np.ndarray:
    return np.array([cfg.offset_x, cfg.offset_y, cfg.offset_z], dtype=np.float64)


def report_chaperone(cfg) -> None:
    offset = config_offset(cfg)
    bounds = box_bounds(cfg.play_area_width, cfg.play_area_depth, cfg.wall_height)
    moved = offset_bounds(bounds, offset)
    standing = offset_standing_pose(transform.identity(), offset)
    for i, quad in enumerate(moved):
        c = quad_centroid(quad)
        logger.info(
            "[CHAPERONE] wall %d centroid=(%.3f, %.3f, %.3f) corners=%s",
            i,
            c[0],
            c[1],
            c[2],
            [tuple(round(float(v), 3) for v in corner) for corner in quad],
        )
    logger.info("[CHAPERONE] standing zero pose:\n%s", transform.to_value_string(standing))


def main(argv=None):
    cfg = parse_args(argv)
    configure_logging(cfg.log_level)

    source = StaticPoseSource(build_input_pose(cfg))
    sink = RecordingPoseSink()
    display_provider = build_display_provider(cfg)
    controller = PoseOffsetController(
        pose_source=source,
        pose_sink=sink,
        offset=config_offset(cfg),
        rotation=np.array([cfg.rotate_x, cfg.rotate_y, cfg.rotate_z], dtype=np.float64),
        local_axis=cfg.local_axis,
        degrees=cfg.degrees,
        display_provider=display_provider,
        display_hz=cfg.display_hz,
        ramp_ticks=cfg.ramp_ticks,
        easing=get_easing(cfg.easing, cfg.easing_mode),
    )
    logger.info(
        "[SCENE] offset=%s local_axis=%s rotation=%s %s",
        config_offset(cfg).tolist(),
        cfg.local_axis,
        [cfg.rotate_x, cfg.rotate_y, cfg.rotate_z],
        "deg" if cfg.degrees else "rad",
    )

    try:
        controller.run(cfg.ticks, interval_s=cfg.tick_interval_ms / 1000.0)
    finally:
        display_provider.close()
        sink.close()
        source.close()

    if sink.last is not None:
        engine = to_engine_pose(sink.last)
        logger.info("[POSE] adjusted pose:\n%s", transform.to_value_string(sink.last))
        logger.info(
            "[POSE] engine position=%s quaternion=%s",
            np.round(engine.position, 4).tolist(),
            np.round(engine.quaternion, 4).tolist(),
        )
    report_chaperone(cfg)
    return 0


if __name__ == "__main__":
    main()
