"""CLI config and defaults."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .math3d.easing import EASING_MODES, EASING_TYPES


@dataclass(frozen=True)
class AppConfig:
    pose_x: float = 0.0
    pose_y: float = 1.6
    pose_z: float = 0.0
    pose_yaw: float = 0.0
    pose_pitch: float = 0.0
    pose_roll: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    offset_z: float = 0.0
    local_axis: bool = True
    rotate_x: float = 0.0
    rotate_y: float = 0.0
    rotate_z: float = 0.0
    degrees: bool = True
    play_area_width: float = 2.0
    play_area_depth: float = 2.0
    wall_height: float = 2.4
    ticks: int = 1
    tick_interval_ms: int = 0
    ramp_ticks: int = 0
    easing: str = "linear"
    easing_mode: str = "out"
    display_provider: str = "tui"
    display_hz: float = 5.0
    cli_output: str = "live"
    log_level: str = "info"


_APP_CONFIG_FIELDS = {f.name for f in fields(AppConfig)}
_BOOL_FIELDS = {"local_axis", "degrees"}
_INT_FIELDS = {"ticks", "tick_interval_ms", "ramp_ticks"}
_FLOAT_FIELDS = {
    "pose_x",
    "pose_y",
    "pose_z",
    "pose_yaw",
    "pose_pitch",
    "pose_roll",
    "offset_x",
    "offset_y",
    "offset_z",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "play_area_width",
    "play_area_depth",
    "wall_height",
    "display_hz",
}
_STRING_FIELDS = {
    "easing",
    "easing_mode",
    "display_provider",
    "cli_output",
    "log_level",
}
_KEY_ALIASES = {
    "world_axis": "local_axis",
    "radians": "degrees",
}
# YAML keys given under their CLI negation are inverted on load.
_NEGATED_ALIASES = {"world_axis", "radians"}


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in {"1", "true", "yes", "on"}:
            return True
        if s in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"config key '{key}' expects a bool, got {value!r}")


def _coerce_config_value(key: str, value: Any) -> Any:
    try:
        if key in _BOOL_FIELDS:
            return _parse_bool(value, key)
        if key in _INT_FIELDS:
            return int(value)
        if key in _FLOAT_FIELDS:
            return float(value)
        if key in _STRING_FIELDS:
            return "" if value is None else str(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid value for config key '{key}': {value!r}") from exc
    raise ValueError(f"unsupported config key '{key}'")


def _normalize_config_key(raw_key: Any) -> tuple[str, bool]:
    if not isinstance(raw_key, str):
        raise ValueError(f"config key must be string, got {type(raw_key).__name__}")
    key = raw_key.strip().replace("-", "_")
    if not key:
        raise ValueError("config key cannot be empty")
    return _KEY_ALIASES.get(key, key), key in _NEGATED_ALIASES


def _load_yaml_config(path: str) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ValueError(f"--config file not found: {p}")
    if not p.is_file():
        raise ValueError(f"--config must point to a file: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"failed to read --config file {p}: {exc}") from exc
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"failed to parse YAML config {p}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"--config root must be a mapping/object, got {type(loaded).__name__}")

    normalized: dict[str, Any] = {}
    for raw_key, raw_value in loaded.items():
        key, negated = _normalize_config_key(raw_key)
        if key not in _APP_CONFIG_FIELDS:
            raise ValueError(f"unknown config key in {p}: {raw_key!r}")
        value = _coerce_config_value(key, raw_value)
        normalized[key] = (not value) if negated else value
    return normalized


def _yaml_defaults_to_argparse_defaults(cfg: dict[str, Any]) -> dict[str, Any]:
    defaults: dict[str, Any] = {}
    for key, value in cfg.items():
        if key == "local_axis":
            defaults["world_axis"] = not bool(value)
        elif key == "degrees":
            defaults["radians"] = not bool(value)
        else:
            defaults[key] = value
    return defaults


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="vrpose",
        description="Apply an offset/rotation to a tracking pose and chaperone bounds.",
    )
    ap.add_argument(
        "--config",
        type=str,
        default="",
        help="YAML config file path. CLI args override YAML values.",
    )

    ap.add_argument("--pose-x", type=float, default=0.0, help="Input pose x in meters.")
    ap.add_argument("--pose-y", type=float, default=1.6, help="Input pose y in meters.")
    ap.add_argument("--pose-z", type=float, default=0.0, help="Input pose z in meters.")
    ap.add_argument("--pose-yaw", type=float, default=0.0, help="Input pose yaw (deg).")
    ap.add_argument("--pose-pitch", type=float, default=0.0, help="Input pose pitch (deg).")
    ap.add_argument("--pose-roll", type=float, default=0.0, help="Input pose roll (deg).")

    ap.add_argument("--offset-x", type=float, default=0.0, help="Offset x in meters.")
    ap.add_argument("--offset-y", type=float, default=0.0, help="Offset y in meters.")
    ap.add_argument("--offset-z", type=float, default=0.0, help="Offset z in meters.")
    ap.add_argument(
        "--world-axis",
        action="store_true",
        help="Apply the offset along world axes instead of the pose's own axes.",
    )

    ap.add_argument("--rotate-x", type=float, default=0.0, help="Rotation about local X.")
    ap.add_argument("--rotate-y", type=float, default=0.0, help="Rotation about local Y.")
    ap.add_argument("--rotate-z", type=float, default=0.0, help="Rotation about local Z.")
    ap.add_argument(
        "--radians",
        action="store_true",
        help="Interpret --rotate-x/y/z as radians instead of degrees.",
    )

    ap.add_argument(
        "--play-area-width",
        type=float,
        default=2.0,
        help="Demo chaperone width (x) in meters.",
    )
    ap.add_argument(
        "--play-area-depth",
        type=float,
        default=2.0,
        help="Demo chaperone depth (z) in meters.",
    )
    ap.add_argument(
        "--wall-height",
        type=float,
        default=2.4,
        help="Demo chaperone wall height in meters.",
    )

    ap.add_argument("--ticks", type=int, default=1, help="Number of poses to process.")
    ap.add_argument(
        "--tick-interval-ms",
        type=int,
        default=0,
        help="Sleep between ticks in milliseconds (0=none).",
    )
    ap.add_argument(
        "--ramp-ticks",
        type=int,
        default=0,
        help="Ease the adjustment in over this many ticks (0=apply at once).",
    )
    ap.add_argument(
        "--easing",
        choices=list(EASING_TYPES),
        default="linear",
        help="Easing curve for --ramp-ticks.",
    )
    ap.add_argument(
        "--easing-mode",
        choices=list(EASING_MODES),
        default="out",
        help="Easing direction for --ramp-ticks.",
    )

    ap.add_argument(
        "--display-provider",
        choices=["tui", "none"],
        default="tui",
        help="Display provider: terminal TUI or none.",
    )
    ap.add_argument(
        "--display-hz",
        type=float,
        default=5.0,
        help="Display refresh rate in Hz (0 disables display updates).",
    )
    ap.add_argument(
        "--cli-output",
        choices=["live", "scroll"],
        default="live",
        help="TUI output mode: in-place live panel or scrolling logs.",
    )
    ap.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Global log level.",
    )
    return ap


def validate_config(cfg: AppConfig) -> None:
    finite_groups = {
        "--pose-x/--pose-y/--pose-z": (cfg.pose_x, cfg.pose_y, cfg.pose_z),
        "--pose-yaw/--pose-pitch/--pose-roll": (cfg.pose_yaw, cfg.pose_pitch, cfg.pose_roll),
        "--offset-x/--offset-y/--offset-z": (cfg.offset_x, cfg.offset_y, cfg.offset_z),
        "--rotate-x/--rotate-y/--rotate-z": (cfg.rotate_x, cfg.rotate_y, cfg.rotate_z),
    }
    for flags, values in finite_groups.items():
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"{flags} must be finite numbers")
    if cfg.play_area_width <= 0.0:
        raise ValueError(f"--play-area-width must be > 0, got {cfg.play_area_width}")
    if cfg.play_area_depth <= 0.0:
        raise ValueError(f"--play-area-depth must be > 0, got {cfg.play_area_depth}")
    if cfg.wall_height <= 0.0:
        raise ValueError(f"--wall-height must be > 0, got {cfg.wall_height}")
    if cfg.ticks <= 0:
        raise ValueError(f"--ticks must be > 0, got {cfg.ticks}")
    if cfg.tick_interval_ms < 0:
        raise ValueError(f"--tick-interval-ms must be >= 0, got {cfg.tick_interval_ms}")
    if cfg.ramp_ticks < 0:
        raise ValueError(f"--ramp-ticks must be >= 0, got {cfg.ramp_ticks}")
    if cfg.easing not in EASING_TYPES:
        raise ValueError(f"--easing must be one of {'|'.join(EASING_TYPES)}, got {cfg.easing}")
    if cfg.easing_mode not in EASING_MODES:
        raise ValueError(
            f"--easing-mode must be one of {'|'.join(EASING_MODES)}, got {cfg.easing_mode}"
        )
    if cfg.display_provider not in {"tui", "none"}:
        raise ValueError(f"--display-provider must be one of tui|none, got {cfg.display_provider}")
    if cfg.display_hz < 0.0:
        raise ValueError(f"--display-hz must be >= 0, got {cfg.display_hz}")
    if cfg.cli_output not in {"live", "scroll"}:
        raise ValueError(f"--cli-output must be live|scroll, got {cfg.cli_output}")
    if cfg.log_level not in {"debug", "info", "warning", "error"}:
        raise ValueError(f"--log-level must be one of debug|info|warning|error, got {cfg.log_level}")


def parse_args(argv=None) -> AppConfig:
    bootstrap = argparse.ArgumentParser(add_help=False)
    bootstrap.add_argument("--config", type=str, default="")
    bootstrap_ns, _ = bootstrap.parse_known_args(argv)

    yaml_cfg: dict[str, Any] = {}
    yaml_error: Optional[str] = None
    if bootstrap_ns.config:
        try:
            yaml_cfg = _load_yaml_config(bootstrap_ns.config)
        except ValueError as exc:
            yaml_error = str(exc)

    ap = build_arg_parser()
    if yaml_error is not None:
        ap.error(yaml_error)
    if yaml_cfg:
        ap.set_defaults(**_yaml_defaults_to_argparse_defaults(yaml_cfg))
    args = ap.parse_args(argv)

    cfg = AppConfig(
        pose_x=args.pose_x,
        pose_y=args.pose_y,
        pose_z=args.pose_z,
        pose_yaw=args.pose_yaw,
        pose_pitch=args.pose_pitch,
        pose_roll=args.pose_roll,
        offset_x=args.offset_x,
        offset_y=args.offset_y,
        offset_z=args.offset_z,
        local_axis=not args.world_axis,
        rotate_x=args.rotate_x,
        rotate_y=args.rotate_y,
        rotate_z=args.rotate_z,
        degrees=not args.radians,
        play_area_width=args.play_area_width,
        play_area_depth=args.play_area_depth,
        wall_height=args.wall_height,
        ticks=args.ticks,
        tick_interval_ms=args.tick_interval_ms,
        ramp_ticks=args.ramp_ticks,
        easing=args.easing,
        easing_mode=args.easing_mode,
        display_provider=args.display_provider,
        display_hz=float(args.display_hz),
        cli_output=args.cli_output,
        log_level=args.log_level,
    )
    try:
        validate_config(cfg)
    except ValueError as exc:
        ap.error(str(exc))
    return cfg
