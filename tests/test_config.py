import pytest

from vrpose.config import AppConfig, parse_args, validate_config


def test_validate_config_accepts_defaults():
    cfg = AppConfig()
    validate_config(cfg)


def test_validate_config_rejects_invalid_ticks():
    cfg = AppConfig(ticks=0)
    with pytest.raises(ValueError, match="--ticks"):
        validate_config(cfg)


def test_validate_config_rejects_negative_ramp_ticks():
    cfg = AppConfig(ramp_ticks=-1)
    with pytest.raises(ValueError, match="--ramp-ticks"):
        validate_config(cfg)


def test_validate_config_rejects_non_finite_offset():
    cfg = AppConfig(offset_y=float("nan"))
    with pytest.raises(ValueError, match="--offset-x/--offset-y/--offset-z"):
        validate_config(cfg)


def test_validate_config_rejects_flat_play_area():
    cfg = AppConfig(wall_height=0.0)
    with pytest.raises(ValueError, match="--wall-height"):
        validate_config(cfg)


def test_validate_config_rejects_invalid_easing():
    cfg = AppConfig(easing="wobble")
    with pytest.raises(ValueError, match="--easing"):
        validate_config(cfg)


def test_validate_config_rejects_invalid_display_provider():
    cfg = AppConfig(display_provider="3d")
    with pytest.raises(ValueError, match="--display-provider"):
        validate_config(cfg)


def test_validate_config_rejects_negative_display_hz():
    cfg = AppConfig(display_hz=-1.0)
    with pytest.raises(ValueError, match="--display-hz"):
        validate_config(cfg)


def test_parse_args_cli_flags():
    cfg = parse_args(["--offset-z", "1.5", "--world-axis", "--radians", "--rotate-y", "0.5"])
    assert cfg.offset_z == 1.5
    assert cfg.local_axis is False
    assert cfg.degrees is False
    assert cfg.rotate_y == 0.5


def test_parse_args_reads_yaml_config(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "\n".join(
            [
                "offset_x: 0.25",
                "offset-y: 1",
                "local_axis: false",
                "rotate_z: 45",
                "display_provider: none",
                "display_hz: 60",
                "easing: cubic",
                "easing_mode: in-out",
                "ticks: 5",
            ]
        ),
        encoding="utf-8",
    )
    cfg = parse_args(["--config", str(cfg_path)])
    assert cfg.offset_x == 0.25
    assert cfg.offset_y == 1.0
    assert cfg.local_axis is False
    assert cfg.rotate_z == 45.0
    assert cfg.display_provider == "none"
    assert cfg.display_hz == 60.0
    assert cfg.easing == "cubic"
    assert cfg.easing_mode == "in-out"
    assert cfg.ticks == 5


def test_parse_args_yaml_negated_aliases(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("world_axis: true\nradians: yes\n", encoding="utf-8")
    cfg = parse_args(["--config", str(cfg_path)])
    assert cfg.local_axis is False
    assert cfg.degrees is False


def test_parse_args_cli_overrides_yaml(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "\n".join(
            [
                "display_provider: none",
                "display_hz: 60",
            ]
        ),
        encoding="utf-8",
    )
    cfg = parse_args(
        [
            "--config",
            str(cfg_path),
            "--display-provider",
            "tui",
            "--display-hz",
            "12",
        ]
    )
    assert cfg.display_provider == "tui"
    assert cfg.display_hz == 12.0


def test_parse_args_rejects_unknown_yaml_key(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("bad_key: 1\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        parse_args(["--config", str(cfg_path)])


def test_parse_args_rejects_bad_yaml_value(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("easing: wobble\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        parse_args(["--config", str(cfg_path)])


def test_parse_args_rejects_missing_config_file(tmp_path):
    with pytest.raises(SystemExit):
        parse_args(["--config", str(tmp_path / "missing.yaml")])
