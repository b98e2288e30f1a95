from pathlib import Path

import pytest

from reversi import EnvConfig, InvalidColorError, load_env_config, load_yaml_config

DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"


def test_missing_yaml_returns_empty(tmp_path):
    assert load_yaml_config(tmp_path / "missing.yaml") == {}


def test_default_config_file_loads():
    config = load_env_config(DEFAULT_CONFIG)
    assert config.starting_color == "black"
    assert config.enforce_legal_actions
    assert config.render_mode == "ansi"


def test_env_config_from_yaml_with_overrides(tmp_path):
    path = tmp_path / "env.yaml"
    path.write_text("env:\n  starting_color: WHITE\n  enforce_legal_actions: false\n")

    config = load_env_config(path, illegal_move_penalty=-2.0, render_mode=None)

    assert config == EnvConfig(
        starting_color="white",
        enforce_legal_actions=False,
        render_mode=None,
        illegal_move_penalty=-2.0,
    )


def test_env_config_validates_values(tmp_path):
    with pytest.raises(InvalidColorError):
        EnvConfig(starting_color="red")

    path = tmp_path / "bad.yaml"
    path.write_text("env:\n  board_size: 10\n")
    with pytest.raises(TypeError):
        load_env_config(path)
