"""Tests for configuration loading."""

from pathlib import Path

import pytest

from vibe.core.config import ConfigError, VibeConfig, default_config_path, load_config


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "config.toml", env={})

    assert config == VibeConfig()
    assert config.color == "auto"
    assert config.emoji is True
    assert config.git == "git"
    assert config.debug is False


def test_file_values_are_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        'color = "never"\nemoji = false\ngit = "/opt/git/bin/git"\ndebug = true\n',
        encoding="utf-8",
    )

    config = load_config(path, env={})

    assert config == VibeConfig(color="never", emoji=False, git="/opt/git/bin/git", debug=True)


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('color = "never"\nemoji = true\n', encoding="utf-8")

    config = load_config(
        path,
        env={"VIBE_COLOR": "Always", "VIBE_EMOJI": "0", "VIBE_GIT": "hub", "VIBE_DEBUG": "yes"},
    )

    assert config.color == "always"
    assert config.emoji is False
    assert config.git == "hub"
    assert config.debug is True


def test_empty_vibe_git_is_ignored(tmp_path: Path) -> None:
    config = load_config(tmp_path / "none.toml", env={"VIBE_GIT": ""})

    assert config.git == "git"


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("color = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path, env={})


def test_non_utf8_file_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_bytes(b'color = "\xff"\n')

    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(path, env={})


def test_directory_config_path_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path, env={})


def test_invalid_color_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('color = "rainbow"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(path, env={})


def test_unknown_key_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("sparkles = true\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path, env={})


def test_invalid_boolean_environment_value(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="VIBE_EMOJI must be a boolean"):
        load_config(tmp_path / "none.toml", env={"VIBE_EMOJI": "sometimes"})


def test_default_config_path_honors_vibe_config(tmp_path: Path) -> None:
    assert default_config_path({"VIBE_CONFIG": str(tmp_path / "x.toml")}) == tmp_path / "x.toml"
    assert default_config_path({}) == Path.home() / ".vibe" / "config.toml"


def test_load_config_reads_vibe_config_from_env(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('color = "always"\n', encoding="utf-8")

    config = load_config(env={"VIBE_CONFIG": str(path)})

    assert config.color == "always"
