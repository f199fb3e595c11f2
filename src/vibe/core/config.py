"""User configuration loading.

Configuration lives in ~/.vibe/config.toml (or the file named by VIBE_CONFIG)
and is validated by the VibeConfig model. Environment variables override file
values so a single invocation can be adjusted without editing the file.

Example config:
  color = "auto"     # "auto", "always" or "never"
  emoji = true
  git = "/usr/bin/git"
  debug = false
"""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError

ColorMode = Literal["auto", "always", "never"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(Exception):
    """Raised when the configuration file or environment is invalid."""


class VibeConfig(BaseModel):
    """Validated vibe configuration.

    Attributes:
        color: Decoration mode; "auto" follows terminal detection and NO_COLOR
        emoji: Whether decorated output uses emoji
        git: Git executable to run
        debug: Whether to log every git invocation to stderr
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: ColorMode = "auto"
    emoji: bool = True
    git: str = "git"
    debug: bool = False


def default_config_path(env: Mapping[str, str]) -> Path:
    override = env.get("VIBE_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".vibe" / "config.toml"


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (1/0/true/false), got {value!r}")


def _env_overrides(env: Mapping[str, str]) -> dict[str, object]:
    overrides: dict[str, object] = {}
    if "VIBE_COLOR" in env:
        overrides["color"] = env["VIBE_COLOR"].strip().lower()
    if "VIBE_EMOJI" in env:
        overrides["emoji"] = _parse_bool("VIBE_EMOJI", env["VIBE_EMOJI"])
    if env.get("VIBE_GIT"):
        overrides["git"] = env["VIBE_GIT"]
    if "VIBE_DEBUG" in env:
        overrides["debug"] = _parse_bool("VIBE_DEBUG", env["VIBE_DEBUG"])
    return overrides


def load_config(path: Path | None = None, env: Mapping[str, str] | None = None) -> VibeConfig:
    """Load configuration from file and environment.

    Args:
        path: Config file path (defaults to VIBE_CONFIG or ~/.vibe/config.toml)
        env: Environment mapping (defaults to os.environ)

    Returns:
        VibeConfig with file values overridden by environment values

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or a value is invalid
    """
    environ = os.environ if env is None else env
    config_path = path if path is not None else default_config_path(environ)

    data: dict[str, object] = {}
    if config_path.exists():
        try:
            text = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    data.update(_env_overrides(environ))

    try:
        return VibeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration ({config_path}):\n{e}") from e
