"""Application context with dependency injection."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from vibe.core.config import VibeConfig, load_config
from vibe.core.git.abc import Git
from vibe.core.git.real import RealGit
from vibe.core.style import OutputStyle, resolve_output_style, stdout_is_terminal

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


@dataclass(frozen=True)
class VibeContext:
    """Immutable context holding all dependencies for vibe commands.

    Created at CLI entry point and threaded through the application via
    click's ``obj``. Frozen to prevent accidental modification at runtime.
    """

    git: Git
    style: OutputStyle
    config: VibeConfig = field(default_factory=VibeConfig)

    @staticmethod
    def for_test(
        git: Git | None = None,
        style: OutputStyle | None = None,
        config: VibeConfig | None = None,
    ) -> "VibeContext":
        """Create test context with an empty FakeGit and plain output by default."""
        from tests.fakes.git import FakeGit

        return VibeContext(
            git=git if git is not None else FakeGit(),
            style=style if style is not None else OutputStyle.plain(),
            config=config if config is not None else VibeConfig(),
        )


def create_context(
    *,
    env: Mapping[str, str] | None = None,
    is_terminal: bool | None = None,
) -> VibeContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ConfigError: If the configuration is invalid
    """
    environ = os.environ if env is None else env
    config = load_config(env=environ)

    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)

    style = resolve_output_style(
        config,
        is_terminal=stdout_is_terminal() if is_terminal is None else is_terminal,
        env=environ,
    )
    return VibeContext(git=RealGit(config.git), style=style, config=config)
