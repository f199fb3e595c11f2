"""Output decoration options.

OutputStyle is resolved once at the CLI entry point and passed into every
handler, so no command consults the terminal or global color state itself.
"""

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import click

from vibe.core.config import VibeConfig


@dataclass(frozen=True)
class OutputStyle:
    """How handler output is decorated.

    Attributes:
        use_color: Emit ANSI color via click.style
        use_emoji: Prefix labels with emoji (only ever True alongside use_color)
    """

    use_color: bool
    use_emoji: bool

    @staticmethod
    def plain() -> "OutputStyle":
        return OutputStyle(use_color=False, use_emoji=False)

    @staticmethod
    def decorated() -> "OutputStyle":
        return OutputStyle(use_color=True, use_emoji=True)

    def paint(self, text: str, **styles: Any) -> str:
        """Apply click.style keyword styles when color is enabled."""
        if not self.use_color:
            return text
        return click.style(text, **styles)

    def label(self, emoji: str, text: str) -> str:
        """Return ``"<emoji> <text>"`` in emoji mode, ``text`` otherwise."""
        if not self.use_emoji:
            return text
        return f"{emoji} {text}"


def stdout_is_terminal() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def resolve_output_style(
    config: VibeConfig,
    *,
    is_terminal: bool,
    env: Mapping[str, str],
) -> OutputStyle:
    """Decide decoration from configuration, NO_COLOR and terminal detection.

    Args:
        config: Loaded configuration
        is_terminal: Whether stdout is attached to an interactive terminal
        env: Environment mapping, consulted for NO_COLOR

    Returns:
        OutputStyle for this invocation
    """
    if config.color == "always":
        decorate = True
    elif config.color == "never":
        decorate = False
    else:
        decorate = is_terminal and not env.get("NO_COLOR")

    return OutputStyle(use_color=decorate, use_emoji=decorate and config.emoji)
