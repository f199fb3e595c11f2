"""Log command with a compact graph format."""

import click

from vibe.cli.forwarding import ForwardingCommand
from vibe.core.context import VibeContext
from vibe.core.style import OutputStyle

COLOR_LOG_FORMAT = (
    "%C(yellow)%h%C(reset) - %C(cyan)%an%C(reset) %C(green)(%ar)%C(reset)%n  %s%n"
)
PLAIN_LOG_FORMAT = "%h - %an (%ar)%n  %s%n"


def build_log_args(style: OutputStyle, git_args: tuple[str, ...]) -> list[str]:
    """Fixed pretty format and --graph, followed by the user's arguments."""
    log_format = COLOR_LOG_FORMAT if style.use_color else PLAIN_LOG_FORMAT
    return ["log", f"--pretty=format:{log_format}", "--graph", *git_args]


@click.command("log", cls=ForwardingCommand)
@click.pass_obj
def log_cmd(ctx: VibeContext, git_args: tuple[str, ...]) -> None:
    """Show commit logs with enhanced formatting."""
    raise SystemExit(ctx.git.stream(build_log_args(ctx.style, git_args)))
