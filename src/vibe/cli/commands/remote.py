"""Push and pull with progress banners."""

from dataclasses import dataclass

import click

from vibe.cli.forwarding import ForwardingCommand
from vibe.cli.output import user_output
from vibe.core.context import VibeContext


@dataclass(frozen=True)
class RemoteBanners:
    start_emoji: str
    start_text: str
    done_text: str


PUSH_BANNERS = RemoteBanners(
    start_emoji="🚀",
    start_text="Pushing changes...",
    done_text="Push complete!",
)
# The arrow renders narrow in most terminals; the extra space keeps the text aligned
PULL_BANNERS = RemoteBanners(
    start_emoji="⬇️ ",
    start_text="Pulling changes...",
    done_text="Pull complete!",
)


def run_with_banners(
    ctx: VibeContext, verb: str, banners: RemoteBanners, git_args: tuple[str, ...]
) -> int:
    """Stream ``git <verb> <args>`` between start and completion banners.

    The completion banner is printed only when git succeeds.

    Returns:
        git's exit code
    """
    style = ctx.style
    user_output(
        style,
        style.paint(style.label(banners.start_emoji, banners.start_text), fg="cyan", bold=True),
    )
    user_output(style)

    exit_code = ctx.git.stream([verb, *git_args])
    if exit_code != 0:
        return exit_code

    user_output(style)
    user_output(style, style.paint(style.label("✅", banners.done_text), fg="green", bold=True))
    return exit_code


@click.command("push", cls=ForwardingCommand)
@click.pass_obj
def push_cmd(ctx: VibeContext, git_args: tuple[str, ...]) -> None:
    """Update remote refs along with associated objects."""
    raise SystemExit(run_with_banners(ctx, "push", PUSH_BANNERS, git_args))


@click.command("pull", cls=ForwardingCommand)
@click.pass_obj
def pull_cmd(ctx: VibeContext, git_args: tuple[str, ...]) -> None:
    """Fetch from and integrate with another repository or branch."""
    raise SystemExit(run_with_banners(ctx, "pull", PULL_BANNERS, git_args))
