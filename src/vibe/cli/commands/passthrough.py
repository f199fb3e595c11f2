"""Verbatim forwarding of unrecognized commands to git."""

import click

from vibe.cli.forwarding import ForwardingCommand
from vibe.core.context import VibeContext


@click.command("git", cls=ForwardingCommand, hidden=True)
@click.pass_obj
def git_passthrough_cmd(ctx: VibeContext, git_args: tuple[str, ...]) -> None:
    """Run git with the original arguments and exit with its status."""
    raise SystemExit(ctx.git.stream(git_args))
