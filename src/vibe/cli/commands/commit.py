import click

from vibe.cli.alias import alias
from vibe.cli.forwarding import ForwardingCommand
from vibe.core.context import VibeContext


@alias("ci")
@click.command("commit", cls=ForwardingCommand)
@click.pass_obj
def commit_cmd(ctx: VibeContext, git_args: tuple[str, ...]) -> None:
    """Record changes to the repository."""
    raise SystemExit(ctx.git.stream(["commit", *git_args]))
