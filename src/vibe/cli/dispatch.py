"""Command routing with transparent fallthrough to git."""

import logging

import click

from vibe.cli.commands.passthrough import git_passthrough_cmd
from vibe.cli.help_formatter import GroupedCommandGroup
from vibe.cli.output import error_output
from vibe.core.subprocess import FALLBACK_EXIT_CODE, GitLaunchError

logger = logging.getLogger(__name__)


class VibeGroup(GroupedCommandGroup):
    """Root group routing unknown commands to git.

    Lookup is explicit: a registered name or alias dispatches to its handler
    with the remaining arguments; anything else, including leading options
    vibe does not own, goes to git with the complete argument list. The
    not-found branch prints nothing.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        cmd = self.get_command(ctx, cmd_name)
        if cmd is None:
            logger.debug("no handler for %r, forwarding %s to git", cmd_name, args)
            return git_passthrough_cmd.name, git_passthrough_cmd, list(args)
        return cmd_name, cmd, args[1:]

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except GitLaunchError as e:
            error_output(str(e))
            raise SystemExit(FALLBACK_EXIT_CODE) from e
