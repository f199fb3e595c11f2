"""Status command implementation."""

from dataclasses import dataclass

import click

from vibe.cli.alias import alias
from vibe.cli.forwarding import ForwardingCommand
from vibe.cli.output import user_output
from vibe.core.context import VibeContext
from vibe.core.git.abc import Git
from vibe.core.status_format import format_status_output

UNBORN_BRANCH_LABEL = "main (no commits yet)"
HELP_FLAGS = ("-h", "--help")


@dataclass(frozen=True)
class BranchLookup:
    """Outcome of resolving the current branch.

    ``branch`` is None when neither lookup succeeded; ``returncode`` then
    holds the fallback lookup's exit code.
    """

    branch: str | None
    returncode: int = 0


def lookup_current_branch(git: Git) -> BranchLookup:
    """Resolve the current branch, tolerating repositories with no commits.

    ``rev-parse`` fails before the first commit, so ``branch --show-current``
    is tried next; an empty answer there means an unborn branch.
    """
    result = git.capture(["rev-parse", "--abbrev-ref", "HEAD"])
    if result.ok:
        return BranchLookup(branch=result.stdout.strip())

    fallback = git.capture(["branch", "--show-current"])
    if not fallback.ok:
        return BranchLookup(branch=None, returncode=fallback.returncode)

    return BranchLookup(branch=fallback.stdout.strip() or UNBORN_BRANCH_LABEL)


def requests_help(git_args: tuple[str, ...]) -> bool:
    """Whether a help flag appears before any ``--`` separator."""
    for arg in git_args:
        if arg == "--":
            return False
        if arg in HELP_FLAGS:
            return True
    return False


@alias("st")
@click.command("status", cls=ForwardingCommand)
@click.pass_obj
def status_cmd(ctx: VibeContext, git_args: tuple[str, ...]) -> None:
    """Show the working tree status with style."""
    # git prints its own help page, uncaptured and undecorated
    if requests_help(git_args):
        raise SystemExit(ctx.git.stream(["status", *git_args]))

    style = ctx.style

    user_output(style, style.paint(style.label("✨", "Repository Status"), fg="cyan", bold=True))
    user_output(style)

    lookup = lookup_current_branch(ctx.git)
    if lookup.branch is None:
        user_output(style, style.paint(style.label("❌", "Not a git repository"), fg="red"))
        raise SystemExit(lookup.returncode)

    branch_label = style.paint(style.label("📍", "Branch:"), fg="cyan", bold=True)
    user_output(style, f"{branch_label} {lookup.branch}")
    user_output(style)

    result = ctx.git.capture(["status", "--short", *git_args])
    if not result.ok:
        user_output(style, style.paint(style.label("❌", "Error getting status"), fg="red"))
        raise SystemExit(result.returncode)

    if not result.stdout.strip():
        if style.use_emoji:
            clean_message = "✅ Working tree clean - good vibes!"
        else:
            clean_message = "Working tree clean"
        user_output(style, style.paint(clean_message, fg="green"))
        return

    for line in format_status_output(result.stdout, style):
        user_output(style, line)
