import click

from vibe.cli.forwarding import IGNORE_EXTRA_ARGS
from vibe.cli.output import user_output
from vibe.core.context import VibeContext
from vibe.version import __version__


@click.command("version", context_settings=IGNORE_EXTRA_ARGS)
@click.pass_obj
def version_cmd(ctx: VibeContext) -> None:
    """Print the version number of Vibe."""
    user_output(ctx.style, f"Vibe v{__version__}")
