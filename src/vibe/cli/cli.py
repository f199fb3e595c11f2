import click

from vibe.cli.alias import register_with_aliases
from vibe.cli.commands.commit import commit_cmd
from vibe.cli.commands.log import log_cmd
from vibe.cli.commands.remote import pull_cmd, push_cmd
from vibe.cli.commands.status import status_cmd
from vibe.cli.commands.version import version_cmd
from vibe.cli.commands.vibes import vibes_cmd
from vibe.cli.dispatch import VibeGroup
from vibe.cli.output import error_output
from vibe.core.config import ConfigError
from vibe.core.context import create_context

# Only help belongs to vibe; every other leading option is git's
CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    ignore_unknown_options=True,
    allow_interspersed_args=False,
)


@click.group(
    cls=VibeGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    epilog="Any other command is passed to git unchanged.",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """A delightful git wrapper with personality.

    Vibe adds color and emoji to the git commands you use most and passes
    everything else straight through to git.
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ConfigError as e:
            error_output(str(e))
            raise SystemExit(1) from e


register_with_aliases(cli, status_cmd)  # Has @alias("st")
register_with_aliases(cli, commit_cmd)  # Has @alias("ci")
cli.add_command(log_cmd)
cli.add_command(push_cmd)
cli.add_command(pull_cmd)
cli.add_command(vibes_cmd)
cli.add_command(version_cmd)


def main() -> None:
    """CLI entry point used by the `vibe` console script."""
    cli()
