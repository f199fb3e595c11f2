"""Output helpers for CLI commands.

Handler output is the product of vibe, so it goes to stdout. Diagnostics
about vibe itself (launch failures, bad configuration) go to stderr.
"""

import click

from vibe.core.style import OutputStyle


def user_output(style: OutputStyle, message: str = "", nl: bool = True) -> None:
    """Write handler output to stdout, keeping ANSI styling only in color mode.

    click.echo strips styles when stdout is not a terminal; passing the
    resolved color flag lets ``color = "always"`` survive a pipe.
    """
    click.echo(message, nl=nl, color=style.use_color)


def error_output(message: str) -> None:
    """Write an error about vibe itself to stderr with a red "Error: " prefix."""
    click.echo(click.style("Error: ", fg="red") + message, err=True)
