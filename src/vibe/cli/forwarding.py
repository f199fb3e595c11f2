"""Click command class for handlers that forward their arguments to git."""

from typing import Any

import click

GIT_ARGS_PARAM = "git_args"

# For vibe's own argument-less commands: trailing arguments are accepted and ignored
IGNORE_EXTRA_ARGS = dict(ignore_unknown_options=True, allow_extra_args=True)


class ForwardingCommand(click.Command):
    """Command that performs no option parsing of its own.

    Every argument after the command name, including ``--help`` and ``--``,
    reaches the callback unchanged as the ``git_args`` tuple.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("add_help_option", False)
        kwargs.setdefault("options_metavar", "")
        super().__init__(*args, **kwargs)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params[GIT_ARGS_PARAM] = tuple(args)
        return []

    def collect_usage_pieces(self, ctx: click.Context) -> list[str]:
        return ["[GIT_ARGS]..."]
