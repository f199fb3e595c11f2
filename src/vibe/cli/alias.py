"""Command alias support.

Commands declare aliases with the ``@alias`` decorator and are registered
under every name with ``register_with_aliases``. The help formatter folds
aliases into the primary row (``status, st``).
"""

from collections.abc import Callable

import click

_ALIASES_ATTR = "vibe_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach alias names to a click command."""

    def decorator(cmd: click.Command) -> click.Command:
        setattr(cmd, _ALIASES_ATTR, tuple(names))
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command, name: str | None = None) -> None:
    """Add ``cmd`` to ``group`` under its primary name and all of its aliases."""
    group.add_command(cmd, name=name)
    for alias_name in get_aliases(cmd):
        group.add_command(cmd, name=alias_name)
