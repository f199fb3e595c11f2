"""Custom Click help formatter for organized command display."""

import click

from vibe.cli.alias import get_aliases

# Section title -> primary command names, in display order
COMMAND_SECTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Styled Git Commands", ("status", "commit", "log", "push", "pull")),
    ("Repository Insights", ("vibes",)),
    ("About", ("version",)),
)


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    Aliases are shown on the primary command's row (``status, st``) rather
    than as separate rows.
    """

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        alias_names: set[str] = set()
        commands: dict[str, click.Command] = {}
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands[subcommand] = cmd
            alias_names.update(get_aliases(cmd))

        primary = {name: cmd for name, cmd in commands.items() if name not in alias_names}
        placed: set[str] = set()

        for title, names in COMMAND_SECTIONS:
            section = [(name, primary[name]) for name in names if name in primary]
            if section:
                with formatter.section(title):
                    self._format_command_list(ctx, formatter, section)
                placed.update(name for name, _ in section)

        others = [(name, cmd) for name, cmd in primary.items() if name not in placed]
        if others:
            with formatter.section("Other Commands"):
                self._format_command_list(ctx, formatter, others)

    def _format_command_list(
        self,
        ctx: click.Context,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            display_name = ", ".join((name, *get_aliases(cmd)))
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((display_name, help_text))

        if rows:
            formatter.write_dl(rows)
