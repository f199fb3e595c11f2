"""Vibes command: a fun overview of the repository."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from vibe.cli.forwarding import IGNORE_EXTRA_ARGS
from vibe.cli.output import user_output
from vibe.core.context import VibeContext
from vibe.core.style import OutputStyle
from vibe.core.vibes import VibesReport, collect_vibes


def summary_lines(report: VibesReport, style: OutputStyle) -> list[tuple[str, str]]:
    """Build (text, color) rows for every diagnostic that succeeded."""
    rows: list[tuple[str, str]] = []

    if report.commit_count is not None:
        rows.append((style.label("📊", f"Total commits: {report.commit_count}"), "magenta"))

    if report.contributor_count is not None:
        rows.append((style.label("👥", f"Contributors: {report.contributor_count}"), "yellow"))

    if report.branch is not None:
        rows.append((style.label("🌿", f"Current branch: {report.branch}"), "cyan"))

    if report.is_clean is True:
        if style.use_emoji:
            rows.append(("✨ Status: Clean - immaculate vibes!", "green"))
        else:
            rows.append(("Status: Clean", "green"))
    elif report.is_clean is False:
        if style.use_emoji:
            rows.append(("📝 Status: Changes detected - creative energy flowing!", "yellow"))
        else:
            rows.append(("Status: Changes detected", "yellow"))

    return rows


def render_plain(report: VibesReport, style: OutputStyle) -> None:
    user_output(style, "Repository Overview")
    user_output(style)
    for text, _color in summary_lines(report, style):
        user_output(style, text)
    user_output(style)


def render_decorated(report: VibesReport, style: OutputStyle, console: Console) -> None:
    """Render the overview as a rich panel framed by the opening and closing lines."""
    console.print(Text(style.label("🎵", "Checking the vibes..."), style="bold cyan"))
    console.print()

    rows = summary_lines(report, style)
    if rows:
        content = Text("\n").join(Text(text, style=color) for text, color in rows)
        console.print(
            Panel(content, title="Repository Vibes", border_style="cyan", expand=False)
        )

    console.print()
    console.print(
        Text(style.label("🎉", "The vibes are strong with this one!"), style="bold cyan")
    )


@click.command("vibes", context_settings=IGNORE_EXTRA_ARGS)
@click.pass_obj
def vibes_cmd(ctx: VibeContext) -> None:
    """Check the vibes of your repository."""
    report = collect_vibes(ctx.git)

    if ctx.style.use_color:
        console = Console(force_terminal=True, no_color=False, highlight=False)
        render_decorated(report, ctx.style, console)
    else:
        render_plain(report, ctx.style)

    raise SystemExit(report.status_returncode)
