"""Tests for the version command."""

from pathlib import Path

from click.testing import CliRunner

from tests.fakes.git import FakeGit
from vibe.cli.cli import cli
from vibe.core.context import VibeContext
from vibe.version import __version__


def test_version_prints_version_without_git() -> None:
    git = FakeGit(stream_exit_code=1)
    runner = CliRunner()
    result = runner.invoke(cli, ["version"], obj=VibeContext.for_test(git=git))

    assert result.exit_code == 0
    assert result.stdout == f"Vibe v{__version__}\n"
    assert git.calls == []


def test_version_with_production_context(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["version"], env={"VIBE_CONFIG": str(tmp_path / "missing.toml")}
    )

    assert result.exit_code == 0
    assert result.stdout == f"Vibe v{__version__}\n"


def test_version_ignores_extra_arguments() -> None:
    git = FakeGit()
    runner = CliRunner()
    result = runner.invoke(cli, ["version", "--short", "now"], obj=VibeContext.for_test(git=git))

    assert result.exit_code == 0
    assert result.stdout == f"Vibe v{__version__}\n"
    assert git.calls == []
