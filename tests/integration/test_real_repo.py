"""Integration tests running vibe against a real git repository."""

import shutil
import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner

from vibe.cli.cli import cli
from vibe.core.context import VibeContext
from vibe.core.git.real import RealGit
from vibe.core.style import OutputStyle

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Repository on branch main with one commit, one modified and one untracked file."""
    _git(tmp_path, "init", "-q")
    _git(tmp_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(tmp_path, "config", "user.email", "test@example.com")
    _git(tmp_path, "config", "user.name", "Test User")
    _git(tmp_path, "config", "commit.gpgsign", "false")

    (tmp_path / "a.txt").write_text("one\n", encoding="utf-8")
    _git(tmp_path, "add", "a.txt")
    _git(tmp_path, "commit", "-q", "-m", "Initial commit")

    (tmp_path / "a.txt").write_text("two\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("new\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    return tmp_path


def _plain_context() -> VibeContext:
    return VibeContext(git=RealGit(), style=OutputStyle.plain())


def test_status_against_real_repository(repo: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["status"], obj=_plain_context())

    assert result.exit_code == 0
    assert "Branch: main\n" in result.stdout
    assert "Modified:  M a.txt\n" in result.stdout
    assert "Untracked: ?? b.txt\n" in result.stdout


def test_vibes_against_real_repository(repo: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["vibes"], obj=_plain_context())

    assert result.exit_code == 0
    assert "Total commits: 1\n" in result.stdout
    assert "Contributors: 1\n" in result.stdout
    assert "Current branch: main\n" in result.stdout
    assert "Status: Changes detected\n" in result.stdout


def test_passthrough_propagates_real_exit_code(repo: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["rev-parse", "--quiet", "--verify", "refs/heads/nope"], obj=_plain_context()
    )

    assert result.exit_code == 1


def test_status_outside_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    outside = tmp_path / "not-a-repo"
    outside.mkdir()
    monkeypatch.chdir(outside)
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))

    runner = CliRunner()
    result = runner.invoke(cli, ["status"], obj=_plain_context())

    assert result.exit_code != 0
    assert "Not a git repository" in result.stdout
