"""Tests for FakeGit test infrastructure.

These tests verify that FakeGit correctly simulates git invocations,
providing reliable test doubles for CLI tests.
"""

import pytest

from tests.fakes.git import FakeGit
from vibe.core.git.abc import GitOutput
from vibe.core.subprocess import GitLaunchError


def test_fake_git_initialization() -> None:
    git = FakeGit()

    assert git.calls == []
    assert git.capture(["rev-parse", "HEAD"]) == GitOutput(returncode=0)
    assert git.stream(["fetch"]) == 0


def test_fake_git_returns_configured_output() -> None:
    git = FakeGit(outputs={("status", "--short"): GitOutput(0, "?? b.txt\n")})

    assert git.capture(["status", "--short"]).stdout == "?? b.txt\n"
    assert git.capture(["status"]).stdout == ""


def test_fake_git_stream_exit_code() -> None:
    git = FakeGit(stream_exit_code=128)

    assert git.stream(["push"]) == 128


def test_fake_git_records_calls_in_order() -> None:
    git = FakeGit()

    git.capture(["status", "--short"])
    git.stream(["push", "origin"])

    assert git.calls == [("capture", ("status", "--short")), ("stream", ("push", "origin"))]
    assert git.captured_args == [("status", "--short")]
    assert git.streamed_args == [("push", "origin")]


def test_fake_git_launch_error() -> None:
    git = FakeGit(launch_error="Command not found: git")

    with pytest.raises(GitLaunchError, match="Command not found"):
        git.stream(["status"])
    with pytest.raises(GitLaunchError):
        git.capture(["status"])

    assert len(git.calls) == 2


def test_fake_git_calls_returns_copy() -> None:
    git = FakeGit()
    git.stream(["log"])

    calls = git.calls
    calls.clear()

    assert git.calls == [("stream", ("log",))]
