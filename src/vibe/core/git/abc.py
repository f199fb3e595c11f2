"""Git invocation interface.

This module provides a clean abstraction over git subprocess calls, making
every handler testable without spawning processes.

Architecture:
- Git: Abstract base class with the two call shapes vibe needs
- RealGit: Production implementation using subprocess
- FakeGit (tests/fakes/git.py): In-memory implementation recording every argv
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class GitOutput:
    """Result of a captured git invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class Git(ABC):
    """Abstract interface for running git.

    Arguments never include the executable itself: ``["status", "--short"]``
    runs ``git status --short``.
    """

    @abstractmethod
    def stream(self, args: Sequence[str]) -> int:
        """Run git attached to the terminal and return its exit code.

        Raises:
            GitLaunchError: If git cannot be started
        """
        ...

    @abstractmethod
    def capture(self, args: Sequence[str]) -> GitOutput:
        """Run git with stdout/stderr captured.

        A non-zero exit is reported through GitOutput.returncode, never raised.

        Raises:
            GitLaunchError: If git cannot be started
        """
        ...
