"""Production Git implementation using subprocess."""

from collections.abc import Sequence

from vibe.core.git.abc import Git, GitOutput
from vibe.core.subprocess import (
    normalize_exit_code,
    run_subprocess_with_context,
    stream_subprocess_with_context,
)


def _operation_context(args: Sequence[str]) -> str:
    if not args:
        return "run git"
    return f"run git {args[0]}"


class RealGit(Git):
    """Production implementation executing the configured git binary."""

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    @property
    def executable(self) -> str:
        return self._executable

    def stream(self, args: Sequence[str]) -> int:
        return stream_subprocess_with_context(
            [self._executable, *args],
            operation_context=_operation_context(args),
        )

    def capture(self, args: Sequence[str]) -> GitOutput:
        result = run_subprocess_with_context(
            [self._executable, *args],
            operation_context=_operation_context(args),
        )
        return GitOutput(
            returncode=normalize_exit_code(result.returncode),
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )
