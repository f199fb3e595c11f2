"""Subprocess execution with rich error context.

Git's own failures are reported through its exit code and never raised here.
Only a failure to *start* the process (missing binary, permission denied)
raises, as a GitLaunchError carrying the operation context and command.
"""

import logging
import subprocess
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)

# Exit code used when the wrapped tool could not be started, or was killed
# by a signal and so reported no exit status of its own
FALLBACK_EXIT_CODE = 1


class GitLaunchError(RuntimeError):
    """Raised when the git executable cannot be started."""


def normalize_exit_code(returncode: int) -> int:
    """Map a signal termination (negative returncode) to FALLBACK_EXIT_CODE."""
    if returncode < 0:
        return FALLBACK_EXIT_CODE
    return returncode


def _launch_error(cmd: Sequence[str], operation_context: str, error: OSError) -> GitLaunchError:
    cmd_str = " ".join(str(arg) for arg in cmd)
    if isinstance(error, FileNotFoundError):
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
    else:
        error_msg = f"Could not start command while trying to {operation_context}: {error}"
    error_msg += f"\nFull command: {cmd_str}"
    return GitLaunchError(error_msg)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute a subprocess and capture its output as text.

    Never raises on a non-zero exit; callers inspect ``returncode``.
    stdin is closed so that commands which fall back to reading stdin
    (``git shortlog`` outside a repository) cannot block.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        GitLaunchError: If the command binary cannot be started
    """
    try:
        result = subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            stdin=subprocess.DEVNULL,
            check=False,
            **kwargs,
        )
    except OSError as e:
        raise _launch_error(cmd, operation_context, e) from e

    logger.debug("%s: %s -> exit %d", operation_context, list(cmd), result.returncode)
    return result


def stream_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    **kwargs: Any,
) -> int:
    """Execute a subprocess attached to the parent's stdin, stdout and stderr.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        The child's exit code, or FALLBACK_EXIT_CODE if it was killed by a signal

    Raises:
        GitLaunchError: If the command binary cannot be started
    """
    try:
        result = subprocess.run(list(cmd), check=False, **kwargs)
    except OSError as e:
        raise _launch_error(cmd, operation_context, e) from e

    logger.debug("%s: %s -> exit %d", operation_context, list(cmd), result.returncode)
    return normalize_exit_code(result.returncode)
