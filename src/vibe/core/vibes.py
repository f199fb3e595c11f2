"""Repository overview collection for the vibes command.

Collection is separated from presentation: collect_vibes() gathers a
VibesReport through the Git interface and the command renders it.
"""

from dataclasses import dataclass

from vibe.core.git.abc import Git


@dataclass(frozen=True)
class VibesReport:
    """Repository overview. A field is None when its diagnostic failed.

    Attributes:
        commit_count: Output of ``rev-list --count HEAD``
        contributor_count: Number of authors listed by ``shortlog -sn --all``
        branch: Current branch from ``rev-parse --abbrev-ref HEAD``
        is_clean: Whether ``status --short`` printed nothing
        status_returncode: Exit code of the status diagnostic
    """

    commit_count: str | None
    contributor_count: int | None
    branch: str | None
    is_clean: bool | None
    status_returncode: int


def count_contributors(shortlog_output: str) -> int:
    """Count author rows in ``git shortlog -sn`` output."""
    return sum(1 for line in shortlog_output.splitlines() if line.strip())


def collect_vibes(git: Git) -> VibesReport:
    """Run the four overview diagnostics, in order."""
    commits = git.capture(["rev-list", "--count", "HEAD"])
    contributors = git.capture(["shortlog", "-sn", "--all"])
    branch = git.capture(["rev-parse", "--abbrev-ref", "HEAD"])
    status = git.capture(["status", "--short"])

    return VibesReport(
        commit_count=commits.stdout.strip() if commits.ok else None,
        contributor_count=count_contributors(contributors.stdout) if contributors.ok else None,
        branch=branch.stdout.strip() if branch.ok else None,
        is_clean=not status.stdout.strip() if status.ok else None,
        status_returncode=status.returncode,
    )
