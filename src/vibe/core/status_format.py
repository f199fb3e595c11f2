"""Short-status line classification and decoration.

Pure functions over ``git status --short`` text; no I/O.
"""

from dataclasses import dataclass
from enum import Enum

from vibe.core.style import OutputStyle


class StatusKind(Enum):
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    UNTRACKED = "untracked"
    OTHER = "other"


@dataclass(frozen=True)
class StatusDecoration:
    emoji: str
    plain_label: str
    color: str


# First matching prefix wins
STATUS_PREFIXES: tuple[tuple[str, StatusKind], ...] = (
    ("M ", StatusKind.MODIFIED),
    (" M", StatusKind.MODIFIED),
    ("A ", StatusKind.ADDED),
    ("D ", StatusKind.DELETED),
    ("??", StatusKind.UNTRACKED),
)

STATUS_DECORATIONS: dict[StatusKind, StatusDecoration] = {
    StatusKind.MODIFIED: StatusDecoration(emoji="📝", plain_label="Modified:", color="yellow"),
    StatusKind.ADDED: StatusDecoration(emoji="➕", plain_label="Added:", color="green"),
    StatusKind.DELETED: StatusDecoration(emoji="➖", plain_label="Deleted:", color="red"),
    StatusKind.UNTRACKED: StatusDecoration(emoji="❓", plain_label="Untracked:", color="cyan"),
}


def classify_status_line(line: str) -> StatusKind:
    """Classify one ``git status --short`` line by its two-character prefix."""
    for prefix, kind in STATUS_PREFIXES:
        if line.startswith(prefix):
            return kind
    return StatusKind.OTHER


def format_status_line(line: str, style: OutputStyle) -> str:
    """Decorate a status line, keeping the original text intact.

    Emoji mode prefixes the emoji; otherwise the plain label is used. Color is
    applied independently, so a color-without-emoji style still gets labels.
    Unclassified lines are returned unchanged.
    """
    kind = classify_status_line(line)
    decoration = STATUS_DECORATIONS.get(kind)
    if decoration is None:
        return line

    if style.use_emoji:
        text = f"{decoration.emoji} {line}"
    else:
        text = f"{decoration.plain_label} {line}"
    return style.paint(text, fg=decoration.color)


def format_status_output(output: str, style: OutputStyle) -> list[str]:
    """Decorate every non-empty line of ``git status --short`` output."""
    return [format_status_line(line, style) for line in output.splitlines() if line]
