from vibe.core.git.abc import Git, GitOutput
from vibe.core.git.real import RealGit

__all__ = ["Git", "GitOutput", "RealGit"]
