"""Git operations — branch and working-tree status of a directory.

GitPython is imported when a query runs, not at module load: it refuses to
import without a ``git`` executable, and scans that never query git must
still work on such machines.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GitStatus:
    """Branch name plus whether the working tree has uncommitted changes."""

    branch: str
    uncommitted: bool

    def render(self) -> str:
        """Return ``<branch> *`` when dirty, ``<branch> `` when clean."""
        marker = "*" if self.uncommitted else ""
        return f"{self.branch} {marker}"

    def __str__(self) -> str:
        return self.render()


class GitProbe:
    """Runs ``git`` queries inside a directory.

    A query that exits non-zero yields None. A ``git`` executable that
    cannot be started raises ``GitCommandNotFound`` (or ``ImportError`` from
    GitPython when git is missing entirely); neither is caught here.
    Swap in a subclass or any object with the same two methods to avoid
    spawning git.
    """

    def current_branch(self, directory: Path) -> str | None:
        """Return the checked-out branch name, or None outside a repo."""
        from git import Git
        from git.exc import GitCommandError

        try:
            output = Git(str(directory)).rev_parse("--abbrev-ref", "HEAD")
        except GitCommandError:
            return None
        return output.strip()

    def uncommitted_changes(self, directory: Path) -> bool | None:
        """Return True if ``git status --porcelain`` lists anything."""
        from git import Git
        from git.exc import GitCommandError

        try:
            output = Git(str(directory)).status("--porcelain")
        except GitCommandError:
            return None
        return len(output.splitlines()) > 0


def get_git_status(directory: Path, probe: GitProbe | None = None) -> GitStatus | None:
    """Query branch and dirty state; None if either query fails.

    The status query only runs once the branch query has succeeded.
    """
    probe = probe or GitProbe()

    branch = probe.current_branch(directory)
    if branch is None:
        return None

    uncommitted = probe.uncommitted_changes(directory)
    if uncommitted is None:
        return None

    return GitStatus(branch=branch, uncommitted=uncommitted)
