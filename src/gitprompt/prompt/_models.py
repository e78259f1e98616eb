"""Prompt result models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StatusCounts:
    """Number of files in each status bucket.

    A conflicted file counts towards both ``conflicts`` and ``changed``.

    Attributes:
        untracked: Files not tracked by git.
        conflicts: Files with unresolved merge conflicts.
        changed: Tracked files changed in the working tree.
        staged: Files with changes staged in the index.
    """

    untracked: int = 0
    conflicts: int = 0
    changed: int = 0
    staged: int = 0

    @property
    def total(self) -> int:
        """Sum of all buckets."""
        return self.untracked + self.conflicts + self.changed + self.staged

    @property
    def is_clean(self) -> bool:
        """Whether every bucket is zero."""
        return self.total == 0


@dataclass(frozen=True, slots=True)
class DivergenceCounts:
    """Commits unique to the local branch and to its upstream.

    Attributes:
        ahead: Commits on the local branch that are not on the upstream.
        behind: Commits on the upstream that are not on the local branch.
    """

    ahead: int = 0
    behind: int = 0
