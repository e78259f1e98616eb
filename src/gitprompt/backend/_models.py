"""Backend data models.

This module defines the values exchanged between the version control
backend and the prompt core: resolved references and per-file status flags.
"""

from dataclasses import dataclass
from enum import IntFlag, StrEnum
from typing import Final


class ReferenceKind(StrEnum):
    """How a reference identifies its target."""

    DIRECT = "direct"
    SYMBOLIC = "symbolic"


@dataclass(frozen=True, slots=True)
class Reference:
    """A resolved git reference.

    Attributes:
        name: Full reference name (e.g. ``HEAD`` or ``refs/heads/main``).
        kind: Whether the reference points at an object or at another reference.
        target: Hex object id for direct references, or the target reference
            path (e.g. ``refs/heads/main``) for symbolic references.
    """

    name: str
    kind: ReferenceKind
    target: str

    @property
    def is_direct(self) -> bool:
        """Whether this reference points straight at an object."""
        return self.kind is ReferenceKind.DIRECT


class StatusFlag(IntFlag):
    """Per-file status bits.

    Bit values match libgit2's ``git_status_t`` so flag sets can be compared
    with other tools that report them.
    """

    CURRENT = 0

    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4

    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11

    IGNORED = 1 << 14
    CONFLICTED = 1 << 15


INDEX_FLAGS: Final = (
    StatusFlag.INDEX_NEW
    | StatusFlag.INDEX_MODIFIED
    | StatusFlag.INDEX_DELETED
    | StatusFlag.INDEX_RENAMED
    | StatusFlag.INDEX_TYPECHANGE
)

WORKTREE_CHANGE_FLAGS: Final = (
    StatusFlag.WT_MODIFIED
    | StatusFlag.WT_DELETED
    | StatusFlag.WT_RENAMED
    | StatusFlag.WT_TYPECHANGE
)


@dataclass(frozen=True, slots=True)
class StatusFlagRecord:
    """One file's status as reported by the backend.

    Attributes:
        path: Repository-relative path using forward slashes.
        flags: Combination of StatusFlag bits.
    """

    path: str
    flags: StatusFlag
