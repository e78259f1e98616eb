"""Version control backend.

This package wraps the git repository behind a small read-only interface
so the prompt core never touches dulwich directly.

Classes:
    DulwichBackend: BackendProtocol implementation over a dulwich Repo.
    FakeBackend: In-memory BackendProtocol implementation for tests.
    BackendProtocol: Runtime-checkable protocol for dependency injection.

Models:
    Reference: A resolved reference, direct or symbolic.
    ReferenceKind: Direct or symbolic.
    StatusFlag: Per-file status bits.
    StatusFlagRecord: One path and its status bits.

Example:
    >>> from gitprompt.backend import open_backend
    >>> with open_backend() as backend:
    ...     head = backend.resolve_reference("HEAD")
"""

from gitprompt.backend._dulwich import DulwichBackend, open_backend
from gitprompt.backend._fake import FakeBackend
from gitprompt.backend._models import (
    INDEX_FLAGS,
    WORKTREE_CHANGE_FLAGS,
    Reference,
    ReferenceKind,
    StatusFlag,
    StatusFlagRecord,
)
from gitprompt.backend._protocol import BackendProtocol

__all__ = [
    "INDEX_FLAGS",
    "WORKTREE_CHANGE_FLAGS",
    "BackendProtocol",
    "DulwichBackend",
    "FakeBackend",
    "Reference",
    "ReferenceKind",
    "StatusFlag",
    "StatusFlagRecord",
    "open_backend",
]
