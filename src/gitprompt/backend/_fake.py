"""Fake backend for testing.

This module provides a FakeBackend class that implements BackendProtocol
for use in tests without requiring an actual Git repository.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from types import TracebackType
from typing import Self

from gitprompt.backend._models import (
    Reference,
    ReferenceKind,
    StatusFlag,
    StatusFlagRecord,
)
from gitprompt.exceptions import (
    BackendError,
    ConfigNotSetError,
    InvalidConfigValueError,
    NoHeadError,
    NoUpstreamError,
    ReferenceNotFoundError,
)
from gitprompt.utils import parse_git_int


@dataclass(slots=True)
class FakeBackend:
    """Fake git backend for testing.

    The fake holds plain state that tests set up directly:
    - refs maps reference names to references (``HEAD`` included)
    - head is what resolve_head() returns; None simulates an unborn branch
    - upstreams maps local branch names to their upstream reference
    - graph maps (local, upstream) object ids to (ahead, behind)
    - entries are the records yielded by status_entries()
    - config holds raw string values for read_config_int()

    Example:
        >>> backend = FakeBackend.on_branch("main")
        >>> backend.add_entry("new.txt", StatusFlag.WT_NEW)
        >>> backend.resolve_reference("HEAD").target
        'refs/heads/main'
    """

    refs: dict[str, Reference] = field(default_factory=dict)
    head: Reference | None = None
    upstreams: dict[str, Reference] = field(default_factory=dict)
    graph: dict[tuple[str, str], tuple[int, int]] = field(default_factory=dict)
    entries: list[StatusFlagRecord] = field(default_factory=list)
    config: dict[str, str] = field(default_factory=dict)
    status_error: BackendError | None = None
    closed: bool = False

    @classmethod
    def on_branch(cls, branch: str, *, commit: str = "0" * 40) -> Self:
        """Create a backend whose HEAD is a symbolic ref to a branch.

        Args:
            branch: Branch short name, e.g. ``main`` or ``feature/x``.
            commit: Hex object id the branch points at.
        """
        ref_name = f"refs/heads/{branch}"
        return cls(
            refs={
                "HEAD": Reference("HEAD", ReferenceKind.SYMBOLIC, ref_name),
                ref_name: Reference(ref_name, ReferenceKind.DIRECT, commit),
            },
            head=Reference(ref_name, ReferenceKind.DIRECT, commit),
        )

    @classmethod
    def detached(cls, commit: str) -> Self:
        """Create a backend whose HEAD points straight at a commit."""
        head = Reference("HEAD", ReferenceKind.DIRECT, commit)
        return cls(refs={"HEAD": head}, head=head)

    # =========================================================================
    # Test Setup Helpers
    # =========================================================================

    def add_entry(self, path: str, flags: StatusFlag) -> None:
        """Add a status record."""
        self.entries.append(StatusFlagRecord(path=path, flags=flags))

    def set_upstream(
        self,
        upstream_name: str,
        commit: str,
        *,
        ahead: int = 0,
        behind: int = 0,
    ) -> None:
        """Configure an upstream for the current head and its divergence."""
        if self.head is None:
            msg = "Cannot set an upstream without a head"
            raise ValueError(msg)
        self.upstreams[self.head.name] = Reference(
            upstream_name, ReferenceKind.DIRECT, commit
        )
        self.graph[self.head.target, commit] = (ahead, behind)

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # =========================================================================
    # BackendProtocol Methods
    # =========================================================================

    def close(self) -> None:
        """Mark the backend closed."""
        self.closed = True

    def resolve_reference(self, name: str) -> Reference:
        try:
            return self.refs[name]
        except KeyError as e:
            raise ReferenceNotFoundError(name) from e

    def resolve_head(self) -> Reference:
        if self.head is None:
            msg = "HEAD does not point at a commit"
            raise NoHeadError(msg)
        return self.head

    def resolve_upstream(self, local: Reference) -> Reference:
        try:
            return self.upstreams[local.name]
        except KeyError as e:
            msg = f"No upstream configured for {local.name}"
            raise NoUpstreamError(msg, branch=local.name) from e

    def ahead_behind(self, local: str, upstream: str) -> tuple[int, int]:
        try:
            return self.graph[local, upstream]
        except KeyError as e:
            msg = f"Cannot walk history between {local} and {upstream}"
            raise BackendError(msg) from e

    def status_entries(self) -> Iterator[StatusFlagRecord]:
        if self.status_error is not None:
            raise self.status_error
        yield from self.entries

    def read_config_int(self, key: str) -> int:
        try:
            value = self.config[key]
        except KeyError as e:
            raise ConfigNotSetError(key) from e
        try:
            return parse_git_int(value)
        except ValueError as e:
            raise InvalidConfigValueError(key, value) from e
