"""Backend protocol for type-safe dependency injection.

This module defines a runtime-checkable Protocol that both DulwichBackend
and FakeBackend satisfy, so the prompt core never depends on dulwich
directly.
"""

# Iterator and models needed at runtime for Protocol method signatures
from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from gitprompt.backend._models import Reference, StatusFlagRecord


@runtime_checkable
class BackendProtocol(Protocol):
    """Read-only operations the prompt needs from a git repository.

    Example:
        >>> def head_name(backend: BackendProtocol) -> str:
        ...     return backend.resolve_reference("HEAD").target
        >>> with open_backend() as backend:
        ...     print(head_name(backend))
    """

    def close(self) -> None:
        """Release the underlying repository handle."""
        ...

    def resolve_reference(self, name: str) -> Reference:
        """Look up a reference by name without following it.

        Args:
            name: Full reference name, e.g. ``HEAD``.

        Returns:
            The reference, direct or symbolic.

        Raises:
            ReferenceNotFoundError: If the reference does not exist.
        """
        ...

    def resolve_head(self) -> Reference:
        """Resolve HEAD through any symbolic links to a direct reference.

        Returns:
            A direct reference named after the final reference in the chain.

        Raises:
            NoHeadError: If HEAD does not resolve to a commit.
        """
        ...

    def resolve_upstream(self, local: Reference) -> Reference:
        """Resolve the upstream reference configured for a local branch.

        Args:
            local: A direct reference to a local branch.

        Returns:
            A direct reference to the upstream branch.

        Raises:
            NoUpstreamError: If the branch has no resolvable upstream.
        """
        ...

    def ahead_behind(self, local: str, upstream: str) -> tuple[int, int]:
        """Count commits unique to each side of two commits.

        Args:
            local: Hex object id of the local commit.
            upstream: Hex object id of the upstream commit.

        Returns:
            Tuple of (ahead, behind).

        Raises:
            BackendError: If the commit graph cannot be walked.
        """
        ...

    def status_entries(self) -> Iterator[StatusFlagRecord]:
        """Enumerate working tree and index differences once.

        Yields:
            One StatusFlagRecord per path with a non-empty status. Order
            is unspecified.

        Raises:
            BackendError: If the status cannot be computed.
        """
        ...

    def read_config_int(self, key: str) -> int:
        """Read an integer repository configuration value.

        Args:
            key: Dotted configuration key, e.g. ``core.abbrev``.

        Returns:
            The parsed integer.

        Raises:
            ConfigNotSetError: If the key is not set.
            InvalidConfigValueError: If the value is not an integer.
        """
        ...
