"""Dulwich implementation of the backend protocol.

This module adapts a dulwich ``Repo`` to BackendProtocol. It only reads
from the repository: references, the index, the working tree status, the
commit graph and the configuration stack.
"""

from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import Final, Self

from dulwich import porcelain
from dulwich.errors import MissingCommitError
from dulwich.ignore import IgnoreFilterManager
from dulwich.index import ConflictedIndexEntry
from dulwich.refs import SYMREF
from dulwich.repo import Repo

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
    RepositoryUnavailableError,
)
from gitprompt.utils import (
    decode_bytes,
    discover_repo,
    get_worktree_dir,
    is_local_branch,
    parse_git_int,
    strip_refs_heads,
)

# porcelain.status() groups staged paths under these keys
_STAGED_FLAGS: Final = {
    "add": StatusFlag.INDEX_NEW,
    "delete": StatusFlag.INDEX_DELETED,
    "modify": StatusFlag.INDEX_MODIFIED,
}

_LOCAL_REMOTE: Final = b"."


class DulwichBackend:
    """Read-only git backend over a dulwich repository.

    The class implements the context manager protocol; the underlying
    dulwich Repo is closed when the context exits.

    Attributes:
        root: The repository's working tree directory.
    """

    __slots__: Final = ("_include_ignored", "_repo", "_root")
    _repo: Repo
    _root: Path
    _include_ignored: bool

    def __init__(self, repo: Repo, *, include_ignored: bool = False) -> None:
        """Wrap an open dulwich repository.

        Args:
            repo: The repository to read from. Ownership passes to the backend.
            include_ignored: Report ignored untracked paths with the IGNORED
                flag instead of omitting them.
        """
        self._repo = repo
        self._root = get_worktree_dir(repo)
        self._include_ignored = include_ignored

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        """Enter the context manager.

        Returns:
            The backend instance.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the repository."""
        self.close()

    def close(self) -> None:
        """Close the underlying dulwich repository."""
        self._repo.close()

    @property
    def root(self) -> Path:
        """Get the working tree directory of the repository."""
        return self._root

    # =========================================================================
    # References
    # =========================================================================

    def resolve_reference(self, name: str) -> Reference:
        """Look up a reference by name without following it."""
        try:
            raw = self._repo.refs.read_ref(name.encode())
        except (KeyError, OSError) as e:
            raise ReferenceNotFoundError(name) from e
        if raw is None:
            raise ReferenceNotFoundError(name)

        if raw.startswith(SYMREF):
            target = decode_bytes(raw[len(SYMREF) :]).strip()
            return Reference(name=name, kind=ReferenceKind.SYMBOLIC, target=target)
        return Reference(
            name=name, kind=ReferenceKind.DIRECT, target=decode_bytes(raw).strip()
        )

    def resolve_head(self) -> Reference:
        """Resolve HEAD through symbolic references to a direct reference."""
        try:
            names, sha = self._repo.refs.follow(b"HEAD")
        except (KeyError, OSError) as e:
            msg = "HEAD cannot be resolved"
            raise NoHeadError(msg) from e
        if sha is None or not names:
            # Unborn branch: HEAD names a branch with no commits yet
            msg = "HEAD does not point at a commit"
            raise NoHeadError(msg)

        return Reference(
            name=decode_bytes(names[-1]),
            kind=ReferenceKind.DIRECT,
            target=decode_bytes(sha),
        )

    def resolve_upstream(self, local: Reference) -> Reference:
        """Resolve the upstream branch from ``branch.<name>.*`` configuration."""
        if not is_local_branch(local.name):
            msg = f"{local.name} is not a local branch"
            raise NoUpstreamError(msg, branch=local.name)

        branch = strip_refs_heads(local.name) or ""
        section = (b"branch", branch.encode())
        config = self._repo.get_config()
        try:
            remote = config.get(section, b"remote")
            merge = config.get(section, b"merge")
        except KeyError as e:
            msg = f"No upstream configured for {branch}"
            raise NoUpstreamError(msg, branch=local.name) from e

        if remote == _LOCAL_REMOTE:
            upstream_name = merge
        else:
            merged_branch = (strip_refs_heads(merge) or "").encode()
            upstream_name = b"refs/remotes/" + remote + b"/" + merged_branch

        try:
            sha = self._repo.refs[upstream_name]
        except KeyError as e:
            msg = f"Upstream {decode_bytes(upstream_name)} does not exist"
            raise NoUpstreamError(msg, branch=local.name) from e

        return Reference(
            name=decode_bytes(upstream_name),
            kind=ReferenceKind.DIRECT,
            target=decode_bytes(sha),
        )

    # =========================================================================
    # Commit Graph
    # =========================================================================

    def ahead_behind(self, local: str, upstream: str) -> tuple[int, int]:
        """Count commits reachable from one side and not the other."""
        local_sha = local.encode("ascii")
        upstream_sha = upstream.encode("ascii")
        try:
            ahead = self._count_commits(local_sha, upstream_sha)
            behind = self._count_commits(upstream_sha, local_sha)
        except (KeyError, MissingCommitError) as e:
            msg = f"Cannot walk history between {local} and {upstream}"
            raise BackendError(msg) from e
        return ahead, behind

    def _count_commits(self, include: bytes, exclude: bytes) -> int:
        walker = self._repo.get_walker(include=[include], exclude=[exclude])
        return sum(1 for _ in walker)

    # =========================================================================
    # Status
    # =========================================================================

    def status_entries(self) -> Iterator[StatusFlagRecord]:
        """Enumerate index and working tree differences.

        Staged, unstaged and untracked paths from ``porcelain.status`` are
        merged into one flag set per path. Paths with conflicted index
        entries are reported as CONFLICTED only.
        """
        try:
            status = porcelain.status(
                self._repo,
                ignored=self._include_ignored,
                untracked_files="all",
            )
            conflicted = self._conflicted_paths()
        except (KeyError, OSError, ValueError) as e:
            msg = f"Cannot compute status for {self._root}"
            raise BackendError(msg) from e

        flags: dict[str, StatusFlag] = {}

        def mark(path: bytes | str, flag: StatusFlag) -> None:
            key = decode_bytes(path)
            flags[key] = flags.get(key, StatusFlag.CURRENT) | flag

        # dulwich doesn't have type stubs
        staged = status.staged  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        for change_type, flag in _STAGED_FLAGS.items():
            for path in staged.get(change_type, []):  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
                mark(path, flag)  # pyright: ignore[reportUnknownArgumentType]

        for path in status.unstaged:  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            mark(path, self._worktree_flag(decode_bytes(path)))  # pyright: ignore[reportUnknownArgumentType]

        ignore_manager = (
            IgnoreFilterManager.from_repo(self._repo) if self._include_ignored else None
        )
        for path in status.untracked:  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
            rel = decode_bytes(path)  # pyright: ignore[reportUnknownArgumentType]
            if ignore_manager is not None and ignore_manager.is_ignored(rel):
                mark(rel, StatusFlag.IGNORED)
            else:
                mark(rel, StatusFlag.WT_NEW)

        for path in conflicted:
            flags[path] = StatusFlag.CONFLICTED

        for path in sorted(flags):
            yield StatusFlagRecord(path=path, flags=flags[path])

    def _conflicted_paths(self) -> frozenset[str]:
        index = self._repo.open_index()
        return frozenset(
            decode_bytes(path)
            for path, entry in index.items()
            if isinstance(entry, ConflictedIndexEntry)
        )

    def _worktree_flag(self, path: str) -> StatusFlag:
        # porcelain reports deletions and modifications together
        if (self._root / path).is_symlink() or (self._root / path).exists():
            return StatusFlag.WT_MODIFIED
        return StatusFlag.WT_DELETED

    # =========================================================================
    # Configuration
    # =========================================================================

    def read_config_int(self, key: str) -> int:
        """Read an integer from the repository's configuration stack."""
        section_name, _, name = key.rpartition(".")
        if not section_name or not name:
            raise ConfigNotSetError(key)

        # "branch.main.remote" -> section (b"branch", b"main"), name b"remote"
        section = tuple(part.encode() for part in section_name.split(".", 1))
        try:
            raw = self._repo.get_config_stack().get(section, name.encode())
        except KeyError as e:
            raise ConfigNotSetError(key) from e

        value = decode_bytes(raw)
        try:
            return parse_git_int(value)
        except ValueError as e:
            raise InvalidConfigValueError(key, value) from e


def open_backend(
    working_dir: Path | None = None,
    *,
    include_ignored: bool = False,
) -> DulwichBackend:
    """Open the repository containing a directory.

    Args:
        working_dir: Directory to start discovery from. If None, uses the
            current working directory.
        include_ignored: Report ignored untracked paths with the IGNORED flag.

    Returns:
        An open DulwichBackend; use it as a context manager.

    Raises:
        RepositoryUnavailableError: If no repository contains the directory.
    """
    if working_dir is None:
        working_dir = Path.cwd()
    repo = discover_repo(working_dir)
    if repo is None:
        msg = "Not inside a Git repository"
        raise RepositoryUnavailableError(msg, path=working_dir)
    return DulwichBackend(repo, include_ignored=include_ignored)
