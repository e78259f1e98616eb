"""Common git utility functions.

This module provides shared helpers used by the dulwich backend, including
repository discovery, reference name handling, and git's integer syntax.
"""

from pathlib import Path
from typing import Final

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

_REFS_HEADS: Final = "refs/heads/"

# Multipliers for git's integer suffixes (see git-config "Values")
_INT_SUFFIXES: Final = {"k": 1024, "m": 1024**2, "g": 1024**3}


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed.

    Args:
        value: A bytes or str value.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode()
    return value


def discover_repo(cwd: Path | str | None = None) -> Repo | None:
    """Discover git repository from the given directory.

    Args:
        cwd: Directory to start search from. If None, uses current directory.

    Returns:
        Repo instance if found, None otherwise.
    """
    try:
        if cwd is not None:
            return Repo.discover(str(cwd))
        return Repo.discover()
    except NotGitRepository:
        return None


def get_worktree_dir(repo: Repo) -> Path:
    """Get the worktree directory for a repository.

    Args:
        repo: The repository instance.

    Returns:
        Path to the worktree directory.
    """
    path = Path(decode_bytes(repo.path))
    # If path is .git directory, return parent
    if path.name == ".git":
        return path.parent
    return path


def strip_refs_heads(branch: bytes | str | None) -> str | None:
    """Strip refs/heads/ prefix from a branch reference.

    Args:
        branch: Branch reference (bytes or str), possibly with refs/heads/ prefix.

    Returns:
        Branch name without prefix, or None if input is None.
    """
    if branch is None:
        return None
    branch_str = decode_bytes(branch)
    if branch_str.startswith(_REFS_HEADS):
        return branch_str[len(_REFS_HEADS) :]
    return branch_str


def is_local_branch(name: str) -> bool:
    """Check whether a full reference name is a local branch."""
    return name.startswith(_REFS_HEADS) and len(name) > len(_REFS_HEADS)


def parse_git_int(value: str) -> int:
    """Parse an integer using git's config syntax.

    Accepts an optional ``k``, ``m`` or ``g`` suffix (case-insensitive).

    Args:
        value: Raw configuration value.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If the value is not a git integer.

    Examples:
        >>> parse_git_int("12")
        12
        >>> parse_git_int("1k")
        1024
    """
    text = value.strip()
    multiplier = 1
    if text and text[-1].lower() in _INT_SUFFIXES:
        multiplier = _INT_SUFFIXES[text[-1].lower()]
        text = text[:-1]
    return int(text, 10) * multiplier
