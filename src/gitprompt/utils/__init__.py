"""Shared utilities for gitprompt."""

from ._git import (
    decode_bytes,
    discover_repo,
    get_worktree_dir,
    is_local_branch,
    parse_git_int,
    strip_refs_heads,
)
from ._logging import LogFormatType, create_logger
from ._paths import get_config_dir, get_log_dir, get_log_file, get_user_config_file

__all__ = [
    "LogFormatType",
    "create_logger",
    "decode_bytes",
    "discover_repo",
    "get_config_dir",
    "get_log_dir",
    "get_log_file",
    "get_user_config_file",
    "get_worktree_dir",
    "is_local_branch",
    "parse_git_int",
    "strip_refs_heads",
]
