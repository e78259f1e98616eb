"""gitprompt exceptions."""

from pathlib import Path
from typing import Any


class GitPromptError(Exception):
    """Base exception for gitprompt errors."""


class RepositoryUnavailableError(GitPromptError):
    """Raised when no git repository can be opened at the working directory."""

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize with error message and the directory that was searched."""
        super().__init__(message)
        self.path: Path = path


class ReferenceUnavailableError(GitPromptError):
    """Raised when HEAD cannot be resolved by any strategy."""

    def __init__(self, message: str, *, name: str = "HEAD") -> None:
        """Initialize with error message and the reference name."""
        super().__init__(message)
        self.name: str = name


class EmptyLabelError(GitPromptError):
    """Raised when the resolved branch label is empty."""


# =============================================================================
# Backend Exceptions
# =============================================================================


class BackendError(GitPromptError):
    """Base exception for version control backend failures."""


class ReferenceNotFoundError(BackendError, KeyError):
    """Raised when a named reference does not exist."""

    def __init__(self, name: str) -> None:
        """Initialize with the missing reference name."""
        super().__init__(f"Reference not found: {name}")
        self.name: str = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class NoHeadError(BackendError):
    """Raised when the repository head cannot be resolved (unborn branch)."""


class NoUpstreamError(BackendError):
    """Raised when a branch has no resolvable upstream reference."""

    def __init__(self, message: str, *, branch: str) -> None:
        """Initialize with error message and the local branch reference name."""
        super().__init__(message)
        self.branch: str = branch


class ConfigNotSetError(BackendError, KeyError):
    """Raised when a repository configuration key is not set."""

    def __init__(self, key: str) -> None:
        """Initialize with the missing configuration key."""
        super().__init__(f"Config key not set: {key}")
        self.key: str = key

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidConfigValueError(BackendError, ValueError):
    """Raised when a repository configuration value cannot be parsed."""

    def __init__(self, key: str, value: str) -> None:
        """Initialize with the configuration key and its raw value."""
        super().__init__(f"Invalid integer for {key}: {value!r}")
        self.key: str = key
        self.value: str = value


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitPromptError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.source: str | None = source
