"""Common configuration types.

This module defines the enums shared across configuration models.
"""

from enum import StrEnum


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class Shell(StrEnum):
    """Shell whose zero-width escape markers wrap color codes."""

    ZSH = "zsh"
    BASH = "bash"
    NONE = "none"


class Color(StrEnum):
    """ANSI foreground colors, in SGR order starting at 30."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def sgr(self) -> int:
        """The SGR foreground parameter for this color."""
        return 30 + list(Color).index(self)
