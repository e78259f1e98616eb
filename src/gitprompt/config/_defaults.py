"""Default configuration values.

This module defines the built-in defaults used when no other configuration
source provides a value. They reproduce the classic zsh prompt layout.

Note: DEFAULT_CONFIG is a plain dict for compatibility with deep_merge,
which always returns copies.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "shell": "zsh",
    "tokens": {
        "prefix": "[",
        "suffix": "]",
        "separator": "|",
    },
    "symbols": {
        "behind": "<",
        "ahead": ">",
        "staged": "-",
        "conflicts": "!",
        "changed": "+",
        "untracked": "_",
        "clean": "=",
    },
    "colors": {
        "bold": True,
        "branch": "black",
        "behind": "red",
        "ahead": "cyan",
        "staged": "yellow",
        "conflicts": "red",
        "changed": "blue",
        "untracked": "magenta",
        "clean": "green",
    },
    "status": {
        "include_ignored": False,
    },
    "logging": {
        "level": "warning",
        "format": "json",
        "file": "",
    },
}
