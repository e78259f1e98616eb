from pathlib import Path

import platformdirs

APP_NAME = "gitprompt"


def get_config_dir() -> Path:
    """Get the platform-specific gitprompt configuration directory."""
    return platformdirs.user_config_path(APP_NAME)


def get_user_config_file() -> Path:
    r"""Get the path to the user configuration file.

    - Linux: ``~/.config/gitprompt/config.toml``
    - macOS: ``~/Library/Application Support/gitprompt/config.toml``
    - Windows: ``%LOCALAPPDATA%\gitprompt\config.toml``

    The path is returned regardless of whether the file exists.
    """
    return get_config_dir() / "config.toml"


def get_log_dir() -> Path:
    """Get the platform-specific gitprompt log directory."""
    return platformdirs.user_log_path(APP_NAME)


def get_log_file() -> Path:
    """Get the path to the default log file."""
    return get_log_dir() / "gitprompt.log"
