# pyright: reportExplicitAny=false, reportAny=false
import os
import sys
from pathlib import Path
from typing import Any

from gitprompt.config._loader import deep_merge, parse_env_vars, read_toml_file
from gitprompt.config._models import Config
from gitprompt.exceptions import ConfigError
from gitprompt.utils import get_user_config_file

CONFIG_PATH_ENV = "GITPROMPT_CONFIG"
STRICT_CONFIG_ENV = "GITPROMPT_STRICT_CONFIG"


def find_config_file(config_path: Path | None = None) -> Path | None:
    """Locate the configuration file to read.

    Precedence: the explicit path, then GITPROMPT_CONFIG, then the user
    config file when it exists.

    Args:
        config_path: Explicit path (``--config``).

    Returns:
        The path to read, or None when no file applies.
    """
    if config_path is not None:
        return config_path
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    user_file = get_user_config_file()
    if user_file.is_file():
        return user_file
    return None


def load_config(
    *,
    config_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> Config:
    """Load configuration from all sources.

    Sources, lowest to highest precedence: defaults, the configuration file,
    GITPROMPT_* environment variables, CLI overrides.

    Args:
        config_path: Explicit path to a config file (must exist).
        cli_overrides: Values from command-line flags.

    Returns:
        The merged, validated configuration.

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist.
        ConfigError: If a source cannot be parsed or validated.
    """
    data: dict[str, Any] = {}
    sources: list[str] = []

    path = find_config_file(config_path)
    if path is not None:
        data = read_toml_file(path)
        sources.append(str(path))

    env_values = parse_env_vars()
    if env_values:
        data = deep_merge(data, env_values)
        sources.append("env")

    if cli_overrides:
        data = deep_merge(data, cli_overrides)
        sources.append("cli")

    return Config.from_dict(data, source=", ".join(sources) or None)


def safe_load_config(
    *,
    config_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Handles errors based on the GITPROMPT_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and return the default config
    - If "1": fail fast with sys.exit(1)

    Args:
        config_path: Explicit path to config file (--config flag).
        cli_overrides: CLI argument overrides.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns the defaults with only the CLI
        overrides applied, and the error message.
    """
    strict_mode = os.environ.get(STRICT_CONFIG_ENV, "0") == "1"

    try:
        config = load_config(config_path=config_path, cli_overrides=cli_overrides)
    except (ConfigError, OSError) as e:
        error_msg = (
            f"Config file not found: {e.filename}"
            if isinstance(e, FileNotFoundError)
            else f"Failed to load config: {e}"
        )
        if strict_mode:
            print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
            sys.exit(1)
        print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
        return Config.from_dict(cli_overrides or {}, source="cli"), error_msg
    else:
        return config, None
