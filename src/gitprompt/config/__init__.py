"""gitprompt configuration.

This module provides loading, validation and typed access to the prompt
configuration.

Example:
    >>> from gitprompt.config import load_config
    >>> config = load_config()
    >>> config.symbols.clean
    '='
"""

from gitprompt.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._load import find_config_file, load_config, safe_load_config
from ._loader import deep_merge, parse_env_vars, read_toml_file, set_nested_key
from ._models import (
    Color,
    ColorsConfig,
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    Shell,
    StatusConfig,
    SymbolsConfig,
    TokensConfig,
)

__all__ = [
    "DEFAULT_CONFIG",
    "Color",
    "ColorsConfig",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "Shell",
    "StatusConfig",
    "SymbolsConfig",
    "TokensConfig",
    "deep_merge",
    "find_config_file",
    "load_config",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
