"""Configuration models."""

from gitprompt.config._models._common import Color, LogFormat, LogLevel, Shell
from gitprompt.config._models._config import Config
from gitprompt.config._models._logging import LoggingConfig
from gitprompt.config._models._prompt import (
    ColorsConfig,
    StatusConfig,
    SymbolsConfig,
    TokensConfig,
)

__all__ = [
    "Color",
    "ColorsConfig",
    "Config",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "Shell",
    "StatusConfig",
    "SymbolsConfig",
    "TokensConfig",
]
