# pyright: reportExplicitAny=false, reportAny=false
"""Configuration container with typed access.

This module provides the Config class, the single immutable configuration
structure built once at startup and injected into the prompt renderer.
"""

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gitprompt.config._defaults import DEFAULT_CONFIG
from gitprompt.config._loader import deep_merge
from gitprompt.config._models._common import Shell
from gitprompt.config._models._logging import LoggingConfig
from gitprompt.config._models._prompt import (
    ColorsConfig,
    StatusConfig,
    SymbolsConfig,
    TokensConfig,
)
from gitprompt.exceptions import ConfigValidationError


class Config(BaseModel):
    """Immutable gitprompt configuration.

    Use from_dict() rather than the constructor so that defaults are merged
    and validation errors are reported uniformly.

    Attributes:
        shell: Shell whose zero-width markers wrap color codes.
        tokens: Prefix, suffix and separator text.
        symbols: Symbol preceding each count.
        colors: Color of each segment.
        status: Status enumeration settings.
        logging: Logging settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    shell: Shell = Shell.ZSH
    tokens: TokensConfig = Field(default_factory=TokensConfig)
    symbols: SymbolsConfig = Field(default_factory=SymbolsConfig)
    colors: ColorsConfig = Field(default_factory=ColorsConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: str | None = None) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Args:
            data: Dictionary of configuration values.
            source: Where the values came from, for error reporting.

        Returns:
            Validated configuration.

        Raises:
            ConfigValidationError: If a value is rejected.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            msg = f"Invalid value for {key}: {error['msg']}"
            raise ConfigValidationError(
                msg, key=key, value=error.get("input"), source=source
            ) from e
