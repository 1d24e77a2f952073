"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from decorum.domain.base.exceptions import ConfigurationError

from .chain_schema import ChainConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    chains: Dict[str, ChainConfig] = Field(default_factory=dict, description="Named chains")

    def get_chain(self, name: str) -> ChainConfig:
        """Get a named chain configuration."""
        if name not in self.chains:
            raise ConfigurationError(f"No chain named '{name}' in configuration", [f"chains.{name}"])
        return self.chains[name]


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate a raw configuration dictionary.

    Args:
        config: Configuration dictionary

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    try:
        return AppConfig.model_validate(config)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", fields) from e
