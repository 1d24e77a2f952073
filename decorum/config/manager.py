"""Configuration manager - lazy, typed access to the application configuration."""
from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel

from decorum.config.loader import ConfigurationLoader
from decorum.config.schemas import AppConfig, ChainConfig, LoggingConfig, validate_config
from decorum.domain.base.exceptions import ConfigurationError

T = TypeVar("T", bound=BaseModel)

_TYPED_SECTIONS: Dict[Type[BaseModel], str] = {
    AppConfig: "",
    LoggingConfig: "logging",
}


class ConfigurationManager:
    """Configuration manager loading once and serving typed sections."""

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Validated application configuration (loaded on first access)."""
        if self._app_config is None:
            self.get_raw_config()
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Raw merged configuration dictionary."""
        if self._raw_config is None:
            raw = ConfigurationLoader.load_raw(self._config_file)
            # Validate up front so bad files fail with ConfigurationError
            self._app_config = validate_config(raw)
            self._raw_config = raw
        return self._raw_config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key.

        Args:
            key: Dotted path such as "logging.level"
            default: Value returned when the key is missing

        Returns:
            Configuration value or default
        """
        value: Any = self.get_raw_config()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a configuration section as its schema type."""
        if config_type not in _TYPED_SECTIONS:
            raise ConfigurationError(f"No configuration section for {config_type.__name__}")
        section = _TYPED_SECTIONS[config_type]
        if not section:
            return self.app_config
        return getattr(self.app_config, section)

    def get_chain(self, name: str) -> ChainConfig:
        """Get a named chain configuration."""
        return self.app_config.get_chain(name)

    def reload(self) -> None:
        """Drop cached configuration so the next access reads the file again."""
        self._raw_config = None
        self._app_config = None
