"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig,
    ChainConfig,
    LoggingConfig,
    SubjectConfig,
    validate_config,
)

# Configuration management
from .loader import ConfigurationLoader
from .manager import ConfigurationManager

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Specific configurations
    "ChainConfig",
    "SubjectConfig",
    "LoggingConfig",
    # Configuration management
    "ConfigurationManager",
    "ConfigurationLoader",
]
