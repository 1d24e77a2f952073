"""Configuration schemas."""

from .app_schema import AppConfig, validate_config
from .chain_schema import ChainConfig, SubjectConfig
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "ChainConfig",
    "SubjectConfig",
    "LoggingConfig",
]
