"""Configuration loading - files merged over defaults, env vars expanded."""
import copy
import json
import os
from typing import Any, Dict, Optional

import yaml

from decorum.config.defaults import DEFAULT_CONFIG
from decorum.config.schemas import AppConfig, validate_config
from decorum.config.utils.env_expansion import expand_config_env_vars
from decorum.domain.base.exceptions import ConfigurationError

CONFIG_ENV_VAR = "DECORUM_CONFIG"


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class ConfigurationLoader:
    """Loads configuration from JSON or YAML files."""

    @staticmethod
    def read_file(path: str) -> Dict[str, Any]:
        """
        Read a configuration file.

        Args:
            path: Path to a .json, .yml or .yaml file

        Returns:
            Raw configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or unparseable
        """
        if not os.path.isfile(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.endswith((".yml", ".yaml")):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    @classmethod
    def load_raw(cls, path: Optional[str] = None) -> Dict[str, Any]:
        """Merge the file at path (or $DECORUM_CONFIG) over the defaults."""
        path = path or os.environ.get(CONFIG_ENV_VAR)
        config = copy.deepcopy(DEFAULT_CONFIG)
        if path:
            config = deep_merge(config, cls.read_file(path))
        return expand_config_env_vars(config)

    @classmethod
    def load(cls, path: Optional[str] = None) -> AppConfig:
        """Load and validate the application configuration."""
        return validate_config(cls.load_raw(path))
