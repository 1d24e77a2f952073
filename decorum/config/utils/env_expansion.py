"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# ${VAR:default} - expanded to the default when VAR is unset
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    value = _DEFAULT_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(2)), value)
    return os.path.expandvars(value)


def expand_env_vars(value: Any) -> Any:
    """
    Expand $VAR, ${VAR} and ${VAR:default} references.

    Dictionaries and lists are expanded recursively; other values are returned
    unchanged. References to unset variables without a default are left as-is.

    Args:
        value: Configuration value to expand

    Returns:
        Value with environment variables expanded
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config)
