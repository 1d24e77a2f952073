"""Package metadata and naming constants."""

PACKAGE_NAME = "decorum"
PACKAGE_NAME_SHORT = "decorum"
__version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Composable, order-checked attribute decorators for immutable value objects"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
CLI_NAME = PACKAGE_NAME_SHORT
