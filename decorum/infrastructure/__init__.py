"""Infrastructure layer - logging and error handling for the CLI and services."""
