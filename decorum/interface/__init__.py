"""Interface layer - adapters between the CLI and application services."""
