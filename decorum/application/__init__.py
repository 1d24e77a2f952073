"""Application layer - registries, the built-in catalog and services."""
