"""Core services: configuration, errors and logging."""
