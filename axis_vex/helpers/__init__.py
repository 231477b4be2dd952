"""Shared helpers: console output, configuration, state files and locks."""
