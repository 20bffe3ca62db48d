"""Shared pytest configuration."""

pytest_plugins = ["eventgate.testing.fixtures"]
