"""Configuration file names and the built-in configuration."""

from __future__ import annotations

from depscheck.models.config import DepscheckConfig

# Looked up in the project root, first match wins
DEFAULT_CONFIG_NAMES = [".depscheck.yaml", ".depscheck.yml"]


def get_default_config() -> DepscheckConfig:
    """Return the configuration used when no file applies.

    Nothing is ignored and the project license is taken from
    ``pyproject.toml``. Also used in place of a discovered file that
    fails to load.
    """
    return DepscheckConfig()
