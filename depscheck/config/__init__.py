"""Configuration handling for depscheck."""
from __future__ import annotations

from depscheck.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from depscheck.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from depscheck.models.config import DepscheckConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "DepscheckConfig",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
