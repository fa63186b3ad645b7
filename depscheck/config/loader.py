"""Locate, parse and validate ``.depscheck.yaml`` files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from depscheck.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from depscheck.exceptions import ConfigurationError
from depscheck.models.config import DepscheckConfig

logger = logging.getLogger(__name__)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first configuration file present in a directory.

    Candidates are tried in ``DEFAULT_CONFIG_NAMES`` order, so
    ``.depscheck.yaml`` shadows ``.depscheck.yml``.

    Args:
        start_dir: Directory to look in. Defaults to the current directory.

    Returns:
        Path of the configuration file, or None.
    """
    directory = start_dir or Path.cwd()
    candidates = (directory / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.exists()), None)


def _read_yaml_mapping(path: Path) -> dict[str, Any] | None:
    """Parse a YAML file whose document must be a mapping.

    Returns None for a blank or comment-only document.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if document is None or isinstance(document, dict):
        return document
    raise ConfigurationError(
        f"Invalid configuration in '{path}': "
        f"expected a mapping at root level, got {type(document).__name__}"
    )


def _describe(error: ValidationError) -> str:
    """Flatten pydantic errors to ``field: message`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def load_config_file(path: Path) -> DepscheckConfig:
    """Load and validate one configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        The validated configuration; defaults if the file is empty.

    Raises:
        ConfigurationError: If the file is unreadable, is not a YAML
            mapping, or contains unknown keys or values of the wrong type.
    """
    document = _read_yaml_mapping(path)
    if document is None:
        return get_default_config()

    try:
        return DepscheckConfig.model_validate(document)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_describe(e)}"
        ) from e


def load_config(
    config_path: str | None = None, start_dir: Path | None = None
) -> DepscheckConfig:
    """Resolve the configuration for a check.

    Errors in an explicitly named file propagate. A discovered file that
    fails to load is logged and the defaults are used instead.

    Args:
        config_path: File given on the command line, if any.
        start_dir: Directory searched when no file is given.

    Returns:
        The effective DepscheckConfig.

    Raises:
        ConfigurationError: If ``config_path`` is given and invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file(start_dir)
    if discovered is None:
        logger.debug("No configuration file found, using defaults")
        return get_default_config()

    try:
        config = load_config_file(discovered)
    except ConfigurationError as e:
        logger.warning("Ignoring configuration file: %s", e)
        return get_default_config()

    logger.info("Loaded configuration from %s", discovered)
    return config
