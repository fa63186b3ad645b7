"""Programmatic entry points for depscheck.

These wire the detector and configuration loader to the checker, the same
way the ``depscheck check`` command does.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from depscheck.analysis.checker import check_all
from depscheck.config.loader import load_config
from depscheck.detector import (
    PYPROJECT_FILE,
    declared_dependency_names,
    get_all_dependency_licenses,
    read_project_license,
    read_project_name,
    resolve_transitive,
)
from depscheck.models.check import CheckResult, Dependency
from depscheck.models.config import DepscheckConfig


def _pyproject(project_dir: Optional[Path]) -> Path:
    return (project_dir or Path.cwd()) / PYPROJECT_FILE


def project_license(
    project_dir: Optional[Path] = None,
    config: Optional[DepscheckConfig] = None,
) -> Optional[str]:
    """Get the project's effective license.

    The configured override wins over the license declared in pyproject.toml.

    Args:
        project_dir: Project root. Defaults to the current directory.
        config: Optional configuration with a project license override.

    Returns:
        License identifier, or None if the project declares none.
    """
    if config is not None and config.project_license_override:
        return config.project_license_override
    return read_project_license(_pyproject(project_dir))


def dependencies(
    project_dir: Optional[Path] = None,
    all_installed: bool = False,
    transitive: bool = True,
) -> list[Dependency]:
    """Get the project's dependencies and their declared licenses.

    Args:
        project_dir: Project root. Defaults to the current directory.
        all_installed: Check every installed distribution instead of the
            dependencies declared in pyproject.toml.
        transitive: Include requirements of the declared dependencies.

    Returns:
        Dependencies with license metadata.
    """
    pyproject = _pyproject(project_dir)
    own_name = read_project_name(pyproject)
    if all_installed:
        return get_all_dependency_licenses(exclude=own_name)

    names = declared_dependency_names(pyproject)
    if transitive:
        names = resolve_transitive(names)
    return get_all_dependency_licenses(names, exclude=own_name)


def check(
    project_dir: Optional[Path] = None,
    config_path: Optional[str] = None,
    all_installed: bool = False,
    transitive: bool = True,
) -> CheckResult:
    """Check all dependencies of a project for license compatibility.

    Args:
        project_dir: Project root. Defaults to the current directory.
        config_path: Configuration file. Discovered in the project root
            if not given.
        all_installed: Check every installed distribution.
        transitive: Include requirements of the declared dependencies.

    Returns:
        CheckResult with status, violations and warnings.

    Raises:
        ConfigurationError: If an explicitly given config file is invalid.
        DetectionError: If pyproject.toml cannot be parsed.
    """
    config = load_config(config_path, start_dir=project_dir)
    return check_all(
        read_project_license(_pyproject(project_dir)),
        dependencies(project_dir, all_installed=all_installed, transitive=transitive),
        config,
    )
