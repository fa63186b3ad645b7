"""Dependency license compatibility checker."""

__version__ = "0.1.0"

from depscheck.api import check, dependencies, project_license  # noqa: E402

__all__ = ["__version__", "check", "dependencies", "project_license"]
