"""Dependency filtering for the ignored packages configuration."""

from __future__ import annotations

from typing import NamedTuple

from depscheck.models.check import Dependency
from depscheck.models.config import DepscheckConfig


class FilterResult(NamedTuple):
    """Result of filtering dependencies.

    Attributes:
        dependencies: Dependencies left to evaluate, in input order.
        ignored: Dependencies that were skipped, in input order.
    """

    dependencies: list[Dependency]
    ignored: list[Dependency]


def filter_ignored_packages(
    dependencies: list[Dependency],
    config: DepscheckConfig,
) -> FilterResult:
    """Split dependencies into evaluated and ignored ones.

    Package name matching is case-sensitive: "Requests" in the config does
    not ignore an installed "requests".

    Args:
        dependencies: Dependencies to filter.
        config: Configuration with ignored_packages.

    Returns:
        FilterResult with kept and ignored dependencies.
    """
    if not config.ignored_packages:
        return FilterResult(dependencies=list(dependencies), ignored=[])

    kept: list[Dependency] = []
    ignored: list[Dependency] = []
    for dep in dependencies:
        if dep.name in config.ignored_packages:
            ignored.append(dep)
        else:
            kept.append(dep)

    return FilterResult(dependencies=kept, ignored=ignored)
