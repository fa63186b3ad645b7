"""License analysis logic for depscheck."""
from depscheck.analysis.aliases import ALIASES, canonicalize, resolve
from depscheck.analysis.checker import check_all
from depscheck.analysis.compatibility import (
    DECISION_TABLE,
    check_license_compatibility,
    decide,
)
from depscheck.analysis.filtering import FilterResult, filter_ignored_packages
from depscheck.analysis.knowledge import (
    classify,
    is_copyleft,
    is_permissive,
    is_proprietary,
    list_licenses_by_category,
)
from depscheck.analysis.normalize import normalize

__all__ = [
    "ALIASES",
    "DECISION_TABLE",
    "FilterResult",
    "canonicalize",
    "check_all",
    "check_license_compatibility",
    "classify",
    "decide",
    "filter_ignored_packages",
    "is_copyleft",
    "is_permissive",
    "is_proprietary",
    "list_licenses_by_category",
    "normalize",
    "resolve",
]
