"""Pydantic data models for depscheck."""

from depscheck.models.check import (
    CheckResult,
    CheckStatus,
    Dependency,
    LicenseVerdict,
    Verbosity,
)
from depscheck.models.config import DepscheckConfig
from depscheck.models.license import (
    CompatibilityResult,
    CompatibilityStatus,
    LicenseCategory,
)

__all__ = [
    "CheckResult",
    "CheckStatus",
    "CompatibilityResult",
    "CompatibilityStatus",
    "Dependency",
    "DepscheckConfig",
    "LicenseCategory",
    "LicenseVerdict",
    "Verbosity",
]
