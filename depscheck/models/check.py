"""Check-related Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from depscheck.models.license import CompatibilityStatus, LicenseCategory


class CheckStatus(Enum):
    """Overall outcome of a license check."""

    PASS = "pass"
    FAIL = "fail"


class Dependency(BaseModel):
    """A dependency and the licenses it declares."""

    model_config = {"extra": "forbid"}

    name: str = Field(min_length=1, description="Package name")
    licenses: list[str] = Field(
        min_length=1,
        description="Declared license identifiers (more than one for dual licensing)",
    )


class LicenseVerdict(BaseModel):
    """Decision for one license declared by one dependency."""

    model_config = {"extra": "forbid"}

    package: str = Field(description="Dependency name")
    license: str = Field(description="Dependency license as declared")
    category: LicenseCategory = Field(description="Category of the license")
    status: CompatibilityStatus = Field(description="Compatibility with the project")
    reason: Optional[str] = Field(
        default=None, description="Why the license is incompatible"
    )


class CheckResult(BaseModel):
    """Result of checking all dependencies against the project license."""

    model_config = {"extra": "forbid"}

    status: CheckStatus = Field(description="pass if there are no violations")
    project_license: Optional[str] = Field(
        default=None, description="Effective project license (after override)"
    )
    dependencies: list[Dependency] = Field(
        default_factory=list,
        description="Evaluated dependencies, ignored ones excluded",
    )
    violations: list[str] = Field(
        default_factory=list,
        description="One message per incompatible dependency license",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Advisory messages that do not fail the check",
    )
    ignored: list[Dependency] = Field(
        default_factory=list,
        description="Dependencies skipped because of ignored_packages",
    )
    verdicts: list[LicenseVerdict] = Field(
        default_factory=list,
        description="Per-license decisions in dependency order",
    )

    @property
    def passed(self) -> bool:
        """True if the check found no violations."""
        return self.status == CheckStatus.PASS

    def verdicts_by_dependency(self) -> list[tuple[Dependency, list[LicenseVerdict]]]:
        """Pair each evaluated dependency with its own verdicts.

        Verdicts are stored flat, one per license in dependency order, so
        they are split by position rather than by package name; two entries
        with the same name keep their own licenses.

        Returns:
            (dependency, verdicts) pairs in dependency order.
        """
        pairs: list[tuple[Dependency, list[LicenseVerdict]]] = []
        start = 0
        for dep in self.dependencies:
            end = start + len(dep.licenses)
            pairs.append((dep, self.verdicts[start:end]))
            start = end
        return pairs

    def incompatible_packages(self) -> list[str]:
        """Names of dependencies with at least one incompatible license.

        Returns:
            Package names in dependency order, without duplicates.
        """
        names: list[str] = []
        for verdict in self.verdicts:
            if (
                verdict.status == CompatibilityStatus.INCOMPATIBLE
                and verdict.package not in names
            ):
                names.append(verdict.package)
        return names


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"
