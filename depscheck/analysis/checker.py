"""Aggregate license checking for depscheck.

Evaluates every license of every non-ignored dependency against the
project license and folds the decisions into a single CheckResult.
"""

from __future__ import annotations

from typing import Optional, Sequence

from depscheck.analysis.compatibility import decide
from depscheck.analysis.filtering import filter_ignored_packages
from depscheck.analysis.knowledge import classify
from depscheck.models.check import CheckResult, CheckStatus, Dependency, LicenseVerdict
from depscheck.models.config import DepscheckConfig
from depscheck.models.license import CompatibilityStatus, LicenseCategory

MISSING_PROJECT_LICENSE_WARNING = (
    "Project has no declared license; it is treated as proprietary with no "
    "declared rights. Declare a license in pyproject.toml or set "
    "project_license in the depscheck configuration."
)


def _unrecognized_project_license_warning(license_id: str) -> str:
    return (
        f"Project license {license_id} is not recognized; dependency "
        f"compatibility could not be evaluated and no dependency was rejected"
    )


def _unknown_license_warning(package: str, license_id: str) -> str:
    return (
        f"{package} ({license_id}): unrecognized license; "
        f"you have no verified legal right to use this dependency"
    )


def check_all(
    project_license: Optional[str],
    dependencies: Sequence[Dependency],
    config: DepscheckConfig,
) -> CheckResult:
    """Check all dependencies against the project license.

    The configured project license override, if any, replaces the detected
    project license. Ignored packages are left out of the evaluation and of
    ``CheckResult.dependencies`` entirely.

    Args:
        project_license: Detected project license, or None.
        dependencies: Dependencies with their declared licenses.
        config: Ignored packages and optional project license override.

    Returns:
        CheckResult with status, violations and warnings in dependency order.
    """
    effective_license = config.project_license_override or project_license
    if effective_license is not None and not effective_license.strip():
        effective_license = None

    filtered = filter_ignored_packages(list(dependencies), config)
    project_category = classify(effective_license)

    violations: list[str] = []
    warnings: list[str] = []
    verdicts: list[LicenseVerdict] = []

    if effective_license is None:
        warnings.append(MISSING_PROJECT_LICENSE_WARNING)
    elif project_category == LicenseCategory.UNKNOWN:
        warnings.append(_unrecognized_project_license_warning(effective_license))

    for dep in filtered.dependencies:
        for license_id in dep.licenses:
            dependency_category = classify(license_id)
            result = decide(
                project_category, dependency_category, effective_license, license_id
            )
            verdicts.append(
                LicenseVerdict(
                    package=dep.name,
                    license=license_id,
                    category=dependency_category,
                    status=result.status,
                    reason=result.reason,
                )
            )

            if result.status == CompatibilityStatus.INCOMPATIBLE:
                violations.append(f"{dep.name} ({license_id}): {result.reason}")
            elif dependency_category == LicenseCategory.UNKNOWN:
                warnings.append(_unknown_license_warning(dep.name, license_id))

    return CheckResult(
        status=CheckStatus.FAIL if violations else CheckStatus.PASS,
        project_license=effective_license,
        dependencies=filtered.dependencies,
        violations=violations,
        warnings=warnings,
        ignored=filtered.ignored,
        verdicts=verdicts,
    )
