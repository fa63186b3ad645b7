"""License compatibility decisions for depscheck.

The decision is a pure function of the (project category, dependency
category) pair, looked up in ``DECISION_TABLE``. A ``None`` entry means
compatible; a string entry is the reason template for an incompatible
pair, formatted with the dependency license and the project's category
and license.

Acceptance matrix (rows = project, columns = dependency):

=================  ==========  =============  ===============  ===========  =======
project \\ dep     permissive  weak_copyleft  strong_copyleft  proprietary  unknown
=================  ==========  =============  ===============  ===========  =======
permissive         yes         yes            no               no           yes*
weak_copyleft      yes         yes            no               no           yes*
strong_copyleft    yes         yes            yes              no           yes*
proprietary        yes         no             no               yes          no
unknown            yes         yes            yes              yes          yes
=================  ==========  =============  ===============  ===========  =======

``*`` compatible, but reported as a warning by the checker. An unknown
project license is also reported as a warning, since nothing is rejected.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from depscheck.analysis.knowledge import classify
from depscheck.models.license import (
    CompatibilityResult,
    CompatibilityStatus,
    LicenseCategory,
)

_PERMISSIVE = LicenseCategory.PERMISSIVE
_WEAK = LicenseCategory.WEAK_COPYLEFT
_STRONG = LicenseCategory.STRONG_COPYLEFT
_PROPRIETARY = LicenseCategory.PROPRIETARY
_UNKNOWN = LicenseCategory.UNKNOWN

_STRONG_COPYLEFT_REASON = (
    "Strong copyleft license {dependency_license} cannot be used in "
    "{project_category} project ({project_license})"
)
_WEAK_COPYLEFT_REASON = (
    "Weak copyleft license {dependency_license} cannot be used in "
    "{project_category} project ({project_license})"
)
_PROPRIETARY_REASON = (
    "Proprietary license {dependency_license} cannot be used in "
    "{project_category} project ({project_license}) without explicit permission"
)
_UNLICENSED_REASON = (
    "Unlicensed dependency ({dependency_license}) cannot be used in "
    "{project_category} project ({project_license}): "
    "no legal right to use it"
)

DECISION_TABLE: Mapping[tuple[LicenseCategory, LicenseCategory], Optional[str]] = (
    MappingProxyType(
        {
            # Permissive projects
            (_PERMISSIVE, _PERMISSIVE): None,
            (_PERMISSIVE, _WEAK): None,
            (_PERMISSIVE, _STRONG): _STRONG_COPYLEFT_REASON,
            (_PERMISSIVE, _PROPRIETARY): _PROPRIETARY_REASON,
            (_PERMISSIVE, _UNKNOWN): None,
            # Weak copyleft projects
            (_WEAK, _PERMISSIVE): None,
            (_WEAK, _WEAK): None,
            (_WEAK, _STRONG): _STRONG_COPYLEFT_REASON,
            (_WEAK, _PROPRIETARY): _PROPRIETARY_REASON,
            (_WEAK, _UNKNOWN): None,
            # Strong copyleft projects
            (_STRONG, _PERMISSIVE): None,
            (_STRONG, _WEAK): None,
            (_STRONG, _STRONG): None,
            (_STRONG, _PROPRIETARY): _PROPRIETARY_REASON,
            (_STRONG, _UNKNOWN): None,
            # Proprietary projects
            (_PROPRIETARY, _PERMISSIVE): None,
            (_PROPRIETARY, _WEAK): _WEAK_COPYLEFT_REASON,
            (_PROPRIETARY, _STRONG): _STRONG_COPYLEFT_REASON,
            (_PROPRIETARY, _PROPRIETARY): None,
            (_PROPRIETARY, _UNKNOWN): _UNLICENSED_REASON,
            # No recognizable project license: nothing to evaluate against
            (_UNKNOWN, _PERMISSIVE): None,
            (_UNKNOWN, _WEAK): None,
            (_UNKNOWN, _STRONG): None,
            (_UNKNOWN, _PROPRIETARY): None,
            (_UNKNOWN, _UNKNOWN): None,
        }
    )
)


def decide(
    project_category: LicenseCategory,
    dependency_category: LicenseCategory,
    project_license: Optional[str],
    dependency_license: str,
) -> CompatibilityResult:
    """Decide whether a dependency license may be used in the project.

    Args:
        project_category: Category of the project license.
        dependency_category: Category of the dependency license.
        project_license: Project license text, used in the reason.
        dependency_license: Dependency license text, used in the reason.

    Returns:
        CompatibilityResult with status and, if incompatible, a reason
        naming the dependency license and the project's category and license.
    """
    template = DECISION_TABLE[(project_category, dependency_category)]
    if template is None:
        return CompatibilityResult(
            project_license=project_license,
            dependency_license=dependency_license,
            project_category=project_category,
            dependency_category=dependency_category,
            status=CompatibilityStatus.COMPATIBLE,
        )

    reason = template.format(
        dependency_license=dependency_license,
        project_category=project_category.label,
        project_license=project_license or "no license",
    )
    return CompatibilityResult(
        project_license=project_license,
        dependency_license=dependency_license,
        project_category=project_category,
        dependency_category=dependency_category,
        status=CompatibilityStatus.INCOMPATIBLE,
        reason=reason,
    )


def check_license_compatibility(
    project_license: Optional[str], dependency_license: str
) -> CompatibilityResult:
    """Classify both licenses and decide their compatibility.

    A missing project license classifies as unknown, which accepts any
    dependency.

    Args:
        project_license: Project license text, or None.
        dependency_license: Dependency license text.

    Returns:
        CompatibilityResult for the pair.
    """
    return decide(
        classify(project_license),
        classify(dependency_license),
        project_license,
        dependency_license,
    )
