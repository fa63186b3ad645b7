"""License knowledge base for depscheck.

Static tables of known licenses per category, and the classifier that
maps a raw license string onto one of them. Each canonical identifier
belongs to at most one category; anything not listed is unknown.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from depscheck.analysis.aliases import canonicalize
from depscheck.analysis.normalize import normalize
from depscheck.models.license import LicenseCategory

PERMISSIVE_LICENSES: tuple[str, ...] = (
    "MIT",
    "Apache-2.0",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "BSD-4-Clause",
    "ISC",
    "Unlicense",
    "0BSD",
    "CC0-1.0",
    "Zlib",
    "BSL-1.0",
    "PSF-2.0",
    "Python-2.0",
)

WEAK_COPYLEFT_LICENSES: tuple[str, ...] = (
    "LGPL-2.1",
    "LGPL-3.0",
    "MPL-2.0",
    "EPL-2.0",
    "CDDL-1.0",
    "LGPL-2.0",
    "MPL-1.1",
    "EPL-1.0",
    "CDDL-1.1",
)

STRONG_COPYLEFT_LICENSES: tuple[str, ...] = (
    "GPL-2.0",
    "GPL-3.0",
    "AGPL-3.0",
)

PROPRIETARY_LICENSES: tuple[str, ...] = (
    "All Rights Reserved",
    "Unlicensed",
    "Proprietary",
)

_LICENSES_BY_CATEGORY: Mapping[LicenseCategory, tuple[str, ...]] = MappingProxyType(
    {
        LicenseCategory.PERMISSIVE: PERMISSIVE_LICENSES,
        LicenseCategory.WEAK_COPYLEFT: WEAK_COPYLEFT_LICENSES,
        LicenseCategory.STRONG_COPYLEFT: STRONG_COPYLEFT_LICENSES,
        LicenseCategory.PROPRIETARY: PROPRIETARY_LICENSES,
    }
)


def _build_index() -> Mapping[str, LicenseCategory]:
    index: dict[str, LicenseCategory] = {}
    for category, names in _LICENSES_BY_CATEGORY.items():
        for name in names:
            token = normalize(name)
            if token in index:
                raise ValueError(
                    f"License {name!r} is listed as both "
                    f"{index[token].value} and {category.value}"
                )
            index[token] = category
    return MappingProxyType(index)


# Canonical token -> category, built once at import
CATEGORY_INDEX: Mapping[str, LicenseCategory] = _build_index()


def classify(license_id: Optional[str]) -> LicenseCategory:
    """Categorize a license by its restriction level.

    Args:
        license_id: Raw license text, or None.

    Returns:
        LicenseCategory of the license; UNKNOWN if unrecognized or empty.
    """
    return CATEGORY_INDEX.get(canonicalize(license_id), LicenseCategory.UNKNOWN)


def is_permissive(license_id: Optional[str]) -> bool:
    """Check if a license is permissive."""
    return classify(license_id) == LicenseCategory.PERMISSIVE


def is_copyleft(license_id: Optional[str]) -> bool:
    """Check if a license is copyleft (weak or strong)."""
    return classify(license_id) in (
        LicenseCategory.WEAK_COPYLEFT,
        LicenseCategory.STRONG_COPYLEFT,
    )


def is_proprietary(license_id: Optional[str]) -> bool:
    """Check if a license is proprietary."""
    return classify(license_id) == LicenseCategory.PROPRIETARY


def list_licenses_by_category(category: LicenseCategory) -> list[str]:
    """List the known licenses in a category.

    Args:
        category: Category to list.

    Returns:
        Display names of the licenses in the category; empty for UNKNOWN.
    """
    return list(_LICENSES_BY_CATEGORY.get(category, ()))
