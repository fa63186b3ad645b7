"""Tests for the license compatibility decision table."""

import pytest

from depscheck.analysis.compatibility import (
    DECISION_TABLE,
    check_license_compatibility,
    decide,
)
from depscheck.models.license import CompatibilityStatus, LicenseCategory

PERMISSIVE = LicenseCategory.PERMISSIVE
WEAK = LicenseCategory.WEAK_COPYLEFT
STRONG = LicenseCategory.STRONG_COPYLEFT
PROPRIETARY = LicenseCategory.PROPRIETARY
UNKNOWN = LicenseCategory.UNKNOWN

INCOMPATIBLE_PAIRS = {
    (PERMISSIVE, STRONG),
    (PERMISSIVE, PROPRIETARY),
    (WEAK, STRONG),
    (WEAK, PROPRIETARY),
    (STRONG, PROPRIETARY),
    (PROPRIETARY, WEAK),
    (PROPRIETARY, STRONG),
    (PROPRIETARY, UNKNOWN),
}


class TestDecisionTable:
    """Tests for DECISION_TABLE contents."""

    def test_table_is_total(self) -> None:
        """Test that every category pair has an entry."""
        assert len(DECISION_TABLE) == 25
        for project in LicenseCategory:
            for dependency in LicenseCategory:
                assert (project, dependency) in DECISION_TABLE

    @pytest.mark.parametrize("project", list(LicenseCategory))
    @pytest.mark.parametrize("dependency", list(LicenseCategory))
    def test_matrix(
        self, project: LicenseCategory, dependency: LicenseCategory
    ) -> None:
        """Test each cell of the acceptance matrix."""
        result = decide(project, dependency, "P", "D")
        expected_compatible = (project, dependency) not in INCOMPATIBLE_PAIRS
        assert result.compatible is expected_compatible
        assert (result.reason is None) is expected_compatible

    def test_table_is_read_only(self) -> None:
        """Test that the decision table cannot be modified."""
        with pytest.raises(TypeError):
            DECISION_TABLE[(PERMISSIVE, STRONG)] = None  # type: ignore[index]


class TestDecide:
    """Tests for decide function."""

    @pytest.mark.parametrize("project", list(LicenseCategory))
    def test_permissive_dependency_always_compatible(
        self, project: LicenseCategory
    ) -> None:
        """Test that permissive dependencies fit every project."""
        result = decide(project, PERMISSIVE, "X", "MIT")
        assert result.status == CompatibilityStatus.COMPATIBLE

    @pytest.mark.parametrize("project", list(LicenseCategory))
    def test_strong_copyleft_only_in_strong_or_unknown(
        self, project: LicenseCategory
    ) -> None:
        """Test that strong copyleft is rejected unless the project is strong copyleft."""
        result = decide(project, STRONG, "X", "GPL-3.0")
        assert result.compatible is (project in (STRONG, UNKNOWN))

    def test_unknown_project_accepts_everything(self) -> None:
        """Test that a project without a recognizable license blocks nothing."""
        for dependency in LicenseCategory:
            assert decide(UNKNOWN, dependency, None, "Anything").compatible

    def test_result_carries_inputs(self) -> None:
        """Test that the result echoes licenses and categories."""
        result = decide(PERMISSIVE, STRONG, "MIT", "GPL-3.0")

        assert result.project_license == "MIT"
        assert result.dependency_license == "GPL-3.0"
        assert result.project_category == PERMISSIVE
        assert result.dependency_category == STRONG

    def test_strong_copyleft_reason(self) -> None:
        """Test the reason for a strong copyleft dependency."""
        result = decide(PERMISSIVE, STRONG, "MIT", "GPL-3.0")

        assert result.status == CompatibilityStatus.INCOMPATIBLE
        assert result.reason == (
            "Strong copyleft license GPL-3.0 cannot be used in "
            "permissive project (MIT)"
        )

    def test_weak_copyleft_reason(self) -> None:
        """Test the reason for a weak copyleft dependency in a proprietary project."""
        result = decide(PROPRIETARY, WEAK, "All Rights Reserved", "LGPL-3.0")

        assert result.reason is not None
        assert "Weak copyleft license LGPL-3.0" in result.reason
        assert "proprietary project (All Rights Reserved)" in result.reason

    def test_proprietary_reason(self) -> None:
        """Test the reason for a proprietary dependency in an open project."""
        result = decide(WEAK, PROPRIETARY, "MPL-2.0", "Proprietary")

        assert result.reason is not None
        assert "Proprietary" in result.reason
        assert "weak copyleft project (MPL-2.0)" in result.reason

    def test_unlicensed_reason(self) -> None:
        """Test that unknown licenses are rejected by proprietary projects."""
        result = decide(PROPRIETARY, UNKNOWN, "All Rights Reserved", "Custom")

        assert result.reason is not None
        assert "Custom" in result.reason
        assert "no legal right" in result.reason

    def test_missing_project_license_in_reason(self) -> None:
        """Test that the reason reads sensibly without a project license."""
        result = decide(PROPRIETARY, STRONG, None, "GPL-3.0")

        assert result.reason is not None
        assert "(no license)" in result.reason


class TestCheckLicenseCompatibility:
    """Tests for check_license_compatibility function."""

    @pytest.mark.parametrize(
        ("project", "dependency", "compatible"),
        [
            ("MIT", "Apache-2.0", True),
            ("MIT", "MIT", True),
            ("MIT", "LGPL-3.0", True),
            ("MIT", "GPL-3.0", False),
            ("Apache-2.0", "AGPL-3.0", False),
            ("GPL-3.0", "LGPL-3.0", True),
            ("GPL-3.0", "MIT", True),
            ("GPL-2.0", "GPL-3.0", True),
            ("GPL-3.0", "Proprietary", False),
            ("All Rights Reserved", "MIT", True),
            ("All Rights Reserved", "GPL-3.0", False),
            ("All Rights Reserved", "MPL-2.0", False),
            ("All Rights Reserved", "Proprietary", True),
            ("All Rights Reserved", "Some Custom License", False),
            ("MIT", "Some Custom License", True),
        ],
    )
    def test_pairs(self, project: str, dependency: str, compatible: bool) -> None:
        """Test classification and decision for raw license strings."""
        result = check_license_compatibility(project, dependency)
        assert result.compatible is compatible

    def test_aliases_are_resolved(self) -> None:
        """Test that spelling variants decide like their canonical form."""
        assert not check_license_compatibility("mit", "GPLv3").compatible
        assert check_license_compatibility("GPL v3", "apache v2.0").compatible

    def test_no_project_license(self) -> None:
        """Test that a missing project license classifies as unknown."""
        result = check_license_compatibility(None, "GPL-3.0")

        assert result.project_category == UNKNOWN
        assert result.compatible
