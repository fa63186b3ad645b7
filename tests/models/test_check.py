"""Tests for check and license models."""

import pytest
from pydantic import ValidationError

from depscheck.analysis.checker import check_all
from depscheck.models.check import (
    CheckResult,
    CheckStatus,
    Dependency,
    LicenseVerdict,
)
from depscheck.models.config import DepscheckConfig
from depscheck.models.license import (
    CompatibilityResult,
    CompatibilityStatus,
    LicenseCategory,
)


class TestDependency:
    """Tests for Dependency model."""

    def test_valid(self) -> None:
        """Test creating a dependency."""
        dep = Dependency(name="requests", licenses=["Apache-2.0"])

        assert dep.name == "requests"
        assert dep.licenses == ["Apache-2.0"]

    def test_empty_name_rejected(self) -> None:
        """Test that the name must not be empty."""
        with pytest.raises(ValidationError):
            Dependency(name="", licenses=["MIT"])

    def test_empty_licenses_rejected(self) -> None:
        """Test that at least one license is required."""
        with pytest.raises(ValidationError):
            Dependency(name="foo", licenses=[])

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Dependency(name="foo", licenses=["MIT"], version="1.0")  # type: ignore[call-arg]


class TestLicenseCategory:
    """Tests for LicenseCategory enum."""

    def test_values(self) -> None:
        """Test category values."""
        assert [c.value for c in LicenseCategory] == [
            "permissive",
            "weak_copyleft",
            "strong_copyleft",
            "proprietary",
            "unknown",
        ]

    def test_label(self) -> None:
        """Test human-readable labels."""
        assert LicenseCategory.WEAK_COPYLEFT.label == "weak copyleft"
        assert LicenseCategory.PERMISSIVE.label == "permissive"


class TestCompatibilityResult:
    """Tests for CompatibilityResult model."""

    def test_compatible_computed(self) -> None:
        """Test the computed compatible flag and its serialization."""
        result = CompatibilityResult(
            project_license="MIT",
            dependency_license="GPL-3.0",
            project_category=LicenseCategory.PERMISSIVE,
            dependency_category=LicenseCategory.STRONG_COPYLEFT,
            status=CompatibilityStatus.INCOMPATIBLE,
            reason="nope",
        )

        assert result.compatible is False
        assert result.model_dump()["compatible"] is False


class TestCheckResult:
    """Tests for CheckResult model."""

    def test_passed(self) -> None:
        """Test the passed property."""
        assert CheckResult(status=CheckStatus.PASS).passed
        assert not CheckResult(status=CheckStatus.FAIL, violations=["x"]).passed

    def test_defaults(self) -> None:
        """Test default empty collections."""
        result = CheckResult(status=CheckStatus.PASS)

        assert result.project_license is None
        assert result.dependencies == []
        assert result.violations == []
        assert result.warnings == []
        assert result.ignored == []
        assert result.verdicts == []

    def test_incompatible_packages_deduplicated(self) -> None:
        """Test that a package with several bad licenses is listed once."""
        verdicts = [
            LicenseVerdict(
                package="dual",
                license=lic,
                category=LicenseCategory.STRONG_COPYLEFT,
                status=CompatibilityStatus.INCOMPATIBLE,
                reason="r",
            )
            for lic in ["GPL-3.0", "AGPL-3.0"]
        ]
        verdicts.append(
            LicenseVerdict(
                package="ok",
                license="MIT",
                category=LicenseCategory.PERMISSIVE,
                status=CompatibilityStatus.COMPATIBLE,
            )
        )
        result = CheckResult(status=CheckStatus.FAIL, verdicts=verdicts)

        assert result.incompatible_packages() == ["dual"]

    def test_verdicts_by_dependency_splits_by_position(self) -> None:
        """Test that entries sharing a name keep their own verdicts."""
        result = check_all(
            "MIT",
            [
                Dependency(name="a", licenses=["MIT"]),
                Dependency(name="a", licenses=["GPL-3.0"]),
                Dependency(name="b", licenses=["MIT", "Custom"]),
            ],
            DepscheckConfig(),
        )

        pairs = result.verdicts_by_dependency()

        assert [dep.name for dep, _ in pairs] == ["a", "a", "b"]
        assert [[v.license for v in verdicts] for _, verdicts in pairs] == [
            ["MIT"],
            ["GPL-3.0"],
            ["MIT", "Custom"],
        ]
