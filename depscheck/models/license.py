"""License classification and compatibility models for depscheck."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class LicenseCategory(Enum):
    """Categories of licenses by restriction level."""

    PERMISSIVE = "permissive"
    WEAK_COPYLEFT = "weak_copyleft"
    STRONG_COPYLEFT = "strong_copyleft"
    PROPRIETARY = "proprietary"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Human-readable category name (e.g. "weak copyleft")."""
        return self.value.replace("_", " ")


class CompatibilityStatus(Enum):
    """Status of a license compatibility decision."""

    COMPATIBLE = "compatible"
    INCOMPATIBLE = "incompatible"


class CompatibilityResult(BaseModel):
    """Outcome of deciding one dependency license against the project license."""

    project_license: Optional[str] = Field(
        default=None, description="Project license text as given"
    )
    dependency_license: str = Field(description="Dependency license text as given")
    project_category: LicenseCategory = Field(description="Category of the project license")
    dependency_category: LicenseCategory = Field(
        description="Category of the dependency license"
    )
    status: CompatibilityStatus = Field(description="Compatibility status")
    reason: Optional[str] = Field(
        default=None,
        description="Why the dependency license is incompatible (None if compatible)",
    )

    model_config = {"extra": "forbid"}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def compatible(self) -> bool:
        """True if the dependency license may be used in the project."""
        return self.status == CompatibilityStatus.COMPATIBLE
