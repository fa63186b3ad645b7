"""Configuration Pydantic models for depscheck."""
from __future__ import annotations

from typing import Any, FrozenSet, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


class DepscheckConfig(BaseModel):
    """Override configuration for a license check.

    Immutable once loaded. ``ignored_packages`` has set semantics, so
    duplicate names in the configuration file collapse to one entry.
    """

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    ignored_packages: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Package names to skip during checking (case-sensitive).",
    )
    project_license_override: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("project_license_override", "project_license"),
        description="License to use for the project instead of the detected one.",
    )

    @field_validator("ignored_packages", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        """Treat an empty ``ignored_packages:`` key as no ignored packages."""
        return frozenset() if value is None else value
