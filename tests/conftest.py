"""Shared fixtures for depscheck tests."""

from email.message import Message
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


def build_metadata(
    name: str,
    license_field: Optional[str] = None,
    license_expression: Optional[str] = None,
    classifiers: Optional[list[str]] = None,
) -> Message:
    """Build distribution metadata the way importlib.metadata exposes it."""
    metadata = Message()
    metadata["Name"] = name
    metadata["Version"] = "1.0.0"
    if license_field is not None:
        metadata["License"] = license_field
    if license_expression is not None:
        metadata["License-Expression"] = license_expression
    for classifier in classifiers or []:
        metadata["Classifier"] = classifier
    return metadata


@pytest.fixture
def make_dist() -> Callable[..., MagicMock]:
    """Provide a factory for fake installed distributions."""

    def factory(
        name: str,
        license_expression: Optional[str] = None,
        license_field: Optional[str] = None,
        classifiers: Optional[list[str]] = None,
        requires: Optional[list[str]] = None,
    ) -> MagicMock:
        dist = MagicMock()
        dist.metadata = build_metadata(
            name,
            license_field=license_field,
            license_expression=license_expression,
            classifiers=classifiers,
        )
        dist.requires = requires
        return dist

    return factory


@pytest.fixture
def make_metadata() -> Callable[..., Message]:
    """Provide a factory for distribution metadata."""
    return build_metadata
