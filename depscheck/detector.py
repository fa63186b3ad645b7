"""License detection for the project and its installed dependencies.

Reads the project license from ``pyproject.toml`` and dependency licenses
from the metadata of installed distributions. Nothing is fetched over the
network: a dependency that is not installed, or installed without license
metadata, is left out of the result.
"""
from __future__ import annotations

import logging
import tomllib
from collections import deque
from importlib.metadata import (
    PackageMetadata,
    PackageNotFoundError,
    distribution,
    distributions,
)
from pathlib import Path
from typing import Any, Iterable, Optional

from packaging.requirements import InvalidRequirement, Requirement
from packaging.utils import canonicalize_name

from depscheck.exceptions import DetectionError
from depscheck.models.check import Dependency

logger = logging.getLogger(__name__)

PYPROJECT_FILE = "pyproject.toml"

# License field values that mean "no license declared"
_NO_LICENSE_VALUES = {"", "UNKNOWN", "NONE", "N/A"}

# Longer License fields are usually the full license text, not a name
MAX_LICENSE_FIELD_LENGTH = 64

# Mapping of trove classifiers to license identifiers
CLASSIFIER_TO_LICENSE: dict[str, str] = {
    "License :: OSI Approved :: MIT License": "MIT",
    "License :: OSI Approved :: MIT No Attribution License (MIT-0)": "MIT",
    "License :: OSI Approved :: Apache Software License": "Apache-2.0",
    "License :: OSI Approved :: BSD License": "BSD-3-Clause",
    "License :: OSI Approved :: ISC License (ISCL)": "ISC",
    "License :: OSI Approved :: The Unlicense (Unlicense)": "Unlicense",
    "License :: OSI Approved :: zlib/libpng License": "Zlib",
    "License :: OSI Approved :: Boost Software License 1.0 (BSL-1.0)": "BSL-1.0",
    "License :: OSI Approved :: Python Software Foundation License": "PSF-2.0",
    "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication": "CC0-1.0",
    "License :: OSI Approved :: GNU Lesser General Public License v2 (LGPLv2)": (
        "LGPL-2.0"
    ),
    "License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)": (
        "LGPL-2.0"
    ),
    "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)": (
        "LGPL-3.0"
    ),
    "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)": (
        "LGPL-3.0"
    ),
    "License :: OSI Approved :: Mozilla Public License 1.1 (MPL 1.1)": "MPL-1.1",
    "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)": "MPL-2.0",
    "License :: OSI Approved :: Eclipse Public License 1.0 (EPL-1.0)": "EPL-1.0",
    "License :: OSI Approved :: Eclipse Public License 2.0 (EPL-2.0)": "EPL-2.0",
    "License :: OSI Approved :: Common Development and Distribution License 1.0 (CDDL-1.0)": (
        "CDDL-1.0"
    ),
    "License :: OSI Approved :: GNU General Public License v2 (GPLv2)": "GPL-2.0",
    "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)": (
        "GPL-2.0"
    ),
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)": "GPL-3.0",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)": (
        "GPL-3.0"
    ),
    "License :: OSI Approved :: GNU Affero General Public License v3": "AGPL-3.0",
    "License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)": (
        "AGPL-3.0"
    ),
    "License :: Other/Proprietary License": "Proprietary",
}


def load_pyproject(path: Path) -> dict[str, Any]:
    """Load a pyproject.toml file.

    Args:
        path: Path to pyproject.toml.

    Returns:
        Parsed TOML document, or an empty dict if the file does not exist.

    Raises:
        DetectionError: If the file exists but cannot be read or parsed.
    """
    if not path.exists():
        logger.info("No %s found at %s", PYPROJECT_FILE, path)
        return {}

    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DetectionError(f"Cannot read '{path}': {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise DetectionError(f"Invalid TOML in '{path}': {e}") from e


def licenses_from_classifiers(classifiers: Iterable[str]) -> list[str]:
    """Map ``License ::`` trove classifiers to license identifiers.

    Unmapped license classifiers contribute their last segment so the
    license still shows up (as unknown) instead of disappearing.

    Args:
        classifiers: Trove classifier strings.

    Returns:
        License identifiers in classifier order, without duplicates.
    """
    licenses: list[str] = []
    for classifier in classifiers:
        if not classifier.startswith("License ::"):
            continue
        if classifier in CLASSIFIER_TO_LICENSE:
            license_id = CLASSIFIER_TO_LICENSE[classifier]
        else:
            segments = [s.strip() for s in classifier.split("::")]
            # "License :: OSI Approved" alone names no license
            if len(segments) < 3 and segments[-1] == "OSI Approved":
                continue
            license_id = segments[-1]
        if license_id not in licenses:
            licenses.append(license_id)
    return licenses


def read_project_license(pyproject_path: Path) -> Optional[str]:
    """Detect the project's license from pyproject.toml.

    Checks ``[project].license`` (a PEP 639 expression string or a
    ``{text = ...}`` table) first, then the ``License ::`` classifiers.
    Returns the first license if several are declared.

    Args:
        pyproject_path: Path to the project's pyproject.toml.

    Returns:
        License identifier, or None if the project declares none.

    Raises:
        DetectionError: If pyproject.toml exists but is invalid.
    """
    project = load_pyproject(pyproject_path).get("project", {})

    declared = project.get("license")
    if isinstance(declared, str) and declared.strip():
        return declared.strip()
    if isinstance(declared, dict):
        text = declared.get("text")
        if isinstance(text, str) and text.strip():
            return text.strip()
        if "file" in declared:
            logger.info(
                "Project license is only given as a file (%s); "
                "falling back to classifiers",
                declared["file"],
            )

    licenses = licenses_from_classifiers(project.get("classifiers", []))
    if licenses:
        return licenses[0]
    return None


def read_project_name(pyproject_path: Path) -> Optional[str]:
    """Return ``[project].name`` from pyproject.toml, if declared."""
    name = load_pyproject(pyproject_path).get("project", {}).get("name")
    return name if isinstance(name, str) else None


def declared_dependency_names(pyproject_path: Path) -> list[str]:
    """List the runtime dependencies declared in pyproject.toml.

    Requirements whose environment marker does not match the running
    interpreter are skipped, as are unparsable requirement strings.

    Args:
        pyproject_path: Path to the project's pyproject.toml.

    Returns:
        Distribution names in declared order, without duplicates.
    """
    project = load_pyproject(pyproject_path).get("project", {})
    names: list[str] = []
    for raw in project.get("dependencies", []):
        try:
            requirement = Requirement(raw)
        except InvalidRequirement as e:
            logger.warning("Skipping invalid requirement %r: %s", raw, e)
            continue
        if requirement.marker is not None and not requirement.marker.evaluate(
            {"extra": ""}
        ):
            logger.debug("Skipping %s: marker does not apply", requirement.name)
            continue
        if requirement.name not in names:
            names.append(requirement.name)
    return names


def extract_licenses(metadata: PackageMetadata) -> list[str]:
    """Extract license identifiers from distribution metadata.

    Resolution order:
    1. ``License-Expression`` (PEP 639), kept as a single identifier
    2. ``License ::`` classifiers
    3. A short, single-line ``License`` field

    Args:
        metadata: Metadata of an installed distribution.

    Returns:
        License identifiers; empty if none are declared.
    """
    expression = metadata.get("License-Expression")
    if expression and expression.strip():
        return [expression.strip()]

    licenses = licenses_from_classifiers(metadata.get_all("Classifier") or [])
    if licenses:
        return licenses

    field = (metadata.get("License") or "").strip()
    if (
        field.upper() not in _NO_LICENSE_VALUES
        and "\n" not in field
        and len(field) <= MAX_LICENSE_FIELD_LENGTH
    ):
        return [field]
    return []


def get_dependency_license(package_name: str) -> Optional[list[str]]:
    """Get the declared licenses of one installed distribution.

    Args:
        package_name: Distribution name.

    Returns:
        License identifiers, or None if the distribution is not installed
        or declares no license.
    """
    try:
        dist = distribution(package_name)
    except PackageNotFoundError:
        logger.info("%s is not installed; skipping", package_name)
        return None

    licenses = extract_licenses(dist.metadata)
    if not licenses:
        logger.info("%s declares no license metadata; skipping", package_name)
        return None
    return licenses


def get_all_dependency_licenses(
    names: Optional[list[str]] = None,
    exclude: Optional[str] = None,
) -> list[Dependency]:
    """Collect dependencies and their licenses.

    Args:
        names: Distribution names to look up, kept in the given order.
            If None, every installed distribution is used, sorted by name.
        exclude: Distribution name to leave out (usually the project itself).

    Returns:
        Dependencies that have license metadata.
    """
    if names is None:
        names = _installed_distribution_names()

    excluded = canonicalize_name(exclude) if exclude else None
    dependencies: list[Dependency] = []
    for name in names:
        if excluded is not None and canonicalize_name(name) == excluded:
            continue
        licenses = get_dependency_license(name)
        if licenses is not None:
            dependencies.append(Dependency(name=name, licenses=licenses))
    return dependencies


def _installed_distribution_names() -> list[str]:
    seen: set[str] = set()
    names: list[str] = []
    for dist in distributions():
        name = dist.metadata.get("Name")
        if name is None or canonicalize_name(name) in seen:
            continue
        seen.add(canonicalize_name(name))
        names.append(name)
    # Sorted for deterministic output
    return sorted(names, key=str.lower)


def resolve_transitive(names: list[str]) -> list[str]:
    """Expand dependency names with the requirements of installed packages.

    Walks ``Requires-Dist`` breadth-first, skipping requirements that only
    apply to extras or to other environments. Each package is visited once,
    so circular requirements terminate.

    Args:
        names: Direct dependency names.

    Returns:
        Direct dependencies followed by their transitive requirements.
    """
    ordered: list[str] = []
    visited: set[str] = set()
    queue = deque(names)

    while queue:
        name = queue.popleft()
        key = canonicalize_name(name)
        if key in visited:
            continue
        visited.add(key)

        try:
            dist = distribution(name)
        except PackageNotFoundError:
            # Kept so the lookup reports it as missing
            ordered.append(name)
            continue

        ordered.append(dist.metadata.get("Name") or name)
        for raw in dist.requires or []:
            try:
                requirement = Requirement(raw)
            except InvalidRequirement:
                logger.debug("Skipping invalid requirement %r of %s", raw, name)
                continue
            if requirement.marker is not None and not requirement.marker.evaluate(
                {"extra": ""}
            ):
                continue
            queue.append(requirement.name)

    return ordered
