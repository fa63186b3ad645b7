"""JSON output formatter for license check results."""
import json
from datetime import datetime, timezone
from typing import Any

from depscheck import __version__
from depscheck.analysis.knowledge import classify
from depscheck.constants import LEGAL_DISCLAIMER
from depscheck.models.check import CheckResult


class JsonFormatter:
    """Format check results as JSON output.

    Provides a structured representation of the check for programmatic
    processing in CI/CD pipelines.
    """

    def format_check_result(self, result: CheckResult) -> str:
        """Format check result as JSON string.

        Args:
            result: The check result to format.

        Returns:
            JSON string representation of the check result.
        """
        output = self._build_output(result)
        return json.dumps(output, indent=2)

    def _build_output(self, result: CheckResult) -> dict[str, Any]:
        return {
            "metadata": self._build_metadata(),
            "summary": self._build_summary(result),
            "dependencies": self._build_dependencies(result),
            "ignored": [dep.model_dump() for dep in result.ignored],
            "violations": list(result.violations),
            "warnings": list(result.warnings),
        }

    def _build_metadata(self) -> dict[str, Any]:
        """Build metadata section.

        Returns:
            Dictionary with generation time, tool version and disclaimer.
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "disclaimer": LEGAL_DISCLAIMER,
        }

    def _build_summary(self, result: CheckResult) -> dict[str, Any]:
        return {
            "status": result.status.value,
            "project_license": result.project_license,
            "project_category": classify(result.project_license).value,
            "dependencies_checked": len(result.dependencies),
            "ignored_count": len(result.ignored),
            "violations_count": len(result.violations),
            "warnings_count": len(result.warnings),
        }

    def _build_dependencies(self, result: CheckResult) -> list[dict[str, Any]]:
        """Build per-dependency entries with one decision per license.

        Args:
            result: The check result.

        Returns:
            List of dependency dictionaries in check order.
        """
        entries: list[dict[str, Any]] = []
        for dep, verdicts in result.verdicts_by_dependency():
            entries.append(
                {
                    "name": dep.name,
                    "licenses": [
                        {
                            "license": verdict.license,
                            "category": verdict.category.value,
                            "status": verdict.status.value,
                            "reason": verdict.reason,
                        }
                        for verdict in verdicts
                    ],
                }
            )
        return entries
