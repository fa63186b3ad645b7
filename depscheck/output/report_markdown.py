"""Markdown output formatter for license check results."""

from datetime import datetime, timezone
from typing import Optional

from depscheck.analysis.knowledge import classify
from depscheck.constants import LEGAL_DISCLAIMER
from depscheck.models.check import CheckResult


class MarkdownFormatter:
    """Format check results as Markdown output.

    Suitable for attaching to pull requests or for legal review.
    """

    def format_check_result(
        self, result: CheckResult, project_name: Optional[str] = None
    ) -> str:
        """Format check result as Markdown string.

        Args:
            result: The check result to format.
            project_name: Name shown in the title, if known.

        Returns:
            Markdown string representation of the check result.
        """
        lines: list[str] = []

        title = "# License Compatibility Report"
        if project_name:
            title += f": {project_name}"
        lines.append(title)
        lines.append("")

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        lines.append(f"*Generated: {timestamp}*")
        lines.append("")

        lines.extend(self._format_summary(result))
        lines.append("")
        lines.extend(self._format_disclaimer())
        lines.append("")
        lines.extend(self._format_dependencies(result))

        if result.ignored:
            lines.append("")
            lines.extend(self._format_ignored(result))
        if result.violations:
            lines.append("")
            lines.extend(self._format_list("Violations", result.violations))
        if result.warnings:
            lines.append("")
            lines.extend(self._format_list("Warnings", result.warnings))

        return "\n".join(lines)

    def _format_summary(self, result: CheckResult) -> list[str]:
        status = "PASS" if result.passed else "FAIL"
        project_license = result.project_license or "None"
        return [
            "## Summary",
            "",
            "| Metric | Value |",
            "|--------|-------|",
            f"| Status | **{status}** |",
            f"| Project License | {self._cell(project_license)} |",
            f"| Project Category | {classify(result.project_license).label} |",
            f"| Dependencies Checked | {len(result.dependencies)} |",
            f"| Packages Ignored | {len(result.ignored)} |",
            f"| Violations | {len(result.violations)} |",
            f"| Warnings | {len(result.warnings)} |",
        ]

    def _format_disclaimer(self) -> list[str]:
        return [f"> **Disclaimer:** {LEGAL_DISCLAIMER}"]

    def _format_dependencies(self, result: CheckResult) -> list[str]:
        """Format the per-license decision table.

        Args:
            result: The check result.

        Returns:
            List of Markdown lines.
        """
        lines = ["## Dependencies", ""]
        if not result.verdicts:
            lines.append("*No dependencies checked.*")
            return lines

        lines.append("| Package | License | Category | Status |")
        lines.append("|---------|---------|----------|--------|")
        for verdict in result.verdicts:
            lines.append(
                f"| {self._cell(verdict.package)} | {self._cell(verdict.license)} "
                f"| {verdict.category.label} | {verdict.status.value} |"
            )
        return lines

    def _format_ignored(self, result: CheckResult) -> list[str]:
        lines = ["## Ignored Packages", ""]
        for dep in result.ignored:
            lines.append(f"- {dep.name} ({', '.join(dep.licenses)})")
        return lines

    def _format_list(self, heading: str, items: list[str]) -> list[str]:
        lines = [f"## {heading}", ""]
        lines.extend(f"- {item}" for item in items)
        return lines

    @staticmethod
    def _cell(text: str) -> str:
        """Escape pipe characters for Markdown table cells."""
        return text.replace("|", "\\|")
