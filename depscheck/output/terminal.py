"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from depscheck.analysis.knowledge import classify
from depscheck.constants import LEGAL_DISCLAIMER_SHORT
from depscheck.models.check import (
    CheckResult,
    Dependency,
    LicenseVerdict,
    Verbosity,
)
from depscheck.models.license import CompatibilityStatus, LicenseCategory


class TerminalFormatter:
    """Format check results for terminal display using Rich.

    Prints one line per evaluated or ignored dependency, followed by the
    overall status, the violations and the warnings.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_check_result(
        self, result: CheckResult, project_name: Optional[str] = None
    ) -> None:
        """Format and display a check result.

        Args:
            result: The check result to display.
            project_name: Name shown in the header, if known.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_output(result)
            return

        self._print_header(result, project_name)
        self._print_disclaimer()

        if not result.dependencies and not result.ignored:
            self._console.print("[yellow]No dependencies found[/yellow]")
        for dep, verdicts in result.verdicts_by_dependency():
            self._print_dependency(dep, verdicts)
        for dep in result.ignored:
            self._print_ignored(dep)

        self._console.print("")
        self._print_status(result)
        self._print_violations(result)
        self._print_warnings(result)

    def _print_quiet_output(self, result: CheckResult) -> None:
        """Print only the status line and the violations.

        Args:
            result: The check result to display.
        """
        self._print_status(result)
        for violation in result.violations:
            self._console.print(f"  [red]•[/red] {escape(violation)}")

    def _print_header(self, result: CheckResult, project_name: Optional[str]) -> None:
        license_display = result.project_license or "No license"
        name = project_name or "project"
        self._console.print(
            f"\nChecking licenses for [bold]{escape(name)}[/bold] "
            f"({escape(license_display)})...\n"
        )
        if self._verbosity == Verbosity.VERBOSE:
            category = classify(result.project_license)
            self._console.print(f"Project license category: {category.label}\n")

    def _print_disclaimer(self) -> None:
        """Print legal disclaimer panel."""
        panel = Panel(
            LEGAL_DISCLAIMER_SHORT,
            title="[bold yellow]NOT LEGAL ADVICE[/bold yellow]",
            border_style="yellow",
        )
        self._console.print(panel)
        self._console.print("")

    def _print_dependency(
        self, dep: Dependency, verdicts: list[LicenseVerdict]
    ) -> None:
        licenses = escape(", ".join(dep.licenses))
        name = escape(dep.name)

        if any(v.status == CompatibilityStatus.INCOMPATIBLE for v in verdicts):
            self._console.print(f"[red]✗ {name} ({licenses}) - INCOMPATIBLE[/red]")
        elif any(v.category == LicenseCategory.UNKNOWN for v in verdicts):
            self._console.print(
                f"[yellow]? {name} ({licenses}) - Unrecognized license[/yellow]"
            )
        else:
            self._console.print(f"[green]✓ {name} ({licenses}) - Compatible[/green]")

        if self._verbosity == Verbosity.VERBOSE:
            for verdict in verdicts:
                detail = f"    {escape(verdict.license)}: {verdict.category.label}"
                if verdict.reason:
                    detail += f" - {escape(verdict.reason)}"
                self._console.print(detail)

    def _print_ignored(self, dep: Dependency) -> None:
        licenses = escape(", ".join(dep.licenses))
        self._console.print(
            f"[yellow]⊘ {escape(dep.name)} ({licenses}) - Ignored[/yellow]"
        )

    def _print_status(self, result: CheckResult) -> None:
        if result.passed:
            self._console.print("[green]✓ All dependencies are compatible[/green]")
        else:
            self._console.print(
                f"[red]✗ Found {len(result.violations)} license violation(s)[/red]"
            )

    def _print_violations(self, result: CheckResult) -> None:
        if not result.violations:
            return
        self._console.print("")
        self._console.print(
            f"[bold red]Violations ({len(result.violations)})[/bold red]"
        )
        for violation in result.violations:
            self._console.print(f"  [red]•[/red] {escape(violation)}")

    def _print_warnings(self, result: CheckResult) -> None:
        if not result.warnings:
            return
        self._console.print("")
        self._console.print(
            f"[bold yellow]Warnings ({len(result.warnings)})[/bold yellow]"
        )
        for warning in result.warnings:
            self._console.print(f"  [yellow]![/yellow] {escape(warning)}")
