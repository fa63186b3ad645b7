"""CLI entry point for depscheck."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from depscheck import __version__
from depscheck.analysis.aliases import canonicalize
from depscheck.analysis.checker import check_all
from depscheck.analysis.knowledge import classify, list_licenses_by_category
from depscheck.api import dependencies
from depscheck.config import load_config
from depscheck.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VIOLATIONS
from depscheck.detector import PYPROJECT_FILE, read_project_license, read_project_name
from depscheck.exceptions import ConfigurationError, DepscheckError
from depscheck.models.check import CheckResult, Verbosity
from depscheck.models.license import LicenseCategory
from depscheck.output.report_json import JsonFormatter
from depscheck.output.report_markdown import MarkdownFormatter
from depscheck.output.terminal import TerminalFormatter

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)

_CATEGORY_CHOICES = [category.value for category in LicenseCategory]


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Depscheck - Check dependency licenses for compatibility.

    Compares the license of every dependency with your project's license
    and fails when an incompatible combination is found.

    \b
    Examples:
        depscheck check
        depscheck check --format json
        depscheck licenses
        depscheck classify "Apache 2.0" GPLv3
    """
    pass


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "markdown", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for check results (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write report to file instead of stdout.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root containing pyproject.toml (default: current directory).",
)
@click.option(
    "--project-license",
    default=None,
    help="License to check against, overriding pyproject.toml and the config file.",
)
@click.option(
    "--all-installed",
    is_flag=True,
    default=False,
    help="Check every installed distribution, not only the project's dependencies.",
)
@click.option(
    "--direct-only",
    is_flag=True,
    default=False,
    help="Check only the dependencies declared in pyproject.toml.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show license categories and detection details.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only the status line and violations.",
)
def check(
    output_format: str,
    output_path: str | None,
    config_path: str | None,
    project_dir: Path | None,
    project_license: str | None,
    all_installed: bool,
    direct_only: bool,
    verbose_flag: bool,
    quiet_flag: bool,
) -> None:
    """Check dependency licenses against the project license.

    Reads the project license from pyproject.toml and dependency licenses
    from installed package metadata. Exits with 1 when violations are found.

    \b
    Examples:
        depscheck check
        depscheck check --format json
        depscheck check --output report.md --format markdown
        depscheck check --project-license "All Rights Reserved"
        depscheck check --all-installed
        depscheck check --config custom-config.yaml
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")
    if all_installed and direct_only:
        raise click.UsageError("--all-installed and --direct-only are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL
    _configure_logging(verbosity)

    format_value = output_format.lower()

    try:
        config = load_config(config_path, start_dir=project_dir)
        if project_license:
            config = config.model_copy(
                update={"project_license_override": project_license}
            )

        pyproject = (project_dir or Path.cwd()) / PYPROJECT_FILE
        project_name = read_project_name(pyproject)
        deps = dependencies(
            project_dir,
            all_installed=all_installed,
            transitive=not direct_only,
        )
        result = check_all(read_project_license(pyproject), deps, config)

        _display_result(result, format_value, output_path, verbosity, project_name)

        if result.passed:
            sys.exit(EXIT_SUCCESS)
        sys.exit(EXIT_VIOLATIONS)

    except DepscheckError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)


@main.command()
@click.option(
    "--category",
    type=click.Choice(_CATEGORY_CHOICES, case_sensitive=False),
    default=None,
    help="Only list licenses in this category.",
)
def licenses(category: Optional[str]) -> None:
    """List the licenses depscheck recognizes, by category.

    \b
    Examples:
        depscheck licenses
        depscheck licenses --category weak_copyleft
    """
    if category is not None:
        categories = [LicenseCategory(category.lower())]
    else:
        categories = [c for c in LicenseCategory if c != LicenseCategory.UNKNOWN]

    table = Table(title="Known Licenses")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Licenses", style="green")
    for cat in categories:
        names = list_licenses_by_category(cat)
        table.add_row(cat.label, ", ".join(names) if names else "-")
    _console.print(table)


@main.command(name="classify")
@click.argument("license_names", nargs=-1, required=True)
def classify_command(license_names: tuple[str, ...]) -> None:
    """Show how license names are normalized and categorized.

    \b
    Examples:
        depscheck classify MIT
        depscheck classify "Apache v2.0" GPLv3 "All Rights Reserved"
    """
    table = Table(title="License Classification")
    table.add_column("Input", style="cyan")
    table.add_column("Canonical", style="magenta")
    table.add_column("Category", style="green")
    for name in license_names:
        table.add_row(escape(name), canonicalize(name) or "-", classify(name).label)
    _console.print(table)


def _configure_logging(verbosity: Verbosity) -> None:
    """Configure log output for the selected verbosity.

    Args:
        verbosity: Output verbosity level.
    """
    level = logging.INFO if verbosity == Verbosity.VERBOSE else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _render_report(
    result: CheckResult, format_type: str, project_name: str | None
) -> str:
    """Render a check result as a JSON or Markdown document."""
    if format_type == "json":
        return JsonFormatter().format_check_result(result)
    return MarkdownFormatter().format_check_result(result, project_name)


def _save_report(content: str, path: str) -> None:
    """Write a rendered report, replacing any existing file.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    target = Path(path)
    replacing = target.exists()
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write report to '{path}': {e}") from e

    if replacing:
        _console.print(f"[yellow]Replaced existing file {escape(path)}[/yellow]")
    _console.print(f"[green]Report written to {escape(path)}[/green]")


def _display_result(
    result: CheckResult,
    format_type: str,
    output_path: str | None = None,
    verbosity: Verbosity = Verbosity.NORMAL,
    project_name: str | None = None,
) -> None:
    """Show or save a check result.

    The terminal format cannot be saved, so writing it to a file produces
    the Markdown report instead.

    Args:
        result: The check result.
        format_type: One of terminal, json or markdown.
        output_path: File to write the report to, if any.
        verbosity: Verbosity of terminal output.
        project_name: Project name for report headers, if known.
    """
    if format_type == "terminal" and output_path is None:
        formatter = TerminalFormatter(console=_console, verbosity=verbosity)
        formatter.format_check_result(result, project_name)
        return

    content = _render_report(result, format_type, project_name)
    if output_path is None:
        click.echo(content)
    else:
        _save_report(content, output_path)


def _display_error(error: DepscheckError, format_type: str) -> None:
    """Report a failed check on stderr.

    Args:
        error: The exception that stopped the check.
        format_type: Selected output format; only terminal output is styled.
    """
    message = f"Error: {type(error).__name__}: {error}"
    if format_type != "terminal":
        click.echo(message, err=True)
        return
    _error_console.print(f"[red bold]{escape(message)}[/red bold]")


if __name__ == "__main__":
    main()
