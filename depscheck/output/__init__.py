"""Output formatters for depscheck."""

from depscheck.output.report_json import JsonFormatter
from depscheck.output.report_markdown import MarkdownFormatter
from depscheck.output.terminal import TerminalFormatter

__all__ = [
    "JsonFormatter",
    "MarkdownFormatter",
    "TerminalFormatter",
]
