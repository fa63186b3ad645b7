"""Errors raised outside the license decision engine.

The normalizer, classifier and checker never raise for well-typed input;
these exceptions come from reading files and the environment. The CLI
reports any of them on stderr and exits with ``EXIT_ERROR``.
"""


class DepscheckError(Exception):
    """Base class; catching it covers every failure that aborts a check."""


class ConfigurationError(DepscheckError):
    """A ``.depscheck.yaml`` given with ``--config`` is unreadable or invalid.

    Also raised when a report cannot be written to ``--output``.
    """


class DetectionError(DepscheckError):
    """``pyproject.toml`` exists but cannot be read or is not valid TOML."""
