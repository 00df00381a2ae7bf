"""Where: src/datafilter/shared/errors.py
What: Exception hierarchy for expected, user-facing failures.
Why: Let the CLI map every anticipated failure to exit status 1 with a plain message.
"""

from __future__ import annotations

HELP_HINT: str = "Use --help for usage information."


class DataFilterError(Exception):
    """Base exception for failures that abort a run with a message."""


class ArgumentError(DataFilterError):
    """Raised when command line flags or operands are malformed."""


class FilesystemSetupError(DataFilterError):
    """Raised when a required output directory or file cannot be created."""


class DataIOError(DataFilterError):
    """Raised when reading an input file or writing an output file fails."""


def with_help_hint(message: str) -> str:
    """Append the standard ``--help`` hint to ``message``."""

    return f"{message} {HELP_HINT}"


__all__ = [
    "HELP_HINT",
    "ArgumentError",
    "DataFilterError",
    "DataIOError",
    "FilesystemSetupError",
    "with_help_hint",
]
