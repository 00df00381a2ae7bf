"""CLI command implementations."""

from .filter import FilterCommand

__all__ = ["FilterCommand"]
