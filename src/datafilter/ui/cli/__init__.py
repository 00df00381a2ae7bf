"""Command line interface package."""

from datafilter.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
