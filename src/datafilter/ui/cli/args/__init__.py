"""Command line argument handling package."""

from datafilter.ui.cli.args.parser import ArgumentParser
from datafilter.ui.cli.args.options import ParsedArguments

__all__ = ["ArgumentParser", "ParsedArguments"]
