"""src/datafilter/ui/cli/display/result.py
What: Print the end-of-run report to standard output.
Why: Keep console output concerns out of report assembly.
"""

from __future__ import annotations

from typing import final

from rich.console import Console


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize result display."""
        self.console = Console(soft_wrap=True)

    def show_report(self, report: str) -> None:
        """Print ``report`` verbatim.

        Args:
            report: Assembled report text.
        """
        self.console.print(report, markup=False, highlight=False, emoji=False)
