"""src/datafilter/ui/cli/commands/filter.py
What: Run one filtering pass for parsed CLI arguments and show its report.
Why: Wire the application service, report builder and display for the CLI.
"""

from __future__ import annotations

from typing import final

from datafilter.application.services import FilterOutcome, FilterRequest, FilterService
from datafilter.config.config import Config
from datafilter.ui.cli.args.options import ParsedArguments
from datafilter.ui.cli.display import ReportBuilder, ResultDisplay


@final
class FilterCommand:
    """Classify inputs, write outputs and display the report."""

    args: ParsedArguments
    app: FilterService
    request: FilterRequest
    result_display: ResultDisplay

    def __init__(self, args: ParsedArguments, app: FilterService | None = None) -> None:
        """Initialize the command.

        Args:
            args: Validated command line arguments.
            app: Service override (for testing).
        """
        self.args = args
        self.app = app or FilterService()
        self.request = FilterRequest(
            input_paths=args.input_paths,
            output_files=args.output_files,
            append=args.append,
            encoding=Config.load().resolved_encoding(),
        )
        self.result_display = ResultDisplay()

    def execute(self) -> FilterOutcome:
        """Execute the command.

        Returns:
            FilterOutcome: Classified collections and write outcome.

        Raises:
            DataIOError: If an input cannot be read or an output cannot be written.
        """
        outcome = self.app.run(self.request)
        self.display_results(outcome)
        return outcome

    def display_results(self, outcome: FilterOutcome) -> None:
        """Build and print the report for ``outcome``."""
        report = ReportBuilder.build(outcome.result, outcome.written, self.args.verbosity)
        self.result_display.show_report(report)
