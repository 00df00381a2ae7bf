"""src/datafilter/ui/cli/display/report.py
What: Assemble the end-of-run text report from the classified collections.
Why: Keep report layout in one place, independent of how it is printed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, final

from datafilter.application.services import WriteOutcome
from datafilter.features.classification import Category, ClassificationResult
from datafilter.features.statistics import (
    count_elements,
    max_length,
    max_value,
    mean_value,
    min_length,
    min_value,
    sum_values,
)
from datafilter.ui.cli.models import Verbosity

SUCCESS_BANNER: Final[str] = "The program was successfully executed.\n\n"

# Values in the extended block line up on this column.
_LABEL_WIDTH: Final[int] = 21


def _stat_line(label: str, value: str) -> str:
    return f"        {f'- {label}:':<{_LABEL_WIDTH}}{value}\n"


@final
class ReportBuilder:
    """Build the success banner and per-category statistics blocks."""

    @staticmethod
    def build(result: ClassificationResult, written: WriteOutcome, verbosity: Verbosity) -> str:
        """Return the report for one run.

        Only categories that were written contribute a block, so statistics
        are never computed for an empty collection.

        Args:
            result: Classified collections.
            written: Which categories were written to disk.
            verbosity: Requested statistics level.

        Returns:
            str: Banner followed by integer, float and string blocks, stripped.
        """
        report = SUCCESS_BANNER
        if verbosity is not Verbosity.NONE:
            for category in Category:
                if written.written(category):
                    report += ReportBuilder.category_block(category, result, verbosity)
        return report.strip()

    @staticmethod
    def category_block(
        category: Category,
        result: ClassificationResult,
        verbosity: Verbosity,
    ) -> str:
        """Render the simple block for ``category`` and, for ``FULL``, its extended block."""
        block = ReportBuilder.simple_block(category, result.values(category))
        if verbosity is not Verbosity.FULL:
            return block
        if category is Category.INTEGERS:
            return block + ReportBuilder.numeric_block(result.integers, decimals=0)
        if category is Category.FLOATS:
            return block + ReportBuilder.numeric_block(result.floats, decimals=4)
        return block + ReportBuilder.text_block(result.strings)

    @staticmethod
    def simple_block(category: Category, values: Sequence[object]) -> str:
        """Render the category header and element count."""
        return f"{category.label}:\n    - Number of elements:    {count_elements(values)}\n"

    @staticmethod
    def numeric_block(values: Sequence[int | float], decimals: int) -> str:
        """Render min, max and sum with ``decimals`` places and the mean with four."""
        return (
            "    Extended statistics:\n"
            + _stat_line("Min", f"{min_value(values):.{decimals}f}")
            + _stat_line("Max", f"{max_value(values):.{decimals}f}")
            + _stat_line("Sum", f"{sum_values(values):.{decimals}f}")
            + _stat_line("Mean", f"{mean_value(values):.4f}")
            + "\n"
        )

    @staticmethod
    def text_block(values: Sequence[str]) -> str:
        """Render the shortest and longest string lengths."""
        return (
            "    Extended statistics:\n"
            + _stat_line("Shortest length", str(min_length(values)))
            + _stat_line("Longest length", str(max_length(values)))
        )


__all__ = ["ReportBuilder", "SUCCESS_BANNER"]
