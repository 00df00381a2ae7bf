"""Report assembly and console display."""

from .report import SUCCESS_BANNER, ReportBuilder
from .result import ResultDisplay

__all__ = ["ReportBuilder", "ResultDisplay", "SUCCESS_BANNER"]
