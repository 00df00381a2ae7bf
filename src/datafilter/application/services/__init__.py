"""Application services."""

from .filter_service import FilterOutcome, FilterRequest, FilterService, WriteOutcome

__all__ = ["FilterOutcome", "FilterRequest", "FilterService", "WriteOutcome"]
