"""src/datafilter/ui/cli/models.py
What: Shared UI-facing value types for argument parsing and report rendering.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from enum import Enum


class Verbosity(str, Enum):
    """How much statistics the report contains."""

    NONE = "none"
    SIMPLE = "simple"
    FULL = "full"


__all__ = ["Verbosity"]
