"""
Summary: Protocols describing the infrastructure the classification use cases need.
Why: Let the pipeline read inputs without depending on a concrete filesystem adapter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSourcePort(Protocol):
    """Read access to whole input documents."""

    def read_text(self, path: Path) -> str:
        """Return the full text of ``path`` without newline translation."""
        ...
