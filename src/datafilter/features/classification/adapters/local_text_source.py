"""Local filesystem adapter that satisfies ``TextSourcePort``."""

from __future__ import annotations

from pathlib import Path
from typing import final

from datafilter.shared.errors import DataIOError


@final
class LocalTextSource:
    """Read whole text files from the local filesystem."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        """Return the contents of ``path`` with line endings untouched.

        Raises:
            DataIOError: If the file cannot be opened or decoded.
        """
        try:
            with open(path, encoding=self.encoding, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DataIOError(f"Unable to read the input file \"{path}\": {e}") from e


__all__ = ["LocalTextSource"]
