"""Persist one classified collection to a text file."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from datafilter.platform.filesystem import ensure_parent_directory
from datafilter.platform.logging import logger
from datafilter.shared.errors import DataIOError


@final
class OutputWriter:
    """Write values one per line, overwriting or appending."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def write(self, values: Sequence[object], path: Path, append: bool = False) -> bool:
        """Write ``values`` to ``path``.

        Args:
            values: Values to write; each is rendered with ``str``.
            path: Destination file. Missing parent directories are created.
            append: Add to an existing file instead of replacing it.

        Returns:
            bool: ``False`` when ``values`` is empty and nothing was touched,
            ``True`` once every value has been written.

        Raises:
            DataIOError: If the directory or file cannot be created or written.
        """
        if not values:
            return False

        try:
            _ = ensure_parent_directory(path)
            with open(path, "a" if append else "w", encoding=self.encoding) as handle:
                for value in values:
                    _ = handle.write(f"{value}\n")
        except (OSError, UnicodeEncodeError) as e:
            raise DataIOError(f"Unable to write the output file \"{path}\": {e}") from e

        logger.debug("Wrote %d values to %s (append=%s)", len(values), path, append)
        return True


__all__ = ["OutputWriter"]
