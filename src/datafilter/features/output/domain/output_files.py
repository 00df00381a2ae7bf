"""Resolved destinations for the three output categories."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from datafilter.features.classification import Category


@dataclass(slots=True, frozen=True)
class OutputFiles:
    """Absolute output file paths, one per category."""

    integers: Path
    floats: Path
    strings: Path

    @classmethod
    def under(cls, directory: Path, prefix: str = "") -> "OutputFiles":
        """Place the (optionally prefixed) default file names under ``directory``."""
        return cls(
            integers=directory / f"{prefix}{Category.INTEGERS.base_filename}",
            floats=directory / f"{prefix}{Category.FLOATS.base_filename}",
            strings=directory / f"{prefix}{Category.STRINGS.base_filename}",
        )

    def for_category(self, category: Category) -> Path:
        """Return the destination for ``category``."""
        return getattr(self, category.value)

    def __iter__(self) -> Iterator[tuple[Category, Path]]:
        return ((category, self.for_category(category)) for category in Category)


__all__ = ["OutputFiles"]
