"""
Summary: Tagged line values and the ordered per-category classification result.
Why: Give the pipeline, writer and report one shared vocabulary for classified data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import final


class Category(str, Enum):
    """Output category of a classified line, in report order."""

    INTEGERS = "integers"
    FLOATS = "floats"
    STRINGS = "strings"

    @property
    def base_filename(self) -> str:
        """Default output file name, before any prefix is applied."""
        return f"{self.value}.txt"

    @property
    def label(self) -> str:
        """Heading used for this category in the report."""
        return self.value.capitalize()


@final
@dataclass(slots=True, frozen=True)
class IntegerLine:
    """A line that holds a signed 64-bit integer literal."""

    value: int


@final
@dataclass(slots=True, frozen=True)
class FloatLine:
    """A line that holds a decimal literal with ``.`` or ``,`` separator."""

    value: float


@final
@dataclass(slots=True, frozen=True)
class TextLine:
    """A line that is neither an integer nor a float, stripped of outer whitespace."""

    value: str


ClassifiedLine = IntegerLine | FloatLine | TextLine


@dataclass(slots=True)
class ClassificationResult:
    """Classified values grouped by category, in input line order."""

    integers: list[int] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)

    def add(self, line: ClassifiedLine) -> None:
        """Append ``line`` to the collection matching its tag."""
        if isinstance(line, IntegerLine):
            self.integers.append(line.value)
        elif isinstance(line, FloatLine):
            self.floats.append(line.value)
        else:
            self.strings.append(line.value)

    def values(self, category: Category) -> list[int] | list[float] | list[str]:
        """Return the collection for ``category``."""
        if category is Category.INTEGERS:
            return self.integers
        if category is Category.FLOATS:
            return self.floats
        return self.strings


__all__ = [
    "Category",
    "ClassificationResult",
    "ClassifiedLine",
    "FloatLine",
    "IntegerLine",
    "TextLine",
]
