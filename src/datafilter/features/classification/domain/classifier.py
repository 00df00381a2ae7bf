"""
Summary: Classify one line of text as an integer, a float or plain text.
Why: Centralize the numeric literal grammar so every input file is routed identically.
"""

from __future__ import annotations

import re
from typing import ClassVar, final

from .models import ClassifiedLine, FloatLine, IntegerLine, TextLine


@final
class Classifier:
    """Route stripped lines to integer, float or text values."""

    # Optional sign followed by ASCII digits only
    INTEGER_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

    # Digits, one "." or "," separator, digits, optional exponent
    FLOAT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"[+-]?[0-9]+[.,][0-9]+(?:[eE][+-]?[0-9]+)?"
    )

    INT64_MIN: ClassVar[int] = -(2**63)
    INT64_MAX: ClassVar[int] = 2**63 - 1
    INT64_MAX_DIGITS: ClassVar[int] = 19

    @classmethod
    def classify(cls, line: str) -> ClassifiedLine:
        """Classify a single line.

        Args:
            line: Raw line, possibly with surrounding whitespace or a trailing ``\\r``.

        Returns:
            ClassifiedLine: ``IntegerLine`` for integer literals within the signed
            64-bit range, ``FloatLine`` for decimal literals and for integer
            literals outside that range, ``TextLine`` with the stripped text otherwise.
        """
        text = line.strip()

        if cls.INTEGER_PATTERN.fullmatch(text):
            # int() refuses very long digit strings; past 19 significant
            # digits the value is out of range anyway.
            digits = text.lstrip("+-").lstrip("0") or "0"
            if len(digits) <= cls.INT64_MAX_DIGITS:
                number = -int(digits) if text.startswith("-") else int(digits)
                if cls.INT64_MIN <= number <= cls.INT64_MAX:
                    return IntegerLine(number)
            return FloatLine(float(text))

        if cls.FLOAT_PATTERN.fullmatch(text):
            return FloatLine(float(text.replace(",", ".")))

        return TextLine(text)


__all__ = ["Classifier"]
