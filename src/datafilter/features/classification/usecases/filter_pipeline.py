"""
Summary: Load input files in order and route every line through the classifier.
Why: Produce one reproducible, ordered classification result per run.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from datafilter.platform.logging import logger

from ..domain.classifier import Classifier
from ..domain.models import ClassificationResult
from .ports import TextSourcePort


def split_lines(text: str) -> list[str]:
    """Split ``text`` on line feeds.

    A trailing line feed terminates the last line rather than starting an
    empty one, so ``"a\\n"`` yields ``["a"]`` while ``"a\\n\\n"`` yields
    ``["a", ""]``. Carriage returns are left in place.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


@final
class FilterPipeline:
    """Classify the lines of several input files into one result."""

    def __init__(self, source: TextSourcePort, classifier: type[Classifier] = Classifier) -> None:
        self._source = source
        self._classifier = classifier

    def run(self, paths: Sequence[Path]) -> ClassificationResult:
        """Classify every line of ``paths`` in the order given.

        Args:
            paths: Input files, already validated to exist.

        Returns:
            ClassificationResult: Values in concatenated line order across all files.

        Raises:
            DataIOError: If an input file cannot be read.
        """
        result = ClassificationResult()
        for path in paths:
            lines = split_lines(self._source.read_text(path))
            for line in lines:
                result.add(self._classifier.classify(line))
            logger.debug("Classified %d lines from %s", len(lines), path)
        return result


__all__ = ["FilterPipeline", "split_lines"]
