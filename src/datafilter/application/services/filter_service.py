"""Application service for classifying input files and writing the results.

This layer centralizes construction of the pipeline and writer so that the
CLI (or any other caller) runs the same use case with explicit per-run state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from datafilter.features.classification import (
    Category,
    ClassificationResult,
    FilterPipeline,
    LocalTextSource,
    TextSourcePort,
)
from datafilter.features.output import OutputFiles, OutputWriter
from datafilter.platform.logging import logger


@dataclass(frozen=True)
class FilterRequest:
    """Input parameters for one filtering run.

    Attributes:
        input_paths: Existing input files, in the order they were supplied.
        output_files: Destination for each category.
        append: If True, add to existing output files instead of replacing them.
        encoding: Text encoding for reading inputs and writing outputs.
    """

    input_paths: tuple[Path, ...]
    output_files: OutputFiles
    append: bool = False
    encoding: str = "utf-8"


@dataclass(slots=True, frozen=True)
class WriteOutcome:
    """Which categories were non-empty and written."""

    integers: bool = False
    floats: bool = False
    strings: bool = False

    def written(self, category: Category) -> bool:
        """Return whether ``category`` was written."""
        return getattr(self, category.value)


@dataclass(slots=True, frozen=True)
class FilterOutcome:
    """Classification result together with the per-category write outcome."""

    result: ClassificationResult
    written: WriteOutcome


@final
class FilterService:
    """Application service that classifies inputs and persists each category."""

    def __init__(
        self,
        *,
        source_factory: Callable[[str], TextSourcePort] | None = None,
        writer_factory: Callable[[str], OutputWriter] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        the local filesystem adapters.
        """
        self._source_factory: Callable[[str], TextSourcePort] = (
            source_factory or LocalTextSource
        )
        self._writer_factory: Callable[[str], OutputWriter] = writer_factory or OutputWriter

    def run(self, request: FilterRequest) -> FilterOutcome:
        """Classify all inputs, then write integers, floats and strings in that order.

        Args:
            request: Filtering parameters.

        Returns:
            FilterOutcome: The classified collections and what was written.

        Raises:
            DataIOError: If reading an input or writing an output fails.
        """
        pipeline = FilterPipeline(self._source_factory(request.encoding))
        result = pipeline.run(request.input_paths)
        logger.debug(
            "Classified %d integers, %d floats, %d strings",
            len(result.integers),
            len(result.floats),
            len(result.strings),
        )

        writer = self._writer_factory(request.encoding)
        flags = {
            category.value: writer.write(
                result.values(category),
                request.output_files.for_category(category),
                append=request.append,
            )
            for category in Category
        }
        return FilterOutcome(result=result, written=WriteOutcome(**flags))


__all__ = ["FilterOutcome", "FilterRequest", "FilterService", "WriteOutcome"]
