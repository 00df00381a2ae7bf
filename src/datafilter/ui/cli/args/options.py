"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from datafilter.features.output import OutputFiles
from datafilter.ui.cli.models import Verbosity


@final
@dataclass(slots=True, frozen=True)
class ParsedArguments:
    """Validated command line arguments for one run."""

    output_dir: Path
    prefix: str | None
    append: bool
    verbosity: Verbosity
    input_paths: tuple[Path, ...]
    output_files: OutputFiles


__all__ = ["ParsedArguments"]
