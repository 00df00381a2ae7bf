"""Where: src/datafilter/features/output/usecases/path_planner.py
What: Validate output path, prefix and input operands and plan output file locations.
Why: Keep path policy independent from argument tokenizing so it can be reused and tested.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar, final

from datafilter.platform.filesystem import check_directory_creatable, check_file_creatable
from datafilter.platform.logging import logger
from datafilter.shared.errors import ArgumentError, FilesystemSetupError, with_help_hint

from ..domain.output_files import OutputFiles


@final
class PathPlanner:
    """Resolve user-supplied paths against a fixed working directory."""

    # "C:" followed by one or more "/segment" components
    OUTPUT_ABSOLUTE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"[a-zA-Z]:(?:[/\\][0-9a-zA-Z_\-. ]+[/\\]?)+"
    )

    # Optional "." or ".." root followed by one or more "/segment" components
    OUTPUT_RELATIVE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"(?:\.{1,2})?(?:[/\\][0-9a-zA-Z_\-. ]+[/\\]?)+"
    )

    PREFIX_FORBIDDEN: ClassVar[re.Pattern[str]] = re.compile(r'[\\/:*?"<>|]')

    INPUT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r".+\.txt")

    working_dir: Path

    def __init__(self, working_dir: Path | None = None) -> None:
        self.working_dir = (working_dir or Path.cwd()).resolve()

    def resolve_output_dir(self, operand: str) -> Path:
        """Validate an ``--output`` operand and return the absolute directory.

        Args:
            operand: Raw path token from the command line.

        Returns:
            Path: Absolute output directory. It is not created.

        Raises:
            ArgumentError: If ``operand`` matches neither accepted path shape.
            FilesystemSetupError: If the directory is missing and could not be created.
        """
        normalized = operand.replace("\\", "/")

        if self.OUTPUT_ABSOLUTE_PATTERN.fullmatch(operand):
            candidate = Path(normalized)
            if not candidate.is_absolute():
                candidate = self.working_dir / candidate
        elif self.OUTPUT_RELATIVE_PATTERN.fullmatch(operand):
            # "/out" is relative to the working directory, like "./out".
            candidate = self.working_dir / normalized.lstrip("/")
        else:
            raise ArgumentError(with_help_hint("Incorrect output path format."))

        directory = candidate.resolve()
        if not directory.is_dir():
            try:
                check_directory_creatable(directory)
            except OSError as e:
                raise FilesystemSetupError(
                    with_help_hint("Unable to create a directory at the specified path.")
                ) from e

        logger.debug("Output directory resolved to %s", directory)
        return directory

    def validate_prefix(self, operand: str) -> str:
        """Return ``operand`` if it is usable as a file name prefix.

        Raises:
            ArgumentError: If the prefix is blank or contains a forbidden character.
        """
        if not operand.strip() or self.PREFIX_FORBIDDEN.search(operand):
            raise ArgumentError(with_help_hint("The passed prefix contains invalid characters."))
        return operand

    def resolve_input(self, operand: str) -> Path | None:
        """Resolve an operand to an existing input file.

        Operands are always joined onto the working directory, so a leading
        "/" does not escape it. Unknown operands and missing files are reported
        as warnings and yield ``None``; neither aborts the run.
        """
        if not self.INPUT_PATTERN.fullmatch(operand):
            logger.warning('Invalid operand passed "%s".', operand)
            return None

        path = self.working_dir / operand.lstrip("/")
        if not path.is_file():
            logger.warning('The passed input file "%s" does not exist.', operand)
            return None
        return path

    def resolve_inputs(self, operands: Sequence[str]) -> tuple[Path, ...]:
        """Resolve every operand in order, keeping only existing input files."""
        resolved = (self.resolve_input(operand) for operand in operands)
        return tuple(path for path in resolved if path is not None)

    def plan_output_files(self, output_dir: Path | None, prefix: str | None) -> OutputFiles:
        """Place the output files and verify each missing one could be created.

        Args:
            output_dir: Directory from ``--output``; the working directory when ``None``.
            prefix: Optional prefix prepended to each default file name.

        Raises:
            FilesystemSetupError: If any output file could not be created.
        """
        files = OutputFiles.under(output_dir or self.working_dir, prefix or "")
        for _category, path in files:
            try:
                check_file_creatable(path)
            except OSError as e:
                raise FilesystemSetupError(
                    with_help_hint("Unable to create a file at the specified path.")
                ) from e
        return files


__all__ = ["PathPlanner"]
