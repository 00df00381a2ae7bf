"""Command line interface for datafilter."""

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from datafilter.platform.logging import logger
from datafilter.shared.errors import DataFilterError
from datafilter.ui.cli.args import ArgumentParser
from datafilter.ui.cli.commands import FilterCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        working_dir: Path | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            working_dir: Directory relative paths resolve against (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list, working_dir=working_dir)
            _ = FilterCommand(args).execute()
        except DataFilterError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call
        ``sys.exit(...)`` from ``CommandProcessor``, so this return is only
        reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
