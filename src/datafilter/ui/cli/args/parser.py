"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, NoReturn, final

from typing_extensions import override

from datafilter.config.config import Config, ConfigurationError
from datafilter.features.output import PathPlanner
from datafilter.platform.logging import setup_logger
from datafilter.shared.errors import ArgumentError, with_help_hint
from datafilter.ui.cli.args.options import ParsedArguments
from datafilter.ui.cli.models import Verbosity

_DESCRIPTION = """\
Filters input files based on data type into integer, real, and string types.
The filtering results are saved as integers.txt, floats.txt, and strings.txt, respectively."""

_EXAMPLES = """\
examples:
  datafilter -s -a -p sample- in1.txt
  datafilter -o ./some/path -s -a in1.txt in2.txt in3.txt in4.txt
  datafilter -o C:/Users/User/some/path -p new_ -f -a data1.txt data2.txt
  datafilter in1.txt in2.txt in3.txt"""


class _RaisingArgumentParser(argparse.ArgumentParser):
    """``argparse`` parser that raises instead of printing usage and exiting.

    Only the exact option spellings are recognised. The token after an option
    that takes a value is always that value, even when it starts with ``-``.
    Every other token (bundled flags, attached values, ``--``) is returned as
    an operand, in command line order.
    """

    @override
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(with_help_hint(f"{message[:1].upper()}{message[1:]}."))

    @override
    def parse_known_args(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        args: Sequence[str] | None = None,
        namespace: argparse.Namespace | None = None,
    ) -> tuple[argparse.Namespace, list[str]]:
        tokens = list(sys.argv[1:] if args is None else args)
        option_tokens: list[str] = []
        operands: list[str] = []

        index = 0
        while index < len(tokens):
            token = tokens[index]
            action = self._option_string_actions.get(token)  # pyright: ignore[reportPrivateUsage]
            if action is None:
                operands.append(token)
            elif action.nargs == 0 or index + 1 == len(tokens):
                option_tokens.append(token)
            else:
                # "--prefix=-new_" keeps argparse from reading the value as an option.
                long_option = max(action.option_strings, key=len)
                index += 1
                option_tokens.append(f"{long_option}={tokens[index]}")
            index += 1

        parsed_args, extras = super().parse_known_args(option_tokens, namespace)
        return parsed_args, [*operands, *extras]


class _OutputPathAction(argparse.Action):
    """Accept ``-o`` once and resolve its operand immediately."""

    def __init__(self, option_strings: Sequence[str], dest: str, *, planner: PathPlanner, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.planner = planner

    @override
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest) is not None:
            raise ArgumentError(with_help_hint("The -o option was passed twice."))
        setattr(namespace, self.dest, self.planner.resolve_output_dir(values))


class _PrefixAction(argparse.Action):
    """Accept ``-p`` once and validate its operand immediately."""

    def __init__(self, option_strings: Sequence[str], dest: str, *, planner: PathPlanner, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.planner = planner

    @override
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest) is not None:
            raise ArgumentError(with_help_hint("The -p option was passed twice."))
        setattr(namespace, self.dest, self.planner.validate_prefix(values))


class _AppendModeAction(argparse.Action):
    """Boolean flag that may only be passed once."""

    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs=0, default=False, **kwargs)

    @override
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest):
            raise ArgumentError(with_help_hint("The -a option was passed twice."))
        setattr(namespace, self.dest, True)


class _VerbosityAction(argparse.Action):
    """Set the statistics level; ``-s`` and ``-f`` exclude each other and themselves."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        *,
        level: Verbosity,
        conflict_message: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, nargs=0, default=Verbosity.NONE, **kwargs)
        self.level = level
        self.conflict_message = conflict_message

    @override
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest) is not Verbosity.NONE:
            raise ArgumentError(with_help_hint(self.conflict_message))
        setattr(namespace, self.dest, self.level)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser(planner: PathPlanner) -> argparse.ArgumentParser:
        """Create argument parser.

        Args:
            planner: Path policy used to validate ``-o`` and ``-p`` operands.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _RaisingArgumentParser(
            prog="datafilter",
            usage="%(prog)s [-o <path>] [-p <prefix>] [-a] [-s | -f] data1.txt [data2.txt ...]",
            description=_DESCRIPTION,
            epilog=_EXAMPLES,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
            allow_abbrev=False,
        )

        _ = parser.add_argument(
            "--help",
            action="help",
            help="Output help on using the utility.",
        )
        _ = parser.add_argument(
            "-o",
            "--output",
            action=_OutputPathAction,
            planner=planner,
            default=None,
            metavar="<path>",
            help="Specifies the output path for the utility's result. The passed path can be absolute or relative.",
        )
        _ = parser.add_argument(
            "-p",
            "--prefix",
            action=_PrefixAction,
            planner=planner,
            default=None,
            metavar="<prefix>",
            help="Specifies a prefix for the name of the output files.",
        )
        _ = parser.add_argument(
            "-a",
            "--append",
            action=_AppendModeAction,
            help="Sets the mode for adding to existing files. If the mode is not specified, existing files will be overwritten.",
        )
        _ = parser.add_argument(
            "-s",
            dest="verbosity",
            action=_VerbosityAction,
            level=Verbosity.SIMPLE,
            conflict_message="The -s option was passed twice or was passed after the -f option.",
            help="Sets the mode for displaying brief statistics in the console.",
        )
        _ = parser.add_argument(
            "-f",
            dest="verbosity",
            action=_VerbosityAction,
            level=Verbosity.FULL,
            conflict_message="The -f option was passed twice or was passed after the -s option.",
            help="Sets the mode for displaying complete statistics to the console.",
        )

        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None = None,
        working_dir: Path | None = None,
    ) -> ParsedArguments:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            working_dir: Directory that relative paths resolve against (for testing).

        Returns:
            ParsedArguments: Validated arguments.

        Raises:
            ArgumentError: If a flag or operand is malformed or no input file exists.
            FilesystemSetupError: If an output directory or file could not be created.
            ConfigurationError: If the config file is malformed and ``--help`` was not requested.
            SystemExit: With status 0 after ``--help``.
        """
        # A broken config file must not block --help.
        config_error: ConfigurationError | None = None
        try:
            configuration = Config.load()
        except ConfigurationError as e:
            config_error = e
        else:
            _ = setup_logger(
                log_file=configuration.log_file,
                console_level=configuration.console_level(),
            )

        planner = PathPlanner(working_dir)
        parser = ArgumentParser.create_parser(planner)
        parsed_args, operands = parser.parse_known_args(args_list)
        if config_error is not None:
            raise config_error

        input_paths = planner.resolve_inputs(operands)
        output_dir: Path = parsed_args.output or planner.working_dir
        output_files = planner.plan_output_files(output_dir, parsed_args.prefix)

        if not input_paths:
            raise ArgumentError(with_help_hint("The input data has not been transmitted."))

        return ParsedArguments(
            output_dir=output_dir,
            prefix=parsed_args.prefix,
            append=parsed_args.append,
            verbosity=parsed_args.verbosity,
            input_paths=input_paths,
            output_files=output_files,
        )
