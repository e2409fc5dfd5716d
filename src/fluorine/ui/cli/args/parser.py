"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from fluorine.config.config import Config
from fluorine.platform.logging import setup_logger
from fluorine.ui.cli.args.options import (
    BaseDirArgs,
    CLIArgs,
    DataDirArgs,
    MigrateArgs,
    StylesheetsArgs,
)


def console_level(verbose: bool, quiet: bool) -> int:
    """Map verbosity flags onto a console log level."""

    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="fluorine-paths",
            description="Locate and maintain the Fluorine Manager data directory.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        data_dir_parser = subparsers.add_parser(
            "data-dir",
            help="Print the data directory",
        )
        _ = data_dir_parser.add_argument(
            "--strict",
            action="store_true",
            help="Fail instead of falling back to /tmp when HOME is unset",
        )
        ArgumentParser._add_verbosity(data_dir_parser)

        base_dir_parser = subparsers.add_parser(
            "base-dir",
            help="Print the application base directory",
        )
        ArgumentParser._add_verbosity(base_dir_parser)

        migrate_parser = subparsers.add_parser(
            "migrate",
            help="Move ~/.local/share/fluorine into the data directory",
        )
        _ = migrate_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report the migration without moving anything",
        )
        ArgumentParser._add_verbosity(migrate_parser)

        stylesheets_parser = subparsers.add_parser(
            "stylesheets",
            help="List available stylesheets",
        )
        _ = stylesheets_parser.add_argument(
            "--app-dir",
            type=str,
            metavar="DIR",
            help="Application directory holding bundled stylesheets",
        )
        _ = stylesheets_parser.add_argument(
            "--instance-dir",
            type=str,
            metavar="DIR",
            help="Instance directory holding modlist stylesheets",
        )
        _ = stylesheets_parser.add_argument(
            "--explore",
            action="store_true",
            help="Create and print the directory for custom stylesheets",
        )
        ArgumentParser._add_verbosity(stylesheets_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        # Console only: the CLI attaches the configured log file after any
        # data-directory migration has run.
        config = Config.load()
        _ = setup_logger(console_level=console_level(is_verbose, is_quiet))

        command = parsed_args.command
        if command == "data-dir":
            return DataDirArgs(
                command="data-dir",
                strict=bool(parsed_args.strict),
                verbose=is_verbose,
                quiet=is_quiet,
            )
        if command == "base-dir":
            return BaseDirArgs(command="base-dir", verbose=is_verbose, quiet=is_quiet)
        if command == "migrate":
            return MigrateArgs(
                command="migrate",
                dry_run=bool(parsed_args.dry_run),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        return StylesheetsArgs(
            command="stylesheets",
            app_dir=Path(parsed_args.app_dir).expanduser() if parsed_args.app_dir else None,
            instance_dir=(
                Path(parsed_args.instance_dir).expanduser() if parsed_args.instance_dir else None
            ),
            explore=bool(parsed_args.explore),
            style_name=config.style_name,
            verbose=is_verbose,
            quiet=is_quiet,
        )
