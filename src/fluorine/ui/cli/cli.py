"""Command line interface for Fluorine paths."""

import sys
from typing import final

from rich.console import Console

from fluorine.config.config import Config
from fluorine.config.paths import (
    HomeDirectoryUnknownError,
    application_base_dir,
    require_data_dir,
    resolve_data_dir,
)
from fluorine.features.migration import DataDirMigrationError, MigrationStatus, migrate_data_dir
from fluorine.features.stylesheets import (
    discover_stylesheets,
    select_stylesheet,
    stylesheet_search_dirs,
    stylesheets_explore_dir,
)
from fluorine.platform.logging import logger, setup_logger
from fluorine.ui.cli.args import (
    ArgumentParser,
    BaseDirArgs,
    CLIArgs,
    DataDirArgs,
    MigrateArgs,
    StylesheetsArgs,
    console_level,
)

EXIT_HOME_UNKNOWN = 2


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            config = Config.load()

            # Migration runs before the log file is opened inside the data
            # directory.
            if isinstance(args, MigrateArgs):
                CommandProcessor._migrate(args)
                return
            if config.migrate_legacy_data:
                _ = migrate_data_dir()
            CommandProcessor._attach_log_file(args, config)

            if isinstance(args, DataDirArgs):
                CommandProcessor._data_dir(args)
            elif isinstance(args, BaseDirArgs):
                print(application_base_dir())
            else:
                assert isinstance(args, StylesheetsArgs)
                CommandProcessor._stylesheets(args)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except HomeDirectoryUnknownError as e:
            logger.error("%s", e)
            sys.exit(EXIT_HOME_UNKNOWN)
        except DataDirMigrationError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _attach_log_file(args: CLIArgs, config: Config) -> None:
        if config.log_file is None:
            return
        _ = setup_logger(
            console_level=console_level(args.verbose, args.quiet),
            log_file=config.log_file,
        )

    @staticmethod
    def _data_dir(args: DataDirArgs) -> None:
        if args.strict:
            print(require_data_dir())
            return
        resolution = resolve_data_dir()
        if not resolution.home_known:
            logger.warning(
                "HOME is not set; using shared fallback %s, data may not persist",
                resolution.path,
            )
        print(resolution.path)

    @staticmethod
    def _migrate(args: MigrateArgs) -> None:
        result = migrate_data_dir(dry_run=args.dry_run)
        if not args.quiet or result.status is MigrationStatus.MIGRATED:
            print(f"{result.status.value}: {result.message}")

    @staticmethod
    def _stylesheets(args: StylesheetsArgs) -> None:
        if args.explore:
            print(stylesheets_explore_dir(args.instance_dir))
            return

        app_dir = args.app_dir or application_base_dir()
        search_dirs = stylesheet_search_dirs(app_dir, args.instance_dir)
        stylesheets = discover_stylesheets(search_dirs)
        current = select_stylesheet(stylesheets, args.style_name)

        console = Console(highlight=False, soft_wrap=True)
        if not stylesheets:
            console.print("No stylesheets found", markup=False)
            return
        for stylesheet in stylesheets:
            marker = "*" if stylesheet == current else " "
            console.print(f"{marker} {stylesheet.name}\t{stylesheet.path}", markup=False)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
