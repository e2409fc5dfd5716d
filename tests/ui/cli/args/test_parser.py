"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from fluorine.ui.cli.args import (
    ArgumentParser,
    BaseDirArgs,
    DataDirArgs,
    MigrateArgs,
    StylesheetsArgs,
    console_level,
)


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    data_dir_args: Namespace = parser.parse_args(["data-dir", "--strict"])
    assert data_dir_args.command == "data-dir"
    assert data_dir_args.strict

    migrate_args: Namespace = parser.parse_args(["migrate", "--dry-run", "--verbose"])
    assert migrate_args.command == "migrate"
    assert migrate_args.dry_run and migrate_args.verbose

    stylesheet_args: Namespace = parser.parse_args(
        ["stylesheets", "--app-dir", "app", "--instance-dir", "inst", "--explore"]
    )
    assert stylesheet_args.app_dir == "app"
    assert stylesheet_args.instance_dir == "inst"
    assert stylesheet_args.explore


def test_create_parser_requires_command() -> None:
    parser = ArgumentParser.create_parser()
    with pytest.raises(SystemExit):
        _ = parser.parse_args([])


def test_process_args_sets_log_levels(mocker: MockerFixture) -> None:
    """Verbosity flags map onto console log levels."""

    mock_config = mocker.patch("fluorine.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("fluorine.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None

    args = ArgumentParser.process_args(["data-dir"])
    assert args == DataDirArgs(command="data-dir", strict=False, verbose=False, quiet=False)
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert "log_file" not in mock_setup_logger.call_args.kwargs
    mock_config.load.assert_called_once()

    _ = ArgumentParser.process_args(["base-dir", "--verbose"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG

    _ = ArgumentParser.process_args(["migrate", "--quiet"])
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_process_args_leaves_log_file_to_command_processor(
    mocker: MockerFixture, tmp_path: Path
) -> None:
    """The parser must not open the log file inside the data directory."""

    mock_config = mocker.patch("fluorine.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("fluorine.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = tmp_path / "fluorine.log"

    args = ArgumentParser.process_args(["migrate", "--dry-run"])

    assert args == MigrateArgs(command="migrate", dry_run=True, verbose=False, quiet=False)
    assert "log_file" not in mock_setup_logger.call_args.kwargs
    assert not (tmp_path / "fluorine.log").exists()


def test_process_args_base_dir(mocker: MockerFixture) -> None:
    _ = mocker.patch("fluorine.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["base-dir"])
    assert isinstance(args, BaseDirArgs)


def test_process_args_stylesheets(mocker: MockerFixture) -> None:
    """Stylesheet arguments carry paths and the configured style name."""

    mock_config = mocker.patch("fluorine.ui.cli.args.parser.Config")
    _ = mocker.patch("fluorine.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.style_name = "Night.qss"

    args = ArgumentParser.process_args(["stylesheets", "--app-dir", "/opt/fluorine"])

    assert isinstance(args, StylesheetsArgs)
    assert args.app_dir == Path("/opt/fluorine")
    assert args.instance_dir is None
    assert not args.explore
    assert args.style_name == "Night.qss"


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_console_level(verbose: bool, quiet: bool, expected: int) -> None:
    assert console_level(verbose, quiet) == expected
