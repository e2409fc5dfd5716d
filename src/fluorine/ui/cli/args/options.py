"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class DataDirArgs:
    """Command line arguments for the ``data-dir`` subcommand."""

    command: Literal["data-dir"]
    strict: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class BaseDirArgs:
    """Command line arguments for the ``base-dir`` subcommand."""

    command: Literal["base-dir"]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class MigrateArgs:
    """Command line arguments for the ``migrate`` subcommand."""

    command: Literal["migrate"]
    dry_run: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class StylesheetsArgs:
    """Command line arguments for the ``stylesheets`` subcommand."""

    command: Literal["stylesheets"]
    app_dir: Path | None
    instance_dir: Path | None
    explore: bool
    style_name: str | None
    verbose: bool
    quiet: bool


CLIArgs = DataDirArgs | BaseDirArgs | MigrateArgs | StylesheetsArgs

__all__ = ["BaseDirArgs", "CLIArgs", "DataDirArgs", "MigrateArgs", "StylesheetsArgs"]
