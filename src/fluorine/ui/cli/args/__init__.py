"""Command line argument handling."""

from .options import BaseDirArgs, CLIArgs, DataDirArgs, MigrateArgs, StylesheetsArgs
from .parser import ArgumentParser, console_level

__all__ = [
    "ArgumentParser",
    "BaseDirArgs",
    "CLIArgs",
    "DataDirArgs",
    "MigrateArgs",
    "StylesheetsArgs",
    "console_level",
]
