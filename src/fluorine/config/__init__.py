"""Configuration and path discovery for Fluorine."""

from .paths import (
    DataDirResolution,
    HomeDirectoryUnknownError,
    HomeSource,
    data_dir,
    require_data_dir,
    resolve_data_dir,
)

__all__ = [
    "DataDirResolution",
    "HomeDirectoryUnknownError",
    "HomeSource",
    "data_dir",
    "require_data_dir",
    "resolve_data_dir",
]
