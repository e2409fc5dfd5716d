"""Fluorine Manager data-directory resolution and maintenance."""

from fluorine.config.paths import data_dir, require_data_dir, resolve_data_dir

__version__ = "0.1.0"

__all__ = ["__version__", "data_dir", "require_data_dir", "resolve_data_dir"]
