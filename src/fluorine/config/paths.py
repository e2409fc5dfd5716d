"""Shared path utilities for the Fluorine data locations.

This module centralizes how the application discovers where its per-user
state lives.

Policy:
- Data: ``$HOME/.var/app/com.fluorine.manager``. When ``HOME`` is missing
  or empty the shared ``/tmp`` directory stands in for it. Callers that
  must not write persistent state there use ``resolve_data_dir`` or
  ``require_data_dir``.
- Legacy data: ``$HOME/.local/share/fluorine`` (see features.migration).
- Config: ``<data_dir>/fluorine.toml`` unless overridden by
  ``FLUORINE_CONFIG``.
- Base directory: ``MO2_BASE_DIR`` (set by AppImage wrappers) or the
  directory of the running program.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Final


HOME_ENV_VAR: Final[str] = "HOME"
FALLBACK_HOME: Final[Path] = Path("/tmp")

APP_ID: Final[str] = "com.fluorine.manager"
DATA_DIR_SUFFIX: Final[Path] = Path(".var") / "app" / APP_ID
LEGACY_DATA_DIR_SUFFIX: Final[Path] = Path(".local") / "share" / "fluorine"

BASE_DIR_ENV_VAR: Final[str] = "MO2_BASE_DIR"
CONFIG_ENV_VAR: Final[str] = "FLUORINE_CONFIG"

CONFIG_FILE_NAME: Final[str] = "fluorine.toml"
LOG_FILE_NAME: Final[str] = "fluorine.log"


class HomeDirectoryUnknownError(LookupError):
    """Raised by strict lookups when ``HOME`` is missing or empty."""


class HomeSource(str, Enum):
    """Where the home directory used for a resolution came from."""

    ENVIRONMENT = "environment"
    FALLBACK = "fallback"


@dataclass(slots=True, frozen=True)
class DataDirResolution:
    """Outcome of resolving the data directory."""

    path: Path
    home: Path
    source: HomeSource

    @property
    def home_known(self) -> bool:
        return self.source is HomeSource.ENVIRONMENT


def _read_env(env: Mapping[str, str] | None, name: str) -> str:
    mapping = env if env is not None else os.environ
    return (mapping.get(name) or "").strip()


def _home_dir(env: Mapping[str, str] | None) -> Path | None:
    # HOME is taken verbatim; only override variables are stripped.
    mapping = env if env is not None else os.environ
    value = mapping.get(HOME_ENV_VAR)
    return Path(value) if value else None


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    if env_var:
        candidate = _read_env(env, env_var)
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def resolve_data_dir(env: Mapping[str, str] | None = None) -> DataDirResolution:
    """Resolve the data directory and report whether ``HOME`` was known.

    Args:
        env: Environment mapping to read. Defaults to ``os.environ``.

    Returns:
        DataDirResolution: The data directory together with the home
        directory it was derived from.
    """
    home = _home_dir(env)
    if home is None:
        return DataDirResolution(
            path=FALLBACK_HOME / DATA_DIR_SUFFIX,
            home=FALLBACK_HOME,
            source=HomeSource.FALLBACK,
        )
    return DataDirResolution(
        path=home / DATA_DIR_SUFFIX,
        home=home,
        source=HomeSource.ENVIRONMENT,
    )


def data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the Fluorine data directory (``~/.var/app/com.fluorine.manager``).

    The path is neither created nor checked. A missing ``HOME`` silently
    falls back to ``/tmp``.
    """

    return resolve_data_dir(env).path


def require_data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the data directory, refusing to fall back to ``/tmp``.

    Raises:
        HomeDirectoryUnknownError: If ``HOME`` is missing or empty.
    """
    resolution = resolve_data_dir(env)
    if not resolution.home_known:
        raise HomeDirectoryUnknownError(
            f"{HOME_ENV_VAR} is not set; refusing to use {resolution.path} as the data directory"
        )
    return resolution.path


def legacy_data_dir(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the pre-Flatpak data directory, or ``None`` when ``HOME`` is unknown."""

    home = _home_dir(env)
    if home is None:
        return None
    return home / LEGACY_DATA_DIR_SUFFIX


def user_stylesheets_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory holding user-installed stylesheets."""

    return data_dir(env) / "stylesheets"


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return data_dir(env) / "logs"


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return default_log_dir(env) / LOG_FILE_NAME


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    ``FLUORINE_CONFIG`` takes precedence over ``<data_dir>/fluorine.toml``.
    """

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: data_dir(env) / CONFIG_FILE_NAME,
    )


def _program_dir() -> Path:
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not program:
        return Path.cwd()
    return Path(program).resolve().parent


def application_base_dir(
    env: Mapping[str, str] | None = None,
    *,
    default_factory: Callable[[], Path] | None = None,
) -> Path:
    """Get the application base directory.

    Args:
        env: Environment mapping to read. Defaults to ``os.environ``.
        default_factory: Produces the directory used when ``MO2_BASE_DIR``
            is unset. Defaults to the directory of the running program.

    Returns:
        Path: Absolute base directory.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=BASE_DIR_ENV_VAR,
        default_factory=default_factory or _program_dir,
    )


__all__ = [
    "APP_ID",
    "BASE_DIR_ENV_VAR",
    "CONFIG_ENV_VAR",
    "DATA_DIR_SUFFIX",
    "DataDirResolution",
    "FALLBACK_HOME",
    "HOME_ENV_VAR",
    "HomeDirectoryUnknownError",
    "HomeSource",
    "LEGACY_DATA_DIR_SUFFIX",
    "application_base_dir",
    "data_dir",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "legacy_data_dir",
    "require_data_dir",
    "resolve_data_dir",
    "resolve_overridable_path",
    "user_stylesheets_dir",
]
