"""
Summary: One-time move of ~/.local/share/fluorine back into the data directory.
Why: Older releases stored state outside the Flatpak-style data directory.
"""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from fluorine.config.paths import CONFIG_FILE_NAME, legacy_data_dir, resolve_data_dir
from fluorine.features.migration.models import (
    DataDirMigrationError,
    MigrationResult,
    MigrationStatus,
)
from fluorine.platform.filesystem import ensure_directory
from fluorine.platform.logging import logger

# Entries the current release may create before migrating. A target holding
# only these still receives the legacy data.
BOOTSTRAP_ENTRIES: Final[frozenset[str]] = frozenset({CONFIG_FILE_NAME, "logs"})
LEGACY_CONFLICT_SUFFIX: Final[str] = ".legacy"


def _blocking_entries(target: Path) -> set[str] | None:
    """Names in ``target`` that are not bootstrap entries, or ``None`` if absent."""

    if not target.exists():
        return None
    if not target.is_dir():
        return {target.name}
    return {p.name for p in target.iterdir()} - BOOTSTRAP_ENTRIES


def _merge_into(legacy: Path, target: Path) -> list[str]:
    """Move every legacy entry into ``target``; clashing names get a suffix."""

    renamed: list[str] = []
    for entry in sorted(legacy.iterdir(), key=lambda p: p.name):
        destination = target / entry.name
        if destination.exists():
            destination = target / f"{entry.name}{LEGACY_CONFLICT_SUFFIX}"
            renamed.append(destination.name)
        _ = shutil.move(str(entry), str(destination))
    legacy.rmdir()
    return renamed


def migrate_data_dir(
    env: Mapping[str, str] | None = None,
    *,
    dry_run: bool = False,
) -> MigrationResult:
    """Move the legacy data directory into the current data directory.

    Nothing is touched when the home directory is unknown, when there is no
    legacy directory, or when the target already holds data other than the
    config file and the ``logs`` directory. Those two are kept, and legacy
    entries with the same names land beside them with a ``.legacy`` suffix.
    Run this before attaching a file log handler inside the data directory.

    Args:
        env: Environment mapping to read. Defaults to ``os.environ``.
        dry_run: Report what would happen without moving anything.

    Returns:
        MigrationResult: Outcome of the attempt.

    Raises:
        DataDirMigrationError: If the move itself fails.
    """
    resolution = resolve_data_dir(env)
    target = resolution.path
    legacy = legacy_data_dir(env)

    if not resolution.home_known or legacy is None:
        message = "home directory unknown, skipping data directory migration"
        logger.warning(message)
        return MigrationResult(MigrationStatus.HOME_UNKNOWN, None, target, message)

    if not legacy.is_dir():
        message = f"no legacy data directory at {legacy}"
        logger.debug(message)
        return MigrationResult(MigrationStatus.NOTHING_TO_MIGRATE, legacy, target, message)

    blocking = _blocking_entries(target)
    if blocking:
        message = f"{target} already holds data, leaving {legacy} in place"
        logger.warning(message)
        return MigrationResult(MigrationStatus.TARGET_NOT_EMPTY, legacy, target, message)

    if dry_run:
        message = f"would move {legacy} to {target}"
        logger.info(message)
        return MigrationResult(MigrationStatus.DRY_RUN, legacy, target, message)

    renamed: list[str] = []
    try:
        if blocking is None:
            _ = ensure_directory(target.parent)
            _ = shutil.move(str(legacy), str(target))
        else:
            renamed = _merge_into(legacy, target)
    except OSError as e:
        logger.error("Failed to migrate %s to %s: %s", legacy, target, e)
        raise DataDirMigrationError(f"Failed to migrate {legacy} to {target}: {e}") from e

    message = f"migrated {legacy} to {target}"
    if renamed:
        message += f" (kept legacy copies as {', '.join(renamed)})"
    logger.info(message)
    return MigrationResult(MigrationStatus.MIGRATED, legacy, target, message)


__all__ = ["BOOTSTRAP_ENTRIES", "migrate_data_dir"]
