"""Data structures that describe a data-directory migration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class MigrationStatus(str, Enum):
    """Outcome of a migration attempt."""

    MIGRATED = "migrated"
    NOTHING_TO_MIGRATE = "nothing_to_migrate"
    TARGET_NOT_EMPTY = "target_not_empty"
    HOME_UNKNOWN = "home_unknown"
    DRY_RUN = "dry_run"


class DataDirMigrationError(RuntimeError):
    """Raised when moving the legacy directory fails part-way."""


@dataclass(slots=True, frozen=True)
class MigrationResult:
    """Capture what a migration attempt did."""

    status: MigrationStatus
    legacy_dir: Path | None
    target_dir: Path
    message: str

    @property
    def moved(self) -> bool:
        return self.status is MigrationStatus.MIGRATED
