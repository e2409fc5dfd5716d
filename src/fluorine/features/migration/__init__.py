"""
Summary: Public API for the legacy data-directory migration.
Why: Callers import one module instead of reaching into models and usecases.
"""

from .migrate import migrate_data_dir
from .models import DataDirMigrationError, MigrationResult, MigrationStatus

__all__ = [
    "DataDirMigrationError",
    "MigrationResult",
    "MigrationStatus",
    "migrate_data_dir",
]
