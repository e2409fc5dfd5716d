"""
Summary: Directory creation and text persistence with diagnostic failures.
Why: Saving config into the data directory must report why a write failed.
"""

from __future__ import annotations

import errno as errno_module
import logging
import shutil
from pathlib import Path
from typing import Final

_BYTES_PER_GB: Final[float] = 1024.0 * 1024.0 * 1024.0

# platform.logging depends on this module, so log through the named logger.
_logger = logging.getLogger("fluorine")


class SaveFileError(OSError):
    """Raised when a file could not be opened or written.

    ``errno`` carries the underlying error code; the message is the whole
    text, without the ``[Errno N]`` prefix.
    """

    def __str__(self) -> str:
        return self.strerror or super().__str__()


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and its parents if needed and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent_directory(path: Path) -> Path:
    """Create the parent directory of ``path`` if needed and return ``path``."""

    _ = ensure_directory(path.parent)
    return path


def available_gb(path: Path) -> float | None:
    """Free space in GB on the filesystem holding ``path``.

    Walks up to the nearest ancestor that can be queried. Returns ``None``
    if there is none. Never raises.
    """
    for candidate in [path, *path.parents]:
        try:
            return shutil.disk_usage(candidate).free / _BYTES_PER_GB
        except OSError:
            continue
    return None


def safe_write_text(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, truncating any previous contents.

    Missing parent directories are created.

    Raises:
        SaveFileError: If the file cannot be opened or written. The original
            ``OSError`` is chained.
    """
    try:
        _ = ensure_parent_directory(path)
        with open(path, "w", encoding="utf-8") as handle:
            _ = handle.write(content)
    except OSError as e:
        code = e.errno if e.errno is not None else errno_module.EIO
        reason = e.strerror or str(e)
        free = available_gb(path)
        _logger.error(
            "failed to open '%s' for writing, error %d ('%s'), %s available",
            path,
            code,
            reason,
            f"{free:.3f}GB" if free is not None else "unknown space",
        )
        raise SaveFileError(code, f"Failed to save '{path}': {reason} (error {code})") from e


__all__ = [
    "SaveFileError",
    "available_gb",
    "ensure_directory",
    "ensure_parent_directory",
    "safe_write_text",
]
