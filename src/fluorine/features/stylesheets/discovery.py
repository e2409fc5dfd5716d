"""Locate ``.qss`` stylesheets shipped with the app, an instance, or the user."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from fluorine.config.paths import user_stylesheets_dir
from fluorine.platform.filesystem import ensure_directory
from fluorine.platform.logging import logger

STYLESHEETS_SUBDIR: Final[str] = "stylesheets"
STYLESHEET_SUFFIX: Final[str] = ".qss"


def _is_stylesheet(path: Path) -> bool:
    # Name filters match case-insensitively, like Qt's "*.qss".
    return path.suffix.lower() == STYLESHEET_SUFFIX


@dataclass(slots=True, frozen=True)
class Stylesheet:
    """A stylesheet available for selection."""

    name: str
    file_name: str
    path: Path


def stylesheet_search_dirs(
    app_dir: Path,
    instance_dir: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> list[Path]:
    """Directories searched for stylesheets, highest priority first.

    Args:
        app_dir: Application base directory (bundled themes).
        instance_dir: Directory of the current instance, if any.
        env: Environment mapping used to find the user data directory.

    Returns:
        list[Path]: Unique directories in search order.
    """
    candidates = [app_dir / STYLESHEETS_SUBDIR]
    if instance_dir is not None:
        candidates.append(instance_dir / STYLESHEETS_SUBDIR)
    candidates.append(user_stylesheets_dir(env))

    ordered: list[Path] = []
    for candidate in candidates:
        if candidate not in ordered:
            ordered.append(candidate)
    return ordered


def discover_stylesheets(search_dirs: Iterable[Path]) -> list[Stylesheet]:
    """Collect stylesheets, keeping the first one seen for each file name."""

    seen: set[str] = set()
    found: list[Stylesheet] = []
    for directory in search_dirs:
        try:
            if not directory.is_dir():
                logger.debug("Skipping missing stylesheet directory %s", directory)
                continue
            entries = sorted(
                (p for p in directory.iterdir() if p.is_file() and _is_stylesheet(p)),
                key=lambda p: p.name,
            )
        except OSError as e:
            logger.warning("Skipping unreadable stylesheet directory %s: %s", directory, e)
            continue
        for entry in entries:
            if entry.name in seen:
                continue
            seen.add(entry.name)
            found.append(Stylesheet(name=entry.stem, file_name=entry.name, path=entry))
    return found


def select_stylesheet(
    stylesheets: Sequence[Stylesheet], style_name: str | None
) -> Stylesheet | None:
    if not style_name:
        return None
    return next((s for s in stylesheets if s.file_name == style_name), None)


def stylesheets_explore_dir(
    instance_dir: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Directory a user should drop custom themes into; created if missing."""

    if instance_dir is not None:
        target = instance_dir / STYLESHEETS_SUBDIR
    else:
        target = user_stylesheets_dir(env)
    return ensure_directory(target)


__all__ = [
    "STYLESHEETS_SUBDIR",
    "STYLESHEET_SUFFIX",
    "Stylesheet",
    "discover_stylesheets",
    "select_stylesheet",
    "stylesheet_search_dirs",
    "stylesheets_explore_dir",
]
