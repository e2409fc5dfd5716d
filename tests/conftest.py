"""Shared pytest fixtures isolating tests from the real home directory."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from fluorine.config.config import Config
from fluorine.config.paths import BASE_DIR_ENV_VAR, CONFIG_ENV_VAR, HOME_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point ``HOME`` at a temporary directory and drop path overrides."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(BASE_DIR_ENV_VAR, raising=False)

    Config.reset()
    try:
        yield home
    finally:
        Config.reset()


@pytest.fixture
def no_home(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``HOME`` from the environment."""

    monkeypatch.delenv(HOME_ENV_VAR, raising=False)
