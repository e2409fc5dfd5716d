"""Smoke tests for unified entry points.

These tests assert that `python -m fluorine` and the console script
both resolve to the CLI's `main` function exposed under `fluorine.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m fluorine` path exposes a `main` callable."""
    m = import_module("fluorine.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `fluorine.ui.cli:main` and is importable."""
    m = import_module("fluorine.ui.cli")
    assert hasattr(m, "main")


def test_package_exposes_data_dir() -> None:
    m = import_module("fluorine")
    assert m.data_dir({"HOME": "/home/alice"}).as_posix() == (
        "/home/alice/.var/app/com.fluorine.manager"
    )
