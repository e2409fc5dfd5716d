"""Tests for the application logger bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from rich.logging import RichHandler

from fluorine.platform.logging import LOGGER_NAME, logger, setup_logger


def test_import_time_logger_is_console_only() -> None:
    assert logger.name == LOGGER_NAME


def test_setup_logger_console_only() -> None:
    configured = setup_logger(console_level=logging.WARNING)

    assert len(configured.handlers) == 1
    handler = configured.handlers[0]
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING


def test_setup_logger_with_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "fluorine.log"
    configured = setup_logger(log_file=log_file, file_level=logging.INFO)

    try:
        file_handlers = [
            h for h in configured.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.INFO
        assert log_file.parent.is_dir()

        configured.info("hello from the test")
        file_handlers[0].flush()
        assert "hello from the test" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_setup_logger_replaces_handlers(tmp_path: Path) -> None:
    _ = setup_logger(log_file=tmp_path / "one.log")
    configured = setup_logger()

    assert len(configured.handlers) == 1
    assert isinstance(configured.handlers[0], RichHandler)
