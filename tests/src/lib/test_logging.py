"""
Tests for structured logging setup (src/lib/logging.py).
"""

from __future__ import annotations

import logging

import pytest
import structlog

from src.lib.logging import SERVICE_NAME, _add_service, resolve_level, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_installs_single_structlog_handler(self, monkeypatch, restore_root_logger) -> None:
        monkeypatch.setenv("COMPASS_DEV_MODE", "1")
        setup_logging()
        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_level_from_env(self, monkeypatch, restore_root_logger) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        setup_logging()
        assert restore_root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch, restore_root_logger) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        setup_logging()
        assert restore_root_logger.level == logging.INFO

    def test_quiets_noisy_loggers(self, monkeypatch, restore_root_logger) -> None:
        monkeypatch.delenv("COMPASS_DEV_MODE", raising=False)
        setup_logging()
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_explicit_level_beats_env(self, monkeypatch, restore_root_logger) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        setup_logging(level="error")
        assert restore_root_logger.level == logging.ERROR

    def test_dev_mode_uses_console_renderer(self, restore_root_logger) -> None:
        setup_logging(dev_mode=True)
        formatter = restore_root_logger.handlers[0].formatter
        assert isinstance(formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_by_default(self, monkeypatch, restore_root_logger) -> None:
        monkeypatch.delenv("COMPASS_DEV_MODE", raising=False)
        setup_logging()
        formatter = restore_root_logger.handlers[0].formatter
        assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)


class TestHelpers:
    """Tests for the level resolver and service stamp."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("warning", logging.WARNING), ("INFO", logging.INFO), (None, logging.INFO), ("loud", logging.INFO)],
    )
    def test_resolve_level(self, name, expected) -> None:
        assert resolve_level(name) == expected

    def test_service_stamped(self) -> None:
        assert _add_service(None, "info", {"event": "x"})["service"] == SERVICE_NAME

    def test_service_not_overwritten(self) -> None:
        assert _add_service(None, "info", {"service": "other"})["service"] == "other"
