"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest

from parse_utc_date.config import LOG_LEVEL_ENV, LOG_USER_FRIENDLY_ENV, ConfigurationError
from parse_utc_date.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_installs_single_console_handler(self, isolated_root_logger: logging.Logger) -> None:
        setup_logging("DEBUG")
        setup_logging("DEBUG")

        assert isolated_root_logger.level == logging.DEBUG
        assert len(isolated_root_logger.handlers) == 1
        assert isinstance(isolated_root_logger.handlers[0], logging.StreamHandler)

    def test_level_from_environment(self, isolated_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        setup_logging()
        assert isolated_root_logger.level == logging.ERROR

    def test_numeric_level(self, isolated_root_logger: logging.Logger) -> None:
        setup_logging(logging.WARNING)
        assert isolated_root_logger.level == logging.WARNING

    def test_user_friendly_format(self, isolated_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_USER_FRIENDLY_ENV, "true")
        setup_logging("INFO")
        assert isolated_root_logger.handlers[0].formatter._fmt == "%(message)s"

    def test_unknown_level_raises(self, isolated_root_logger: logging.Logger) -> None:
        with pytest.raises(ConfigurationError, match="logging level"):
            setup_logging("LOUD")
