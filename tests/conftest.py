"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from parse_utc_date.config import TIMEZONE_ENV, reset_default_values


@pytest.fixture(autouse=True)
def utc_local_timezone(monkeypatch: pytest.MonkeyPatch):
    """Pin the local timezone to UTC so results do not depend on the host."""
    monkeypatch.setenv(TIMEZONE_ENV, "UTC")
    reset_default_values()
    yield
    reset_default_values()


@pytest.fixture
def new_york(monkeypatch: pytest.MonkeyPatch) -> str:
    """Use America/New_York as the local timezone (UTC-05:00 in winter, UTC-04:00 in summer)."""
    monkeypatch.setenv(TIMEZONE_ENV, "America/New_York")
    return "America/New_York"


@pytest.fixture
def isolated_root_logger():
    """Give the test an empty root logger and restore pytest's handlers afterwards."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    root_logger.handlers = []
    yield root_logger
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)
