"""Pytest configuration and shared fixtures."""

import pytest
from loguru import logger

from adapters.output import RecordingSink


@pytest.fixture
def sink():
    """In-memory output sink."""
    return RecordingSink()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from a developer's `.env` and SOLID_DEMOS_* variables."""
    for name in ("SMS_MAX_LENGTH", "SHOW_BANNER", "PAUSE_ON_EXIT", "LOG_LEVEL"):
        monkeypatch.delenv(f"SOLID_DEMOS_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()
