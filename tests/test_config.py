"""Tests for AppSettings."""

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_defaults():
    settings = AppSettings()
    assert settings.sms_max_length == 20
    assert settings.show_banner is True
    assert settings.pause_on_exit is False
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SOLID_DEMOS_SMS_MAX_LENGTH", "160")
    monkeypatch.setenv("SOLID_DEMOS_LOG_LEVEL", "debug")
    settings = AppSettings()
    assert settings.sms_max_length == 160
    assert settings.log_level == "DEBUG"


def test_env_file(tmp_path):
    (tmp_path / ".env").write_text("SOLID_DEMOS_SHOW_BANNER=false\n", encoding="utf-8")
    assert AppSettings().show_banner is False


@pytest.mark.parametrize("name, value", [("SMS_MAX_LENGTH", "0"), ("LOG_LEVEL", "loud")])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(f"SOLID_DEMOS_{name}", value)
    with pytest.raises(ValidationError):
        AppSettings()
