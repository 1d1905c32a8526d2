"""Tests for the loguru setup."""

from loguru import logger

from core.logging import configure_logging


def test_redirected_stderr_gets_plain_text(capsys):
    configure_logging("INFO")
    logger.info("runner ready")

    err = capsys.readouterr().err
    assert "runner ready" in err
    assert "\x1b[" not in err


def test_level_filters_messages(capsys):
    configure_logging("WARNING")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
