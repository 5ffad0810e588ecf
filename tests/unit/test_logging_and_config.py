import logging

from app.config import Settings, get_settings, settings
from app.utils.logging import get_logger


def test_get_logger_does_not_duplicate_handlers():
    first = get_logger("tests.quote_scanner.logging")
    second = get_logger("tests.quote_scanner.logging")
    assert first is second
    assert len(second.handlers) == 1


def test_get_logger_level_override():
    logger = get_logger("tests.quote_scanner.debug", level="debug")
    assert logger.level == logging.DEBUG


def test_get_logger_defaults_follow_settings(monkeypatch):
    monkeypatch.setattr(settings, "log_level", "WARNING")
    monkeypatch.setattr(settings, "log_format", "%(levelname)s|%(message)s")
    logger = get_logger("tests.quote_scanner.from_settings")
    handler = logger.handlers[0]
    assert logger.level == logging.WARNING
    assert handler.level == logging.WARNING
    assert handler.formatter._fmt == "%(levelname)s|%(message)s"


def test_get_logger_unknown_level_falls_back_to_info():
    logger = get_logger("tests.quote_scanner.unknown", level="verbose")
    assert logger.level == logging.INFO


def test_get_logger_level_change_reaches_existing_handler():
    get_logger("tests.quote_scanner.relevel", level="INFO")
    logger = get_logger("tests.quote_scanner.relevel", level="ERROR")
    assert logger.handlers[0].level == logging.ERROR


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("SCANNER_MAX_OPENING_COUNT_HINT", raising=False)
    config = Settings(_env_file=None)
    assert config.scanner_min_opening_count_hint == 1
    assert config.scanner_max_opening_count_hint == 200
    assert config.scanner_log_signals is False


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SCANNER_MAX_OPENING_COUNT_HINT", "50")
    monkeypatch.setenv("SCANNER_LOG_SIGNALS", "true")
    config = get_settings()
    assert config.scanner_max_opening_count_hint == 50
    assert config.scanner_log_signals is True
