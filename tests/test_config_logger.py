"""
Tests for Settings, logger setup and local timezone helpers
"""

import logging
from datetime import datetime, timezone

import pytest
import pytz

from xutils.config.settings import Settings, FALLBACK_PATTERNS, SUPPORTED_LOCALES, env_bool
from xutils.core import clock
from xutils.core.logger import setup_logger


@pytest.fixture
def restore_xutils_logger():
    """Undo setup_logger() side effects on the package logger"""
    logger = logging.getLogger("xutils")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestSettings:
    def test_fixed_lists(self):
        assert len(FALLBACK_PATTERNS) == 16
        assert FALLBACK_PATTERNS[0] == "yyyy-MM-dd'T'HH:mm:ss.SSS'Z'"
        assert FALLBACK_PATTERNS[-1] == "dd-MM-yyyy"
        assert SUPPORTED_LOCALES == ("id_ID", "en_US", "en_GB", "fr_FR", "de_DE", "es_ES", "it_IT", "pt_BR")
        assert Settings.FALLBACK_PATTERNS is FALLBACK_PATTERNS

    @pytest.mark.parametrize("raw, expected", [
        ("1", True),
        ("yes", True),
        ("On", True),
        ("0", False),
        ("nope", False),
    ])
    def test_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("XUTILS_TEST_FLAG", raw)
        assert env_bool("XUTILS_TEST_FLAG") is expected

    def test_env_bool_default(self, monkeypatch):
        monkeypatch.delenv("XUTILS_TEST_FLAG", raising=False)
        assert env_bool("XUTILS_TEST_FLAG", True) is True


class TestLogger:
    def test_console_handler(self, restore_xutils_logger):
        logger = setup_logger("DEBUG")

        assert logger is restore_xutils_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_no_duplicate_handlers(self, restore_xutils_logger):
        setup_logger("INFO")
        logger = setup_logger("INFO")

        assert len(logger.handlers) == 1

    def test_file_handler(self, restore_xutils_logger, tmp_path):
        log_file = tmp_path / "logs" / "xutils.log"
        logger = setup_logger("DEBUG", log_file=log_file)

        logging.getLogger("xutils.services.date_service").debug("parse failed")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "parse failed" in log_file.read_text(encoding="utf-8")


class TestClock:
    def test_attach_local_pytz(self):
        result = clock.attach_local(datetime(2024, 1, 1, 12, 0))

        assert result.utcoffset().total_seconds() == 7 * 3600

    def test_attach_local_keeps_aware(self):
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)

        assert clock.attach_local(value) is value

    def test_to_local(self):
        result = clock.to_local(datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc))

        assert (result.day, result.hour) == (1, 7)
        assert clock.to_local(None) is None

    def test_system_zone_when_unset(self, monkeypatch):
        monkeypatch.setattr(Settings, "LOCAL_TZ", None)

        assert clock.attach_local(datetime(2024, 1, 1)).tzinfo is not None
        assert clock.local_now().tzinfo is not None

    def test_other_named_zone(self, monkeypatch):
        monkeypatch.setattr(Settings, "LOCAL_TZ", pytz.timezone("Europe/Berlin"))

        assert clock.from_epoch_millis(0).hour == 1
