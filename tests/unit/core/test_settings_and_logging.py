"""Unit tests for Settings and the logging helpers."""

import json
import logging

import pytest

from pethealth.config import Settings
from pethealth.core.logger import (
    ColoredFormatter,
    JSONFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    get_store_logger,
    redact,
)


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("API_BASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.API_BASE_URL == "https://api.pethealthuk.co.uk/api"
        assert settings.SESSION_STORAGE_KEY == "pethealth_data"
        assert settings.AUTH_TOKEN_STORAGE_KEY == "auth_token"
        assert settings.LOG_FORMAT == "colored"

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "https://staging.example.com/api/")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("API_TIMEOUT", "5")

        settings = Settings(_env_file=None)

        assert settings.API_BASE_URL == "https://staging.example.com/api"
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.API_TIMEOUT == 5.0

    def test_rejects_unknown_log_format(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, LOG_FORMAT="xml")


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("store.session", logging.WARNING, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    def test_json_formatter_includes_redacted_extra(self) -> None:
        record = _record(extra_data={"store": "session", "token": "abc123"})

        payload = json.loads(JSONFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "store.session"
        assert payload["message"] == "hello"
        assert payload["extra"] == {"store": "session", "token": "***"}

    def test_colored_formatter_does_not_mutate_record(self) -> None:
        record = _record()
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[33m" in output
        assert record.levelname == "WARNING"

    def test_redact(self) -> None:
        assert redact({"Authorization": "Bearer x", "password": "pw", "email": "a@b.c"}) == {
            "Authorization": "***",
            "password": "***",
            "email": "a@b.c",
        }


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configure_plain_with_file(self, tmp_path) -> None:
        log_file = tmp_path / "pethealth.log"
        configure_logging("debug", "plain", str(log_file))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert isinstance(root.handlers[1].formatter, JSONFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_configure_from_settings(self) -> None:
        configure_logging_from_settings(Settings(_env_file=None, LOG_LEVEL="ERROR", LOG_FORMAT="json"))

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0].formatter, JSONFormatter)


class TestContextLogger:
    def test_context_is_attached(self, caplog) -> None:
        logger = get_logger("pethealth.test", {"component": "test"}).with_context(request_id="r1")

        with caplog.at_level(logging.INFO, logger="pethealth.test"):
            logger.info("Saved", key="pethealth_data")

        record = caplog.records[-1]
        assert record.extra_data == {"component": "test", "request_id": "r1", "key": "pethealth_data"}

    def test_store_logger_name(self) -> None:
        assert get_store_logger("session").name == "store.session"
