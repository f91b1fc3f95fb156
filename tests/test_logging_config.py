"""Unit tests for bankqueue logging configuration."""

import json
import logging

from bankqueue import logging_config
from bankqueue.logging_config import LOGGER_NAME, JsonFormatter, _get_level


def _real_handlers():
    logger = logging.getLogger(LOGGER_NAME)
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


class TestSilentByDefault:
    def test_logger_has_null_handler(self):
        import bankqueue  # noqa: F401

        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
        assert _real_handlers() == []


class TestHandlers:
    def test_console_logging(self):
        handler = logging_config.enable_console_logging(level="DEBUG")
        assert handler in _real_handlers()
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_file_logging_writes(self, tmp_path):
        path = tmp_path / "logs" / "bank.log"
        handler = logging_config.enable_file_logging(path, level="INFO")
        logging.getLogger("bankqueue.simulation").info("hello teller")
        handler.flush()
        assert "hello teller" in path.read_text(encoding="utf-8")

    def test_json_console_handler(self):
        handler = logging_config.enable_console_logging(as_json=True)
        assert isinstance(handler.formatter, JsonFormatter)


class TestConfigureFromEnv:
    def test_noop_without_env(self, monkeypatch):
        monkeypatch.delenv("BANKQUEUE_LOGGING", raising=False)
        monkeypatch.delenv("BANKQUEUE_LOG_FILE", raising=False)
        logging_config.configure_from_env()
        assert _real_handlers() == []

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("BANKQUEUE_LOGGING", "warning")
        monkeypatch.delenv("BANKQUEUE_LOG_FILE", raising=False)
        monkeypatch.delenv("BANKQUEUE_LOG_JSON", raising=False)
        logging_config.configure_from_env()
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING
        assert len(_real_handlers()) == 1

    def test_json_file_from_env(self, monkeypatch, tmp_path):
        path = tmp_path / "bank.jsonl"
        monkeypatch.setenv("BANKQUEUE_LOG_FILE", str(path))
        monkeypatch.setenv("BANKQUEUE_LOG_JSON", "1")
        monkeypatch.delenv("BANKQUEUE_LOGGING", raising=False)
        logging_config.configure_from_env()
        logging.getLogger("bankqueue").info("json line")
        for handler in _real_handlers():
            handler.flush()
        record = json.loads(path.read_text(encoding="utf-8").splitlines()[0])
        assert record["message"] == "json line"
        assert record["level"] == "INFO"

    def test_json_console_from_env(self, monkeypatch):
        monkeypatch.setenv("BANKQUEUE_LOGGING", "DEBUG")
        monkeypatch.setenv("BANKQUEUE_LOG_JSON", "1")
        monkeypatch.delenv("BANKQUEUE_LOG_FILE", raising=False)
        logging_config.configure_from_env()
        (handler,) = _real_handlers()
        assert isinstance(handler.formatter, JsonFormatter)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG


class TestHelpers:
    def test_get_level(self):
        assert _get_level("debug") == logging.DEBUG
        assert _get_level(logging.ERROR) == logging.ERROR
        assert _get_level("nonsense") == logging.INFO

    def test_json_formatter(self):
        record = logging.LogRecord("bankqueue.x", logging.INFO, __file__, 1, "msg %d", (3,), None)
        data = json.loads(JsonFormatter().format(record))
        assert data["message"] == "msg 3"
        assert data["logger"] == "bankqueue.x"
