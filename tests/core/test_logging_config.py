"""Tests for logging configuration."""

import json
import logging

import pytest

from evalsh.core import logging_config
from evalsh.core.logging_config import JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    """Keep configure_logging from leaking into other tests."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = list(root.handlers)
    monkeypatch.setattr(logging_config, "_configured", False)
    for var in ("EVALSH_LOG_LEVEL", "EVALSH_LOG_FORMAT", "EVALSH_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_warning(self):
        """Without arguments or environment, the root logger is at WARNING."""
        configure_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_argument_level(self):
        """Explicit level wins."""
        configure_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_env_level(self, monkeypatch):
        """EVALSH_LOG_LEVEL is used when no level is given."""
        monkeypatch.setenv("EVALSH_LOG_LEVEL", "ERROR")

        configure_logging()

        assert logging.getLogger().level == logging.ERROR

    def test_second_call_ignored(self):
        """Later calls do nothing unless forced."""
        configure_logging(level="INFO")
        configure_logging(level="DEBUG")

        assert logging.getLogger().level == logging.INFO

        configure_logging(level="DEBUG", force=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        """A file path adds a file handler."""
        log_file = tmp_path / "evalsh.log"

        configure_logging(level="INFO", file_path=str(log_file))
        logging.getLogger("evalsh.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello file" in log_file.read_text()

    def test_debug_quiets_aiohttp(self):
        """Debug logging keeps aiohttp at WARNING."""
        configure_logging(level="DEBUG")

        assert logging.getLogger("aiohttp").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format_fields(self):
        """Records become JSON objects with the standard keys."""
        record = logging.LogRecord(
            name="evalsh.http.client",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="GET %s -> %d",
            args=("/db", 200),
            exc_info=None,
        )

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "DEBUG"
        assert data["logger"] == "evalsh.http.client"
        assert data["message"] == "GET /db -> 200"
        assert "timestamp" in data

    def test_extra_fields(self):
        """Non-standard record attributes land under extra."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        record.request_id = "abc"

        data = json.loads(JsonFormatter().format(record))

        assert data["extra"] == {"request_id": "abc"}
