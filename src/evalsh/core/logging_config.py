"""Centralized logging configuration for evalsh.

Usage:
    from evalsh.core.logging_config import configure_logging

    # Configure once at application startup
    configure_logging(level="DEBUG")

    # Get loggers in modules
    logger = logging.getLogger(__name__)

Environment Variables:
    EVALSH_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    EVALSH_LOG_FORMAT: Output format ("text" or "json")
    EVALSH_LOG_FILE: Optional log file path
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Literal

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_FORMAT_WITH_MS = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Log lines go to stderr and would otherwise interleave with REPL output
DEFAULT_LEVEL = "WARNING"

# Loggers that stay quiet unless asked for explicitly
NOISY_LOGGERS = ("aiohttp", "asyncio")

_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

_configured = False


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs one object per record:
    {
        "timestamp": "2026-10-19T14:30:00.123",
        "level": "DEBUG",
        "logger": "evalsh.http.client",
        "message": "GET http://127.0.0.1:5984/ -> 200",
        "extra": {...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS}
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str | None = None,
    format: Literal["text", "json"] | None = None,
    file_path: str | None = None,
    include_ms: bool = True,
    force: bool = False,
) -> None:
    """Configure logging for the application.

    Called once at startup. Subsequent calls are ignored unless force=True.
    Arguments take precedence over EVALSH_LOG_* environment variables.

    Args:
        level: Log level. Defaults to EVALSH_LOG_LEVEL or WARNING.
        format: Output format. Defaults to EVALSH_LOG_FORMAT or "text".
        file_path: Optional file path. Defaults to EVALSH_LOG_FILE.
        include_ms: Include milliseconds in timestamp.
        force: Force reconfiguration even if already configured.
    """
    global _configured
    if _configured and not force:
        return

    level = level or os.environ.get("EVALSH_LOG_LEVEL", DEFAULT_LEVEL)
    format = format or os.environ.get("EVALSH_LOG_FORMAT", "text")  # type: ignore
    file_path = file_path or os.environ.get("EVALSH_LOG_FILE")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        fmt = TEXT_FORMAT_WITH_MS if include_ms else TEXT_FORMAT
        formatter = logging.Formatter(fmt, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if root_logger.level < logging.WARNING:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
