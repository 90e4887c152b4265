"""
Logging

Centralized logging configuration for the client library.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from pethealth.config.settings import Settings

LOG_LINE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Keys that must never reach a log sink verbatim
SENSITIVE_KEYS = frozenset({"authorization", "password", "token"})


def redact(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` with credential-like values masked."""
    return {key: "***" if key.lower() in SENSITIVE_KEYS else value for key, value in data.items()}


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data["extra"] = redact(extra_data)

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers still see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class ContextLogger:
    """Logger that attaches a fixed context to every record."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    def with_context(self, **kwargs) -> "ContextLogger":
        """Create a new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, **kwargs) -> None:
        extra = {**self._context, **kwargs}
        self._logger.log(level, message, extra={"extra_data": extra})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log an error with the current traceback."""
        self._logger.exception(message, extra={"extra_data": {**self._context, **kwargs}})


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_file: str | None = None,
) -> None:
    """
    Configure root logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'colored', 'json', or 'plain'
        log_file: Optional file path; file output is always JSON
    """
    numeric_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    elif format_type == "colored":
        console_handler.setFormatter(ColoredFormatter(LOG_LINE_FORMAT, datefmt=LOG_DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_LINE_FORMAT, datefmt=LOG_DATE_FORMAT))

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    # httpx logs every request at INFO, including full URLs
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))


def configure_logging_from_settings(settings: Settings) -> None:
    """Apply the LOG_* settings."""
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT, settings.LOG_FILE)


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name (typically __name__)
        context: Default context
    """
    return ContextLogger(name, context)


def get_store_logger(store_name: str) -> ContextLogger:
    """Get logger for local stores."""
    return get_logger(f"store.{store_name}", {"component": "store", "store": store_name})
