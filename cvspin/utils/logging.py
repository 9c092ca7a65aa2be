"""Structured logging configuration with correlation vector support."""

import json
import logging
import sys
from datetime import datetime, timezone

from .correlation import get_correlation_vector

# LogRecord attributes that are not user-supplied extra fields
_RESERVED_ATTRIBUTES = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "getMessage",
    "exc_info",
    "exc_text",
    "stack_info",
    "message",
    "correlation_vector",
}


class CorrelationFormatter(logging.Formatter):
    """Custom formatter that includes the correlation vector in log records."""

    def __init__(self, format_type: str = "json"):
        super().__init__()
        self.format_type = format_type.lower()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with correlation vector."""
        correlation_vector = get_correlation_vector()
        if correlation_vector:
            record.correlation_vector = correlation_vector

        if self.format_type == "json":
            return self._format_json(record)
        else:
            return self._format_text(record)

    def _format_json(self, record: logging.LogRecord) -> str:
        """Format as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "correlation_vector"):
            log_data["correlation_vector"] = record.correlation_vector

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def _format_text(self, record: logging.LogRecord) -> str:
        """Format as human-readable text."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        correlation_part = ""

        if hasattr(record, "correlation_vector"):
            correlation_part = f" [{record.correlation_vector}]"

        base_msg = f"{timestamp} {record.levelname:8s} {record.name}{correlation_part}: {record.getMessage()}"

        if record.exc_info:
            base_msg += "\n" + self.formatException(record.exc_info)

        return base_msg


def setup_logging(level: str = "INFO", format_type: str = "json") -> None:
    """Set up structured logging configuration."""
    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CorrelationFormatter(format_type))

    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name."""
    return logging.getLogger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to other classes."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger instance for this class."""
        return get_logger(self.__class__.__module__ + "." + self.__class__.__name__)

    def log_info(self, message: str, **kwargs) -> None:
        """Log info message with extra context."""
        self.logger.info(message, extra=kwargs)

    def log_warning(self, message: str, **kwargs) -> None:
        """Log warning message with extra context."""
        self.logger.warning(message, extra=kwargs)

    def log_error(self, message: str, **kwargs) -> None:
        """Log error message with extra context."""
        self.logger.error(message, extra=kwargs)

    def log_debug(self, message: str, **kwargs) -> None:
        """Log debug message with extra context."""
        self.logger.debug(message, extra=kwargs)
