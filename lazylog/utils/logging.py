"""
Logging configuration for the lazylog analyzer.

Diagnostics go to stderr through Rich so that stdout only carries the
analyzed log lines. An optional file handler writes JSON records, and a
context filter lets callers tag records with the line being processed.
"""

import functools
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

from lazylog.config import get_settings

_RESERVED_ATTRS = {
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
    "message",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "thread",
    "threadName",
    "taskName",
    "exc_info",
    "exc_text",
    "stack_info",
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if present
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ContextFilter(logging.Filter):
    """Add context information to log records."""

    def __init__(self) -> None:
        super().__init__()
        self.context: dict[str, Any] = {}

    def set_context(self, **kwargs: Any) -> None:
        self.context.update(kwargs)

    def clear_context(self) -> None:
        self.context.clear()

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context to the log record."""
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


# Global context filter instance
context_filter = ContextFilter()


def setup_logging(
    log_level: Optional[str] = None,
    log_file_path: Optional[Path] = None,
    use_structured_logging: Optional[bool] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (defaults to settings)
        log_file_path: Path to log file (defaults to settings)
        use_structured_logging: Use JSON structured logging for files (defaults to settings)
    """
    settings = get_settings()

    log_level = (log_level or settings.log_level).upper()
    log_file_path = log_file_path or settings.get_log_file_path()
    if use_structured_logging is None:
        use_structured_logging = settings.structured_logging

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler with Rich formatting
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=settings.dev_mode,
    )
    console_handler.setLevel(log_level)
    console_handler.addFilter(context_filter)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file_path:
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.addFilter(context_filter)

        if use_structured_logging:
            file_handler.setFormatter(StructuredFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )

        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.debug(
        "Logging configured",
        extra={
            "log_level": log_level,
            "log_file": str(log_file_path) if log_file_path else None,
            "structured_logging": use_structured_logging,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class LogContext:
    """Context manager for temporary logging context."""

    def __init__(self, **kwargs: Any) -> None:
        self.context = kwargs
        self.old_context: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        for key in self.context:
            if key in context_filter.context:
                self.old_context[key] = context_filter.context[key]

        context_filter.set_context(**self.context)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        for key in self.context:
            context_filter.context.pop(key, None)

        if self.old_context:
            context_filter.set_context(**self.old_context)


def log_performance(func):
    """
    Decorator to log function performance.

    Usage:
        @log_performance
        def run(self, filepath: str) -> RunStats:
            ...
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.time()

        try:
            with LogContext(function=func.__name__):
                logger.debug(f"Starting {func.__name__}")
                result = func(*args, **kwargs)
                duration = time.time() - start_time
                logger.debug(
                    f"Completed {func.__name__}",
                    extra={"duration_seconds": duration},
                )
                return result
        except Exception as e:
            duration = time.time() - start_time
            logger.debug(
                f"Failed {func.__name__}",
                extra={"duration_seconds": duration, "error": str(e)},
            )
            raise

    return wrapper
