"""Logging configuration for the atomic CSS compiler."""

import logging
import logging.handlers
import json
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone

from ..config import LoggingConfig

_RESERVED_ATTRS = {
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
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(config: LoggingConfig) -> None:
    """Set up logging configuration."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    log_level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    # stderr keeps stdout free for CSS output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    file_handler = None
    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(log_level)

    formatter: logging.Formatter
    if config.format.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    console_handler.setFormatter(formatter)
    if file_handler:
        file_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    if file_handler:
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(f"atomic_css.{name}")


class LoggerMixin:
    """Mixin class to add logging capabilities to other classes."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        return get_logger(self.__class__.__name__)


def log_class_compiled(key: str, atomic_count: int, duration: float) -> None:
    """Log a compiled style class."""
    logger = get_logger("compiler")
    logger.debug(
        "Style class compiled",
        extra={
            "rule": key,
            "atomic_classes": atomic_count,
            "duration_ms": round(duration * 1000, 2),
            "event": "class_compiled",
        },
    )


def log_compile_failure(key: str, error: str) -> None:
    """Log a style class that failed to compile."""
    logger = get_logger("compiler")
    logger.error(
        "Style class compilation failed",
        extra={"rule": key, "error": error, "event": "class_failed"},
    )


def log_render_result(
    rule_count: int, rtl_count: int, css_length: int, duration: float, layers: Optional[int] = None
) -> None:
    """Log CSS rendering results."""
    logger = get_logger("renderer")

    extra = {
        "rules": rule_count,
        "rtl_rules": rtl_count,
        "css_length": css_length,
        "duration_ms": round(duration * 1000, 2),
        "event": "render_complete",
    }

    if layers is not None:
        extra["layers"] = layers

    logger.info("CSS rendering completed", extra=extra)
