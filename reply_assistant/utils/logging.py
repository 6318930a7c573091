"""Logging setup with a per-request id on every record."""

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"

# Task-local so concurrent FastAPI requests never see each other's id
_request_context: ContextVar[Dict[str, Any]] = ContextVar("request_context", default={})


class RequestContextFilter(logging.Filter):
    """Stamp the current request context onto each record; request_id defaults to "-"."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        for key, value in _request_context.get().items():
            setattr(record, key, value)
        return True


_request_filter = RequestContextFilter()


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(_request_filter)
    return handler


def setup_logging(
    level: str = "INFO",
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the root logger with a console handler and an optional file handler.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_format: Format string; may reference %(request_id)s
        log_file: Optional path to log file, parent directories are created

    Returns:
        Configured root logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_handler(logging.StreamHandler(), numeric_level, formatter))

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(_handler(logging.FileHandler(log_file), numeric_level, formatter))

    return root_logger


def set_context(**kwargs) -> None:
    """
    Attach fields to every record logged from the current task.

    Example:
        set_context(request_id="a1b2c3d4")
        logger.info("Generating reply")  # carries request_id
    """
    _request_context.set({**_request_context.get(), **kwargs})


def clear_context() -> None:
    _request_context.set({})
