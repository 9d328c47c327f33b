"""
Logging Setup
=============
Structured logging for applications embedding morse-core.

The library only emits events through structlog; it never configures
logging on import. Applications opt in:

    from morse_core import setup_logging

    setup_logging(level="DEBUG")
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict
import structlog


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Key/value context bound through structlog
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        log_data["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, default=str, ensure_ascii=False)


class KeyValueFormatter(logging.Formatter):
    """Plain text formatter that appends structlog context as key=value pairs."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            message += " " + " ".join(f"{key}={value!r}" for key, value in extra_data.items())
        return message


def _render_to_extra_data(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event = event_dict.pop("event", "")
    exc_info = event_dict.pop("exc_info", None)
    kwargs = {"msg": event, "extra": {"extra_data": event_dict}}
    if exc_info:
        kwargs["exc_info"] = exc_info
    return kwargs


def setup_logging(
    level: str = "INFO",
    json_output: bool = True,
) -> logging.Logger:
    """
    Configure stdlib logging and route structlog events through it.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output JSON

    Returns:
        Configured root logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(KeyValueFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        ))
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            _render_to_extra_data,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return root_logger
