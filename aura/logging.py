"""
Structured logging configuration for the Aura accounts data layer.

Logs are JSON with a timestamp, level, logger name (the record tag) and the
event name. A request_id is bound through structlog.contextvars for the
duration of a fetch, so every record of that fetch carries it.
"""
import logging
import uuid
from typing import Optional

import structlog

from aura.config import settings

REQUEST_ID_KEY = "request_id"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with JSON output and context variables."""
    logging.basicConfig(format="%(message)s", level=(level or settings.log_level).upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def current_request_id() -> Optional[str]:
    """Return the request ID bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get(REQUEST_ID_KEY)


def generate_request_id() -> str:
    """Generate a unique request ID."""
    return str(uuid.uuid4())
