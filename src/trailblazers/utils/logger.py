"""
Logging Configuration

Structured logging for the API and the seeding pipeline, built on structlog.
Every event carries the service name, environment and version; enum members
(entity kinds, source states) and filesystem paths are rendered as plain
strings so JSON output stays flat.
"""
import logging
import sys
from enum import Enum
from pathlib import PurePath
from typing import Any, Optional

import structlog
from structlog.types import EventDict, Processor

from config.settings import settings

SERVICE_NAME = "trailblazers"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["service"] = SERVICE_NAME
    event_dict["environment"] = settings.environment
    event_dict["app_version"] = settings.app_version
    return event_dict


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def render_plain_values(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace Enum members with their value and paths with their string form."""
    for key, value in event_dict.items():
        event_dict[key] = _plain(value)
    return event_dict


def setup_logging() -> structlog.BoundLogger:
    """
    Configure structured logging.

    LOG_FORMAT=json renders one JSON object per line; anything else uses the
    structlog console renderer. LOG_LEVEL sets the stdlib root level.

    Returns:
        Configured structlog logger instance
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        render_plain_values,
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger(SERVICE_NAME)


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Logger for a module, typically get_logger(__name__)."""
    return structlog.get_logger(name)
