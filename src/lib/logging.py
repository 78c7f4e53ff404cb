"""
Logging setup for the Compass Capacity Engine.

Both ``logging.getLogger(__name__)`` (used throughout the services) and
``structlog.get_logger()`` end up in one stderr handler. Records are
rendered as JSON unless COMPASS_DEV_MODE=1, in which case the console
renderer is used. Every record carries ``service="compass"``.

Usage:
    from src.lib.logging import setup_logging

    setup_logging()
"""

import logging
import os
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

SERVICE_NAME = "compass"

_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _add_service(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def resolve_level(name: str | None) -> int:
    """Map a level name like "debug" to its stdlib value; INFO when unknown."""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str | None = None, dev_mode: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Level name; defaults to LOG_LEVEL, then INFO.
        dev_mode: Console output instead of JSON; defaults to COMPASS_DEV_MODE=1.
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL")
    if dev_mode is None:
        dev_mode = os.environ.get("COMPASS_DEV_MODE") == "1"

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _add_service,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        structlog.processors.StackInfoRenderer(),
    ]
    renderer: Processor = (
        structlog.dev.ConsoleRenderer() if dev_mode else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
