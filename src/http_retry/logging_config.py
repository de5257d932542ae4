"""Structured logging for the retry layer using structlog.

Attempt outcomes are logged by the engine through structlog; this module
routes them through the standard library root logger with one renderer:
JSON lines in production, colored console lines anywhere else.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, WrappedLogger

from http_retry import __version__
from http_retry.config import settings

# The transport logs every request at INFO; only the attempt log is kept
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the package name and version."""
    event_dict["app"] = "http-retry"
    event_dict["app_version"] = __version__
    return event_dict


def _select_renderer(is_production: bool) -> structlog.types.Processor:
    if is_production:
        return structlog.processors.JSONRenderer()
    # ConsoleRenderer formats exc_info itself
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    log_level: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """Configure structlog for the retry layer.

    Args:
        log_level: Logging level name (default: settings.LOG_LEVEL)
        environment: "production" for JSON output, anything else for
            console output (default: settings.ENVIRONMENT)
    """
    log_level = log_level or settings.LOG_LEVEL
    environment = environment or settings.ENVIRONMENT
    level = getattr(logging, log_level.upper(), logging.INFO)
    is_production = environment.lower() == "production"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]
    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_select_renderer(is_production),
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).debug(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )
