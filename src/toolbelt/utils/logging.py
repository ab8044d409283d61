"""Structured logging configuration using structlog.

Provides correlation fields for tracing navigation work across loop
callbacks and configurable output formats (JSON for production, colored
console for development).
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from toolbelt.config import resolve_log_level, settings

# Context variables for correlation fields
_screen: ContextVar[str | None] = ContextVar("screen", default=None)
_transition: ContextVar[str | None] = ContextVar("transition", default=None)


def set_correlation_context(
    screen: str | None = None,
    transition: str | None = None,
) -> None:
    """Set correlation fields for the current context.

    Args:
        screen: Title of the screen the work is acting on.
        transition: Identifier of the in-flight transition, if any.
    """
    if screen is not None:
        _screen.set(screen)
    if transition is not None:
        _transition.set(transition)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _screen.set(None)
    _transition.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation fields to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    screen = _screen.get()
    transition = _transition.get()

    if screen is not None:
        event_dict["screen"] = screen
    if transition is not None:
        event_dict["transition"] = transition

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.

    Raises:
        ConfigError: If `level` does not name a logging level.
    """
    numeric_level = resolve_log_level(level or settings.LOG_LEVEL)
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
