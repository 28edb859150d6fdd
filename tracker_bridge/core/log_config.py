"""structlog setup for applications embedding tracker-bridge."""

import logging
import sys

import structlog

from tracker_bridge.core.errors import TrackerBridgeError

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LogConfigError(TrackerBridgeError):
    """Raised when the requested log format or level is unknown."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to configure logging: {reason}")


def resolve_log_level(log_level: str) -> int:
    """Map a level name (debug/info/warn/warning/error) to its numeric value."""
    try:
        return _LEVELS[log_level.lower()]
    except KeyError:
        raise LogConfigError(
            f"invalid log level {log_level!r}, must be one of {sorted(_LEVELS)}"
        ) from None


def configure_structlog(log_format: str = "console", log_level: str = "info") -> None:
    """Configure structlog based on the requested format and minimum level.

    Call once at application start-up; library code only ever calls
    ``structlog.get_logger()``.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        raise LogConfigError(
            f"invalid log format {log_format!r}, must be 'console' or 'json'"
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_log_level(log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
