"""Structlog configuration for skyprofile events."""

import logging

import structlog

from skyprofile.config import LogFormat, ProfileConfig

# Processors shared by both output formats
BASE_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def renderers(log_format: LogFormat) -> list:
    """Final processors that turn an event dict into one output line."""
    if log_format == LogFormat.JSON:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=False)]


def configure_logging(config: ProfileConfig | None = None) -> None:
    """
    Route skyprofile events through structlog at the configured level and format.

    Loggers are not cached, so calling this again takes effect for every
    later event.

    Args:
        config: ProfileConfig instance, uses defaults (and env vars) if None
    """
    config = config or ProfileConfig()
    level = logging.getLevelNamesMapping()[config.log_level]

    structlog.configure(
        processors=[*BASE_PROCESSORS, *renderers(config.log_format)],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """
    Logger for one skyprofile component.

    Binding resolves the current structlog configuration, so call this where
    the event is emitted rather than at import time.
    """
    return structlog.get_logger().bind(logger_name=name)
