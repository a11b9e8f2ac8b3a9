"""Structured logging configuration using structlog.

Two output modes:
- JSON output in production mode (one event per line, machine parseable)
- Colored console output in development mode (human-readable)

Usage:
    from odds_engine.monitoring import configure_logging, get_logger

    # Configure once at startup
    configure_logging("production")  # or "development"

    log = get_logger(__name__)
    log.debug("odds_parse_fallback", raw="abc", reason="not_numeric")
    log.info("preference_updated", notation="fractional")
"""

import logging
import sys

import structlog

LOG_MODES = ("development", "production")


def configure_logging(mode: str = "development", level: int = logging.INFO) -> None:
    """Configure structlog for the application.

    Args:
        mode: Either "production" (JSON output) or "development" (colored console)
        level: Minimum stdlib log level

    Raises:
        ValueError: If mode is not one of LOG_MODES
    """
    if mode not in LOG_MODES:
        raise ValueError(f"Unknown log mode: '{mode}'. Supported modes: {', '.join(LOG_MODES)}")

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if mode == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route stdlib logging through the same stream
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually the caller's __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
