"""Structured logging for the odds engine.

Usage:
    from odds_engine.monitoring import configure_logging, get_logger

    configure_logging("production")
    log = get_logger(__name__)
"""

from odds_engine.monitoring.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
]
