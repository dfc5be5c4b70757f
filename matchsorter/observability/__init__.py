"""Observability module for logging."""

from matchsorter.observability.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
