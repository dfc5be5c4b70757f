"""Structured logging setup for the library and the CLI.

Library modules log through ``get_logger``, which wraps a standard
library logger. Until an application configures logging, the stdlib
default level (WARNING) keeps debug and info events silent, so ranking
calls never write to the host program's streams.
"""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog


if TYPE_CHECKING:
    from matchsorter.settings import AppSettings


def _select_renderer(json_format: bool, output: TextIO) -> structlog.types.Processor:
    if json_format:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=output.isatty())


def configure_logging(
    level: int = logging.INFO,
    output: TextIO | None = None,
    json_format: bool = True,
) -> None:
    """Route structlog and stdlib logging to one stream.

    Args:
        level: Minimum level to emit (default: INFO).
        output: Destination stream; stderr when omitted.
        json_format: Render JSON lines instead of console output.
    """
    stream = output if output is not None else sys.stderr

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _select_renderer(json_format, stream),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers are module globals; caching would pin the first config.
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=stream, level=level, force=True)


def configure_from_settings(
    settings: "AppSettings",
    verbose: bool = False,
    output: TextIO | None = None,
) -> None:
    """Configure logging from environment settings.

    Args:
        settings: Loaded application settings.
        verbose: Force DEBUG regardless of the configured level.
        output: Destination stream; stderr when omitted.
    """
    level = logging.DEBUG if verbose else settings.log_level_value
    configure_logging(level=level, output=output, json_format=settings.log_json)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger backed by a stdlib logger.

    Args:
        name: Optional logger name, usually the module's ``__name__``.

    Returns:
        Bound logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name)
    )
    return logger
