"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for the client.

    Sets up structlog with JSON output and standard processors for
    timestamps, log levels, and context binding.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: True).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )

    # httpx logs every request at INFO through the standard library
    logging.basicConfig(format="%(message)s", stream=output, level=level)
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
