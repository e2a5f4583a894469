"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys

import structlog


def _select_renderer(json_output: bool | None) -> structlog.types.Processor:
    if json_output is None:
        json_output = not sys.stderr.isatty()
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_level: str = "INFO", json_output: bool | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Values bound with ``structlog.contextvars`` (e.g. ``request_id``) are
    merged into every event. When ``json_output`` is None the renderer is
    picked from whether stderr is a terminal.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _select_renderer(json_output),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = logging.getLevelName(log_level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level if isinstance(level, int) else logging.INFO,
    )
