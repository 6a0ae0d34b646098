"""structlog setup for applications embedding the filter.

The filter only emits through ``structlog.get_logger()``; nothing is
configured on import. Applications call :func:`setup_logging` once so the
``logging`` block of :class:`~headingid.config.Settings` takes effect.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

from headingid.config import load_settings

if TYPE_CHECKING:
    from headingid.config import Settings


def setup_logging(settings: Settings | None = None, *, stream: TextIO | None = None) -> None:
    """Route headingid's structlog events to *stream* (stderr by default).

    ``settings.logging.level`` drops everything below it, so the default
    WARNING keeps ``unterminated_heading`` and hides per-heading debug events.
    """
    settings = settings or load_settings()
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.logging.format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Rendered HTML usually goes to stdout; keep log lines off it
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=True,
    )
