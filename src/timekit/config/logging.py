"""structlog configuration for timekit.

Level and renderer come from :class:`TimekitSettings` (``TIMEKIT_VERBOSE``,
``TIMEKIT_LOG_JSON``) unless overridden by keyword:
- Human (default): console renderer to stderr
- JSON (log_json): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

from timekit.config.settings import TimekitSettings


def configure_logging(
    settings: TimekitSettings | None = None,
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        settings: Source of the defaults; ``TimekitSettings()`` (env vars)
            when omitted.
        verbose: Enable DEBUG-level output for ``timekit``. When False,
            only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    if settings is None:
        settings = TimekitSettings()
    if verbose is None:
        verbose = settings.verbose
    if log_json is None:
        log_json = settings.log_json

    timekit_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("timekit").setLevel(timekit_level)
