"""structlog configuration for retry_after.

The library modules log through stdlib ``logging.getLogger(__name__)``;
this routes those records through structlog. Two output modes:
- Human (default): console-rendered output to stderr
- JSON (``log_json``): structured JSON lines to stderr

Libraries normally leave handler setup to the application. Call this
only from an entry point or test that owns the process logging.
"""

from __future__ import annotations

import logging
import sys

import structlog

from retry_after.config.settings import get_settings


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
            Defaults to ``RetryAfterSettings.verbose``.
        log_json: Use JSON renderer instead of console renderer.
            Defaults to ``RetryAfterSettings.log_json``.
    """
    settings = get_settings()
    if verbose is None:
        verbose = settings.verbose
    if log_json is None:
        log_json = settings.log_json

    pkg_level = logging.DEBUG if verbose else logging.WARNING

    # The codec logs through stdlib; these stamp its records and structlog's alike.
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
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

    logging.getLogger("retry_after").setLevel(pkg_level)
