"""Console logging adapter.

Configures structlog to write structured logs to stdout.
- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

Modules log through ``structlog.get_logger(__name__)``; this adapter only owns
the processor chain and level filtering.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_console_logging(*, use_json: bool = False, level: str = "INFO") -> None:
    """Configure structlog for console output.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (e.g. "INFO", "DEBUG").
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )
