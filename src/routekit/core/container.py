"""Composition root for ambient services.

Adapter selection is centralized here:
- development: console renderer (human-readable)
- testing/ci/production: JSON renderer

Usage:
    from routekit.core.container import configure_logging

    configure_logging()  # reads get_settings()
"""

from routekit.core.config import Settings, get_settings
from routekit.core.enums import Environment
from routekit.infrastructure.logging import configure_console_logging


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for the current environment.

    Args:
        settings: Settings to read; defaults to the cached get_settings().
    """
    settings = settings or get_settings()
    use_json = settings.environment != Environment.DEVELOPMENT
    configure_console_logging(use_json=use_json, level=settings.log_level)
