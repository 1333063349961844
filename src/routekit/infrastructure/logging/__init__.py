"""Structured logging setup backed by structlog."""

from routekit.infrastructure.logging.console_adapter import configure_console_logging

__all__ = ["configure_console_logging"]
