"""Shared logging utilities for the blog application."""

import logging

import common.settings


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(level: str | None = None) -> None:
    """Configure root log level and suppress health checks in uvicorn access logs.

    The level defaults to common.settings.LOG_LEVEL.
    """
    logging.basicConfig(
        level=level or common.settings.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logging.getLogger('uvicorn.access').addFilter(HealthCheckFilter())
