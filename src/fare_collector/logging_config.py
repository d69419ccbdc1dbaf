"""Logging configuration helpers."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from fare_collector.config import get_settings


def get_logging_config(level: str | None = None) -> dict[str, Any]:
    """
    Get logging configuration based on settings.

    Records go to stdout, so the console handler writes to stderr.

    Args:
        level: Optional level overriding the one from settings

    Returns:
        Logging configuration dictionary
    """
    if level is None:
        level = get_settings().log_level
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | route=%(route)s | %(message)s",
            },
        },
        "filters": {
            "route": {
                "()": "fare_collector.logging_config.RouteFilter",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "standard",
                "filters": ["route"],
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
        "loggers": {
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }


class RouteFilter(logging.Filter):
    """Ensure `route` key is always available in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "route"):
            record.route = "-"
        return True


def configure_logging(config: dict[str, Any] | None = None) -> None:
    """
    Apply logging configuration once.

    Args:
        config: Optional logging configuration dict. If None, uses config from settings.
    """
    if config is None:
        config = get_logging_config()
    logging.config.dictConfig(config)
