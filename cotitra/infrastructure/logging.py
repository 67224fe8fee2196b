"""Logging configuration for the API and CLI tools."""

from __future__ import annotations

import logging
from logging.config import dictConfig

from cotitra.config import Settings


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure the root logger from settings and return the app logger."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": settings.log_format}},
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                }
            },
            "root": {"handlers": ["default"], "level": level},
        }
    )
    return logging.getLogger("cotitra")
