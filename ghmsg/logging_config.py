"""Logging configuration.

JSON records on stdout by default (``LOG_FORMAT=json``), with ``severity``,
``timestamp`` and ``logger`` field names. ``LOG_FORMAT=plain`` switches to a
single-line text format for local runs.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Optional

from ghmsg.config import Settings, settings as default_settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_logging_config(cfg: Settings) -> dict[str, Any]:
    formatter = "json" if cfg.log_format == "json" else "plain"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
                "rename_fields": {
                    "levelname": "severity",
                    "asctime": "timestamp",
                    "name": "logger",
                },
                "static_fields": {
                    "service": cfg.service_name,
                },
            },
            "plain": {
                "format": PLAIN_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": cfg.log_level,
            "handlers": ["console"],
        },
    }


def configure_logging(cfg: Optional[Settings] = None) -> None:
    """Apply the logging configuration; call once at application startup."""
    logging.config.dictConfig(build_logging_config(cfg or default_settings))
