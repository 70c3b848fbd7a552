"""Structured JSON logging configuration.

Configures Python stdlib logging to emit one JSON object per line with
``severity``, ``timestamp`` and ``logger`` field names. The library itself
never calls this; applications embedding the client opt in at startup.

Usage:
    from rocketchat_client.logging_config import configure_logging
    configure_logging()
"""

import copy
import logging
import logging.config

from rocketchat_client.config import get_settings

LOGGING_CONFIG: dict = {
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
                "service": "rocketchat-client",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str | None = None) -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup. ``level`` overrides the configured
    ``log_level`` setting.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = (level or get_settings().log_level).upper()
    logging.config.dictConfig(config)
