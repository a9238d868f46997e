"""Central logging configuration for the classifier API and CLI."""

from __future__ import annotations

import logging
import logging.config
from typing import Optional

from kennedy.config import get_settings


_CONFIGURED = False

_ROUTED_LOGGERS = ("kennedy", "uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(default_level: Optional[str] = None) -> None:
    """Send all application logs to stdout with a single formatter."""

    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (default_level or get_settings().log_level).upper()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                }
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {
                "level": level_name,
                "handlers": ["stdout"],
            },
            "loggers": {
                name: {"level": level_name, "handlers": ["stdout"], "propagate": False}
                for name in _ROUTED_LOGGERS
            },
        }
    )

    _CONFIGURED = True
