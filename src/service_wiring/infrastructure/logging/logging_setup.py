"""dictConfig-based logging for the composed application."""

import logging
import logging.config
import os
from typing import Any, Dict

from service_wiring.infrastructure.config.wiring_config import LoggingSettings

PACKAGE_LOGGER = "service_wiring"


def configure_logging(app_name: str, settings: LoggingSettings) -> None:
    """
    Route the package logger and the application logger to stdout, and to
    ``settings.file_path`` when one is set. The root logger is left alone.
    """
    level = settings.level.upper()
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
            "stream": "ext://sys.stdout",
        }
    }
    if settings.file_path:
        directory = os.path.dirname(settings.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": settings.file_path,
        }

    owned = {"level": level, "handlers": list(handlers), "propagate": False}
    loggers: Dict[str, Any] = {PACKAGE_LOGGER: owned, app_name: dict(owned)}
    for name, library_level in settings.library_levels.items():
        loggers[name] = {"level": library_level.upper()}

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"plain": {"format": settings.format}},
        "handlers": handlers,
        "loggers": loggers,
    })
    logging.getLogger(app_name).info(f"Logging configured for {app_name} at {level}")
