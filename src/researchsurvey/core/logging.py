"""Logging setup driven by LoggingSettings."""

import json
import logging
from datetime import datetime, timezone

from .config import LoggingSettings

ROOT_LOGGER = "researchsurvey"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(config: LoggingSettings) -> logging.Logger:
    """Attach handlers to the package logger; safe to call repeatedly."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(config.level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if config.format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    handlers = [logging.StreamHandler()]
    if config.file_path:
        handlers.append(logging.FileHandler(config.file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger
