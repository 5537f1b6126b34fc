"""Shared logging configuration for Docket Desk."""

import logging
import json
from datetime import datetime, timezone
from typing import Union


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for better parsing."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    name: str,
    level: Union[int, str] = logging.INFO,
    json_format: bool = True,
) -> logging.Logger:
    """Set up structured logging.

    Calling it twice for the same logger replaces the handler instead of
    stacking a second one.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if getattr(existing, "_docket_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._docket_handler = True
    logger.addHandler(handler)

    return logger
