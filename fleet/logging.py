# fleet/logging.py
"""Structured JSON logging.

Every record goes to stdout as one JSON object so the service can be read by
the same tooling in development and in containers.
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from fleet.config import get_settings


class FleetJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = record.created
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Install the JSON handler on the root logger.

    Calling it again replaces the handler instead of stacking a second one.
    """
    level = (level or get_settings().LOG_LEVEL).upper()

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level))
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(FleetJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)

    logger.info("Logging configured", extra={"log_level": level})
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
