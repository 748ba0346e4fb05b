"""Logging configuration for the paytrack CLI."""

import logging
import sys
from datetime import datetime, UTC
from typing import Any

from pythonjsonlogger.json import JsonFormatter

DEFAULT_LOG_LEVEL = "WARNING"


class PaytrackJsonFormatter(JsonFormatter):
    """JSON formatter adding timestamp, level and service name."""

    def add_fields(
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "paytrack"


def setup_logging(level: str = DEFAULT_LOG_LEVEL, json_output: bool = False) -> None:
    """Configure root logging to stderr.

    Args:
        level: Log level name (e.g. "INFO")
        json_output: Emit one JSON object per line instead of plain text
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(PaytrackJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
