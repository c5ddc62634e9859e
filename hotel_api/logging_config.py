"""
Logging setup for the booking API.

Plain text lines locally; JSON lines when LOG_JSON is enabled so a log
aggregator can index the fields.

Usage:
    from hotel_api.logging_config import setup_logging

    setup_logging()  # once at startup
    logger = logging.getLogger(__name__)
    logger.info("Booking created", extra={"booking_id": booking.id})
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Union


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in ("booking_id", "status"):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(level: Union[int, str] = logging.INFO, json_format: bool = False) -> None:
    """
    Configure the root logger with a single stdout handler.

    Args:
        level: Logging level, as a number or a name such as "INFO"
        json_format: Emit JSON lines instead of plain text
    """
    handler = logging.StreamHandler(sys.stdout)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        ))

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Access logs are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
