"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a ContentLogger helper for admin mutations.
"""

import json
import logging
import sys
from datetime import datetime, timezone

# Optional structured fields copied from LogRecord extras
EXTRA_FIELDS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "resource",
    "resource_id",
    "error_type",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(json_format: bool = True, level: int | str = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class ContentLogger:
    """Logger for admin-side content changes with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("content")

    def created(self, resource: str, resource_id: str) -> None:
        self.logger.info(
            f"{resource} created",
            extra={"resource": resource, "resource_id": resource_id},
        )

    def updated(self, resource: str, resource_id: str) -> None:
        self.logger.info(
            f"{resource} updated",
            extra={"resource": resource, "resource_id": resource_id},
        )

    def deleted(self, resource: str, resource_id: str) -> None:
        self.logger.info(
            f"{resource} deleted",
            extra={"resource": resource, "resource_id": resource_id},
        )

    def login_failed(self) -> None:
        self.logger.warning("Admin login rejected", extra={"resource": "session"})


# Global content logger instance
content_logger = ContentLogger()
