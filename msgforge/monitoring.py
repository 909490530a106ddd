"""
Logging configuration for applications embedding msgforge.

msgforge modules only obtain loggers; this module configures handlers,
either with the plain text format or as one JSON object per line.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SERVICE_NAME = "msgforge"


class JsonFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def __init__(self, service_name: str = SERVICE_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_record.update(record.extra_fields)

        return json.dumps(log_record, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    logger_name: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging.

    Args:
        level: Level name such as "DEBUG" or "INFO"
        json_format: Emit JSON lines instead of plain text
        logger_name: Logger to configure (root logger if None)

    Returns:
        The configured logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT))

    target = logging.getLogger(logger_name)
    target.handlers = [handler]
    target.setLevel(log_level)
    return target
