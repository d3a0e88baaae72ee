from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from beerstock.core.config import settings

_RESERVED_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``extra`` fields are flattened into the payload."""

    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self.service = service or settings.PROJECT_NAME

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in payload:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(level_name: str | None = None) -> None:
    """Apply centralized logging configuration."""
    level = getattr(logging, (level_name or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JsonFormatter}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                }
            },
            "root": {"handlers": ["stdout"], "level": level},
            "loggers": {
                "beerstock": {"level": level},
                "uvicorn.access": {"handlers": ["stdout"], "level": level, "propagate": False},
                "sqlalchemy.engine": {"level": logging.WARNING},
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
