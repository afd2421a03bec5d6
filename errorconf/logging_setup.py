from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import TextIO

# Record attributes copied into the JSON line when a caller passes them via extra=.
LOG_EXTRA_FIELDS: tuple[str, ...] = ("entries", "keys", "entry_indexes", "source", "run_id")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        for key in LOG_EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def configure_logging(*, stream: TextIO | None = None, level: str | None = None) -> None:
    """Install a single JSON handler on the root logger.

    Logs go to stderr unless another stream is given, so stdout stays free
    for command output.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel((level or os.getenv("ERRORCONF_LOG_LEVEL", "INFO")).upper())
