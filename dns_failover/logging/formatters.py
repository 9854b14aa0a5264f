# Logging formatters with env-controlled format and timezone.

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from dns_failover.logging.context import get_run_id

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s run_id=%(run_id)s %(message)s"
DEBUG_TEXT_FORMAT = TEXT_FORMAT + " (in %(filename)s:%(lineno)d)"


class BaseTimezoneFormatter(logging.Formatter):
    def __init__(self, fmt: str | None = None, timezone_mode: str = "UTC") -> None:
        super().__init__(fmt=fmt)
        self.timezone_mode = timezone_mode.upper().strip() or "UTC"

    def _resolve_timestamp(self, created: float) -> datetime:
        if self.timezone_mode == "LOCAL":
            return datetime.fromtimestamp(created).astimezone()
        return datetime.fromtimestamp(created, tz=timezone.utc)

    def format_time_iso(self, created: float) -> str:
        return self._resolve_timestamp(created).isoformat(timespec="seconds")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        dt = self._resolve_timestamp(record.created)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.isoformat(timespec="seconds")


class TextFormatter(BaseTimezoneFormatter):
    """Plain text lines; ``include_location`` appends ``(in file:line)``."""

    def __init__(self, timezone_mode: str = "UTC", include_location: bool = False) -> None:
        super().__init__(
            fmt=DEBUG_TEXT_FORMAT if include_location else TEXT_FORMAT,
            timezone_mode=timezone_mode,
        )

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "run_id"):
            record.run_id = get_run_id() or "-"
        return super().format(record)


class JsonFormatter(BaseTimezoneFormatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.format_time_iso(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": getattr(record, "run_id", None) or get_run_id(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# Copyright (c) Liam Suorsa
