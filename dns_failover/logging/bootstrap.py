"""Logging setup for the one-shot CLI."""

from __future__ import annotations

import logging
import os

from dns_failover.logging.formatters import JsonFormatter, TextFormatter

PACKAGE_LOGGER = "dns_failover"

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def resolve_log_level() -> int:
    value = os.getenv("LOG_LEVEL", "").strip().upper()
    return getattr(logging, value) if value in _VALID_LOG_LEVELS else logging.INFO


def build_formatter(level: int) -> logging.Formatter:
    """Pick the formatter from ``LOG_FORMAT`` (text|json) and ``LOG_TIMEZONE`` (UTC|LOCAL)."""
    timezone_mode = os.getenv("LOG_TIMEZONE", "UTC").strip().upper()
    if timezone_mode not in {"UTC", "LOCAL"}:
        timezone_mode = "UTC"

    if os.getenv("LOG_FORMAT", "text").strip().lower() == "json":
        return JsonFormatter(timezone_mode=timezone_mode)
    return TextFormatter(timezone_mode=timezone_mode, include_location=level <= logging.DEBUG)


def bootstrap_logging() -> logging.Logger:
    """Install one console handler on the root logger and return the package logger.

    ``LOG_LEVEL=DEBUG`` also appends ``(in file:line)`` to text lines.
    """
    level = resolve_log_level()
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(level))
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return logging.getLogger(PACKAGE_LOGGER)


# Copyright (c) Liam Suorsa
