"""Logging helpers shared by the failover runner and CLI."""

from dns_failover.logging.bootstrap import bootstrap_logging, build_formatter, resolve_log_level
from dns_failover.logging.context import ensure_run_id, get_run_id, set_run_id
from dns_failover.logging.formatters import JsonFormatter, TextFormatter
from dns_failover.logging.logging_utils import MASK_PLACEHOLDER, mask_secret

__all__ = [
    "MASK_PLACEHOLDER",
    "JsonFormatter",
    "TextFormatter",
    "bootstrap_logging",
    "build_formatter",
    "ensure_run_id",
    "get_run_id",
    "mask_secret",
    "resolve_log_level",
    "set_run_id",
]


# Copyright (c) Liam Suorsa
