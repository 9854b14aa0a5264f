"""Immutable run configuration read from the environment.

Everything the failover pass needs is parsed once into
:class:`FailoverSettings` before any network activity. Broken required
values raise :class:`ConfigurationError` so the process stops at startup
instead of half-way through a run.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_HEALTH_CHECK_PORT = 80
DEFAULT_HEALTH_CHECK_TIMEOUT_MS = 1000.0


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing or malformed."""


@dataclass(frozen=True)
class FailoverSettings:
    ips: tuple[str, ...]
    records: tuple[str, ...]
    dns_zone: str
    health_check_port: int = DEFAULT_HEALTH_CHECK_PORT
    health_check_timeout: float = DEFAULT_HEALTH_CHECK_TIMEOUT_MS / 1000
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    project_id: Optional[str] = None
    region: Optional[str] = None
    zone: Optional[str] = None


def _optional(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name, "").strip()
    return value or None


def parse_string_list(environ: Mapping[str, str], name: str, label: str) -> tuple[str, ...]:
    """Parse a JSON array of non-empty strings, e.g. ``IPS='["10.0.0.1"]'``."""

    raw = environ.get(name, "").strip()
    if not raw:
        raise ConfigurationError(f"No {label} provided ({name} is empty)")

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"No {label} provided ({name} is not valid JSON)") from exc

    if not isinstance(parsed, list) or not parsed:
        raise ConfigurationError(f"No {label} provided ({name} must be a non-empty JSON array)")

    values: list[str] = []
    for item in parsed:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"Invalid entry in {name}: {item!r} (expected a non-empty string)")
        values.append(item.strip())
    return tuple(values)


def parse_port(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default

    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer port, got {raw!r}") from exc

    if not 1 <= port <= 65535:
        raise ConfigurationError(f"{name} must be between 1 and 65535, got {port}")
    return port


def parse_positive_number(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        parsed = float(raw)
    except (TypeError, ValueError):
        LOGGER.warning("%s must be a positive number. Using default %s.", name, default)
        return default

    if not math.isfinite(parsed) or parsed <= 0:
        LOGGER.warning("%s must be greater than 0. Using default %s.", name, default)
        return default
    return parsed


def load_settings(environ: Optional[Mapping[str, str]] = None) -> FailoverSettings:
    """Build :class:`FailoverSettings` from ``environ`` (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ

    ips = parse_string_list(env, "IPS", "IPs")
    records = parse_string_list(env, "RECORDS", "records")

    dns_zone = _optional(env, "DNS_ZONE")
    if not dns_zone:
        raise ConfigurationError("No DNS_ZONE provided")

    timeout_ms = parse_positive_number(env, "HEALTH_CHECK_TIMEOUT_MS", DEFAULT_HEALTH_CHECK_TIMEOUT_MS)

    return FailoverSettings(
        ips=ips,
        records=records,
        dns_zone=dns_zone,
        health_check_port=parse_port(env, "HEALTH_CHECK_PORT", DEFAULT_HEALTH_CHECK_PORT),
        health_check_timeout=timeout_ms / 1000,
        access_key=_optional(env, "ACCESS_KEY"),
        secret_key=_optional(env, "SECRET_KEY"),
        project_id=_optional(env, "PROJECT_ID"),
        region=_optional(env, "REGION"),
        zone=_optional(env, "ZONE"),
    )


# Copyright (c) Liam Suorsa
