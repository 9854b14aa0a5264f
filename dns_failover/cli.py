#!/usr/bin/env python3
"""Run one DNS failover pass against Scaleway.

Meant to be triggered by cron or a systemd timer. Exit code 0 means the
pass completed, including when no backend was healthy or a single record
could not be updated. Exit code 1 is reserved for configuration errors and
failures to start (e.g. missing credentials).
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from dns_failover.config_loader import load_environment
from dns_failover.health import build_probe
from dns_failover.logging import bootstrap_logging, ensure_run_id
from dns_failover.runner import run_failover
from dns_failover.selector import select_healthy
from dns_failover.settings import ConfigurationError, load_settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dns-failover",
        description="Point Scaleway DNS records at the first healthy IP.",
    )
    parser.add_argument(
        "--env-file",
        help="Extra .env file to load before reading the environment.",
    )
    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Only probe the IPs and report the healthy one; do not touch DNS.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    load_environment(args.env_file)
    logger = bootstrap_logging()
    ensure_run_id()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 1

    if args.check_only:
        probe = build_probe(settings.health_check_port, settings.health_check_timeout)
        healthy_ip = select_healthy(settings.ips, probe)
        if healthy_ip:
            logger.info("Healthy IP: %s", healthy_ip)
        else:
            logger.error("No healthy IP found")
        return 0

    from dns_failover.providers.scaleway import ScalewayDnsProvider

    try:
        provider = ScalewayDnsProvider.from_settings(settings)
    except Exception:  # noqa: BLE001
        logger.exception("Could not create the Scaleway DNS client")
        return 1

    summary = run_failover(settings, provider)
    for result in summary.skipped:
        logger.warning("Record %s skipped: %s", result.record_id, result.reason)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


# Copyright (c) Liam Suorsa
