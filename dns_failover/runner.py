"""One failover pass: select a healthy IP, then reconcile every record."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from dns_failover.health import build_probe
from dns_failover.logging import ensure_run_id
from dns_failover.providers.base import DnsProvider
from dns_failover.reconciler import ReconcileResult, ReconcileStatus, reconcile_record
from dns_failover.selector import select_healthy
from dns_failover.settings import FailoverSettings

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    selected_ip: Optional[str]
    results: tuple[ReconcileResult, ...] = field(default_factory=tuple)

    @property
    def healthy_ip_found(self) -> bool:
        return self.selected_ip is not None

    def _with_status(self, status: ReconcileStatus) -> list[ReconcileResult]:
        return [result for result in self.results if result.status is status]

    @property
    def updated(self) -> list[ReconcileResult]:
        return self._with_status(ReconcileStatus.UPDATED)

    @property
    def already_current(self) -> list[ReconcileResult]:
        return self._with_status(ReconcileStatus.ALREADY_CURRENT)

    @property
    def skipped(self) -> list[ReconcileResult]:
        return self._with_status(ReconcileStatus.SKIPPED)


def run_failover(
    settings: FailoverSettings,
    provider: DnsProvider,
    probe: Optional[Callable[[str], bool]] = None,
) -> RunSummary:
    """Run a single pass and report what happened to each record.

    Finding no healthy candidate is a normal outcome: nothing is touched and
    the summary has ``selected_ip=None``.
    """
    run_id = ensure_run_id()
    LOGGER.debug("Starting failover run %s for zone %s", run_id, settings.dns_zone)

    if probe is None:
        probe = build_probe(settings.health_check_port, settings.health_check_timeout)

    selected_ip = select_healthy(settings.ips, probe)
    if not selected_ip:
        LOGGER.error("No healthy IP found")
        return RunSummary(selected_ip=None)

    results = tuple(
        reconcile_record(provider, settings.dns_zone, record_id, selected_ip)
        for record_id in settings.records
    )
    summary = RunSummary(selected_ip=selected_ip, results=results)

    LOGGER.info(
        "DNS records updated (ip=%s updated=%d already_current=%d skipped=%d)",
        selected_ip,
        len(summary.updated),
        len(summary.already_current),
        len(summary.skipped),
    )
    return summary


# Copyright (c) Liam Suorsa
