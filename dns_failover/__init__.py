"""Active-passive DNS failover: pick the first healthy IP and repoint records at it."""

from dns_failover.health import build_probe, check_health
from dns_failover.reconciler import ReconcileResult, ReconcileStatus, reconcile_record
from dns_failover.runner import RunSummary, run_failover
from dns_failover.selector import select_healthy
from dns_failover.settings import ConfigurationError, FailoverSettings, load_settings

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "FailoverSettings",
    "ReconcileResult",
    "ReconcileStatus",
    "RunSummary",
    "build_probe",
    "check_health",
    "load_settings",
    "reconcile_record",
    "run_failover",
    "select_healthy",
]


# Copyright (c) Liam Suorsa
