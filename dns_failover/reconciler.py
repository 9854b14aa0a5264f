"""Point one managed DNS record at the selected IP.

Each record is handled on its own: a failure is reported as a ``SKIPPED``
result and never raised, so the remaining records are still processed.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from dns_failover.providers.base import DnsProvider

LOGGER = logging.getLogger(__name__)

NO_RECORDS_FOUND = "no records found"


class ReconcileStatus(str, enum.Enum):
    UPDATED = "updated"
    ALREADY_CURRENT = "already_current"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ReconcileResult:
    record_id: str
    status: ReconcileStatus
    reason: Optional[str] = None


def reconcile_record(
    provider: DnsProvider,
    dns_zone: str,
    record_id: str,
    desired_ip: str,
) -> ReconcileResult:
    """Rewrite the first record's ``data`` to ``desired_ip`` when it differs.

    Only ``data`` changes; every other field of the fetched record is sent
    back as-is. The comparison is an exact string match, so addresses must
    be configured in the form the provider stores them.
    """
    LOGGER.info("Updating DNS record %s with IP %s", record_id, desired_ip)
    try:
        records = provider.list_records(dns_zone, record_id)
        if not records:
            LOGGER.error("Error updating DNS record %s with IP %s: %s", record_id, desired_ip, NO_RECORDS_FOUND)
            return ReconcileResult(record_id, ReconcileStatus.SKIPPED, NO_RECORDS_FOUND)

        current = records[0]
        if current.data == desired_ip:
            LOGGER.info("DNS record %s already updated with IP %s", record_id, desired_ip)
            return ReconcileResult(record_id, ReconcileStatus.ALREADY_CURRENT)

        provider.update_records(
            dns_zone,
            record_id,
            [dataclasses.replace(current, data=desired_ip)],
            disallow_new_zone_creation=True,
        )
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Error updating DNS record %s with IP %s", record_id, desired_ip)
        return ReconcileResult(record_id, ReconcileStatus.SKIPPED, str(exc) or type(exc).__name__)

    LOGGER.info("DNS record %s updated with IP %s (was %s)", record_id, desired_ip, current.data)
    return ReconcileResult(record_id, ReconcileStatus.UPDATED)


# Copyright (c) Liam Suorsa
