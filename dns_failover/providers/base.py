"""Provider-neutral DNS record types and the provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence


class ProviderError(RuntimeError):
    """A DNS provider call failed."""


@dataclass(frozen=True)
class DnsRecord:
    id: str
    name: str
    type: str
    data: str
    ttl: int = 3600
    priority: int = 0
    comment: Optional[str] = None


class DnsProvider(ABC):
    """The two DNS operations a failover pass relies on.

    Records are dataclass instances that expose at least a ``data`` attribute.
    Implementations may return their SDK's own record type so that fields the
    failover logic does not know about survive an update untouched.
    """

    @abstractmethod
    def list_records(self, dns_zone: str, record_id: str) -> Sequence[Any]:
        """Return the records stored under ``record_id`` in ``dns_zone``."""

    @abstractmethod
    def update_records(
        self,
        dns_zone: str,
        record_id: str,
        records: Sequence[Any],
        *,
        disallow_new_zone_creation: bool = True,
    ) -> None:
        """Replace the records stored under ``record_id`` with ``records``.

        With ``disallow_new_zone_creation`` the call must fail instead of
        creating ``dns_zone`` when it does not exist.
        """


# Copyright (c) Liam Suorsa
