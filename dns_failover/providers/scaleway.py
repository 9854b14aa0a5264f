"""Scaleway Domains & DNS implementation of :class:`DnsProvider`."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from scaleway import Client
from scaleway.domain.v2beta1 import DomainV2Beta1API, RecordChange, RecordChangeSet
from scaleway_core.api import ScalewayException

from dns_failover.logging import mask_secret
from dns_failover.providers.base import DnsProvider, ProviderError
from dns_failover.settings import FailoverSettings

LOGGER = logging.getLogger(__name__)


class ScalewayDnsProvider(DnsProvider):
    """Reads and rewrites records through ``DomainV2Beta1API``.

    Records are passed around as the SDK's own ``Record`` dataclass so every
    field Scaleway returns (ttl, priority, comment, geo/http/view configs)
    is sent back unchanged on update.
    """

    def __init__(self, api: DomainV2Beta1API) -> None:
        self._api = api

    @classmethod
    def from_settings(cls, settings: FailoverSettings) -> "ScalewayDnsProvider":
        if not settings.access_key or not settings.secret_key:
            raise ProviderError("Scaleway credentials missing (ACCESS_KEY and SECRET_KEY are required)")

        LOGGER.debug(
            "Creating Scaleway client access_key=%s project_id=%s region=%s zone=%s",
            mask_secret(settings.access_key),
            settings.project_id,
            settings.region,
            settings.zone,
        )
        client = Client(
            access_key=settings.access_key,
            secret_key=settings.secret_key,
            default_project_id=settings.project_id,
            default_region=settings.region,
            default_zone=settings.zone,
        )
        return cls(DomainV2Beta1API(client))

    def list_records(self, dns_zone: str, record_id: str) -> Sequence[Any]:
        try:
            response = self._api.list_dns_zone_records(dns_zone=dns_zone, name="", id=record_id)
        except ScalewayException as exc:
            raise ProviderError(f"Listing record {record_id} in {dns_zone} failed: {exc}") from exc
        return list(response.records or [])

    def update_records(
        self,
        dns_zone: str,
        record_id: str,
        records: Sequence[Any],
        *,
        disallow_new_zone_creation: bool = True,
    ) -> None:
        change = RecordChange(set_=RecordChangeSet(id=record_id, records=list(records)))
        try:
            self._api.update_dns_zone_records(
                dns_zone=dns_zone,
                changes=[change],
                disallow_new_zone_creation=disallow_new_zone_creation,
            )
        except ScalewayException as exc:
            raise ProviderError(f"Updating record {record_id} in {dns_zone} failed: {exc}") from exc


# Copyright (c) Liam Suorsa
