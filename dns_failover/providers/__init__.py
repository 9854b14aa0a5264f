"""DNS provider boundary.

The Scaleway implementation lives in :mod:`dns_failover.providers.scaleway`
and is imported lazily so the core logic does not need the SDK.
"""

from dns_failover.providers.base import DnsProvider, DnsRecord, ProviderError

__all__ = ["DnsProvider", "DnsRecord", "ProviderError"]


# Copyright (c) Liam Suorsa
