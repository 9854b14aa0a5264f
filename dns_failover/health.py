"""HTTP liveness check for a single candidate address."""

from __future__ import annotations

import ipaddress
import logging
import socket
import threading
import time
from http.client import HTTPConnection, HTTPException
from typing import Callable

LOGGER = logging.getLogger(__name__)

HEALTHY_STATUS = 200
HEALTHY_REASON = "OK"


def build_health_url(candidate: str, port: int) -> str:
    """Return ``http://candidate:port/``, bracketing IPv6 literals."""
    host = candidate.strip()
    try:
        if ipaddress.ip_address(host).version == 6:
            host = f"[{host}]"
    except ValueError:
        pass
    return f"http://{host}:{port}/"


def _abort(connection: HTTPConnection, expired: threading.Event) -> None:
    # Unblocks a recv() waiting in the checking thread.
    expired.set()
    sock = connection.sock
    if sock is None:
        return
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass


def check_health(candidate: str, port: int = 80, timeout_seconds: float = 1.0) -> bool:
    """Return True only if ``candidate`` answers ``GET /`` with ``200 OK``.

    ``timeout_seconds`` is a deadline for the whole request: once it passes
    the connection is shut down and the verdict is False, even if the
    server is still sending headers. The request goes straight to the
    candidate; proxy environment variables are ignored. Never raises.
    """
    LOGGER.info("Checking health of %s", candidate)
    deadline = time.monotonic() + timeout_seconds
    try:
        connection = HTTPConnection(candidate.strip(), port, timeout=timeout_seconds)
    except (HTTPException, ValueError) as exc:
        LOGGER.debug("Cannot check %r on port %s: %s", candidate, port, exc)
        return False

    expired = threading.Event()
    watchdog = threading.Timer(timeout_seconds, _abort, args=(connection, expired))
    watchdog.daemon = True
    watchdog.start()
    try:
        connection.request("GET", "/", headers={"User-Agent": "dns-failover"})
        response = connection.getresponse()
        status, reason = response.status, response.reason
    except (HTTPException, OSError, ValueError) as exc:
        LOGGER.debug("Health check of %s failed: %s", build_health_url(candidate, port), exc)
        return False
    finally:
        watchdog.cancel()
        connection.close()

    if expired.is_set() or time.monotonic() > deadline:
        LOGGER.debug("%s answered after the %.3fs deadline", candidate, timeout_seconds)
        return False
    if status != HEALTHY_STATUS or reason != HEALTHY_REASON:
        LOGGER.debug("%s answered HTTP %s %r", candidate, status, reason)
        return False
    return True


def build_probe(port: int, timeout_seconds: float) -> Callable[[str], bool]:
    """Bind port and timeout so the selector only has to pass the candidate."""

    def probe(candidate: str) -> bool:
        return check_health(candidate, port=port, timeout_seconds=timeout_seconds)

    return probe


# Copyright (c) Liam Suorsa
