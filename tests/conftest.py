import os
import socket
import sys
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from dns_failover.providers.base import DnsProvider, DnsRecord, ProviderError  # noqa: E402


class FakeProvider(DnsProvider):
    """In-memory provider recording every call."""

    def __init__(self, records=None, list_errors=None, update_errors=None):
        self.records = {key: list(value) for key, value in (records or {}).items()}
        self.list_errors = dict(list_errors or {})
        self.update_errors = dict(update_errors or {})
        self.list_calls = []
        self.update_calls = []

    def list_records(self, dns_zone, record_id):
        self.list_calls.append((dns_zone, record_id))
        if record_id in self.list_errors:
            raise self.list_errors[record_id]
        return list(self.records.get(record_id, []))

    def update_records(self, dns_zone, record_id, records, *, disallow_new_zone_creation=True):
        self.update_calls.append(
            {
                "dns_zone": dns_zone,
                "record_id": record_id,
                "records": list(records),
                "disallow_new_zone_creation": disallow_new_zone_creation,
            }
        )
        if record_id in self.update_errors:
            raise self.update_errors[record_id]
        self.records[record_id] = list(records)


def make_record(record_id="rec-1", data="10.0.0.1", **kwargs):
    fields = {"name": "www", "type": "A", "ttl": 300}
    fields.update(kwargs)
    return DnsRecord(id=record_id, data=data, **fields)


@pytest.fixture
def fake_provider_factory():
    return FakeProvider


@pytest.fixture
def provider_error():
    return ProviderError


class _HealthHandler(BaseHTTPRequestHandler):
    def do_GET(self):  # noqa: N802
        status, reason = self.server.reply
        self.send_response(status, reason)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def log_message(self, format, *args):  # noqa: A002
        return


@pytest.fixture
def health_server():
    """Local HTTP server; set ``server.reply = (status, reason)`` per test."""
    server = HTTPServer(("127.0.0.1", 0), _HealthHandler)
    server.reply = (200, "OK")
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def silent_port():
    """A port that accepts TCP connections but never answers."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    try:
        yield sock.getsockname()[1]
    finally:
        sock.close()


@pytest.fixture
def closed_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture
def slow_headers_port():
    """Sends ``200 OK`` at once, then one header line every 0.1s for 2s."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(8)
    stop = threading.Event()

    def serve():
        try:
            conn, _ = listener.accept()
        except OSError:
            return
        with conn:
            try:
                conn.recv(4096)
                conn.sendall(b"HTTP/1.1 200 OK\r\n")
                for index in range(20):
                    if stop.wait(0.1):
                        return
                    conn.sendall(f"X-Slow-{index}: 1\r\n".encode("ascii"))
                conn.sendall(b"Content-Length: 0\r\n\r\n")
            except OSError:
                return

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    try:
        yield listener.getsockname()[1]
    finally:
        stop.set()
        listener.close()
        thread.join(timeout=5)
