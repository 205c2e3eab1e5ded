"""Unit tests for the shared httpx client.

Covers:
- Repeated calls return the same instance.
- Concurrent first callers create exactly one client.
- Closing forgets the instance so the next call builds a fresh one.
"""
from __future__ import annotations

import threading
import time

import httpx

from llmblast.base.http import client as http_client
from llmblast.base.http import close_http_client, get_http_client


def test_same_instance_on_repeated_calls():
    c1 = get_http_client()
    c2 = get_http_client()
    assert c1 is c2, "Expected the shared client to be reused"


def test_concurrent_first_use_creates_one_client(monkeypatch):
    built = []

    def slow_build() -> httpx.Client:
        time.sleep(0.05)
        c = httpx.Client()
        built.append(c)
        return c

    monkeypatch.setattr(http_client, "_build_client", slow_build)
    barrier = threading.Barrier(16)
    seen = []
    lock = threading.Lock()

    def worker():
        barrier.wait()
        c = get_http_client()
        with lock:
            seen.append(c)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(built) == 1
    assert len(seen) == 16
    assert all(c is built[0] for c in seen)


def test_close_resets_the_shared_client():
    c1 = get_http_client()
    close_http_client()
    assert c1.is_closed
    c2 = get_http_client()
    assert c2 is not c1
    assert not c2.is_closed


def test_close_without_client_is_a_no_op():
    close_http_client()
    close_http_client()


def test_no_timeout_by_default(monkeypatch):
    monkeypatch.delenv("LLMBLAST_HTTP_TIMEOUT_SECONDS", raising=False)
    c = get_http_client()
    assert c.timeout.read is None
    assert c.timeout.connect is None


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("LLMBLAST_HTTP_TIMEOUT_SECONDS", "12.5")
    c = get_http_client()
    assert c.timeout.read == 12.5
