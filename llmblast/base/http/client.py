"""Shared HTTP transport.

Purpose:
    Hold the single process-wide ``httpx.Client`` reused by every call so
    connection setup is amortized through keep-alive pooling.

Lifecycle:
    - Created lazily on the first :func:`get_http_client` call. Creation is
      guarded by a re-entrant lock with a double check, so concurrent first
      callers all receive the same instance.
    - Never closed by the dispatch path. :func:`close_http_client` exists for
      tests and is registered with ``atexit``; a later call creates a new
      client.

Configuration:
    - Idle connections expire after ``HTTP_POOL_IDLE_TIMEOUT_SECONDS``.
    - No connection cap, so a batch is never throttled by the pool.
    - No request timeout unless ``LLMBLAST_HTTP_TIMEOUT_SECONDS`` is set.
"""

from __future__ import annotations

import atexit
import threading
from typing import Optional

import httpx

from ...config import get_http_timeout
from ...config.defaults import HTTP_POOL_IDLE_TIMEOUT_SECONDS
from ..logging import get_logger, log_event

_CLIENT: Optional[httpx.Client] = None
_LOCK = threading.RLock()
_logger = get_logger("llmblast.http")


def _build_client() -> httpx.Client:
    limits = httpx.Limits(
        max_connections=None,
        max_keepalive_connections=None,
        keepalive_expiry=HTTP_POOL_IDLE_TIMEOUT_SECONDS,
    )
    return httpx.Client(timeout=get_http_timeout(), limits=limits)


def get_http_client() -> httpx.Client:
    """Return the shared ``httpx.Client``, creating it on first use.

    Thread-safety:
        Safe for concurrent use; at most one client exists at a time.
    """
    global _CLIENT
    client = _CLIENT
    if client is not None:
        return client

    with _LOCK:
        if _CLIENT is None:
            _CLIENT = _build_client()
            log_event(_logger, "http.client_created", keepalive_expiry=HTTP_POOL_IDLE_TIMEOUT_SECONDS)
        return _CLIENT


def close_http_client() -> None:
    """Close and forget the shared client, if one exists."""
    global _CLIENT
    with _LOCK:
        client, _CLIENT = _CLIENT, None
    if client is not None:
        client.close()


atexit.register(close_http_client)

__all__ = ["get_http_client", "close_http_client"]
