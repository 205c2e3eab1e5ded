"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

The caller wraps most failures itself; this module covers the remaining
exceptions that escape a worker so the dispatcher can still report them with
a stable code.
"""
from __future__ import annotations

import json

import httpx

from .call_error import CallError
from .error_code import ErrorCode


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. CallError passthrough.
        2. ``httpx`` and OS-level network errors map to ``TRANSPORT``.
        3. JSON decoding errors map to ``DECODE``.
        4. Anything else means the worker itself broke: ``CONCURRENCY_FAULT``.
    """
    if isinstance(exc, CallError):
        return exc.code
    if isinstance(exc, (httpx.HTTPError, httpx.StreamError, OSError)):
        return ErrorCode.TRANSPORT
    if isinstance(exc, (json.JSONDecodeError, UnicodeDecodeError)):
        return ErrorCode.DECODE
    return ErrorCode.CONCURRENCY_FAULT


__all__ = ["classify_exception"]
