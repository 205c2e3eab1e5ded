"""
Normalized call error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the request caller and the batch
dispatcher. Values are lowercase snake_case and are considered a stable public
contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    TRANSPORT = "transport"
    DECODE = "decode"
    EXTRACTION_FAILED = "extraction_failed"
    UNSUPPORTED_PROVIDER = "unsupported_provider"
    CONCURRENCY_FAULT = "concurrency_fault"


__all__ = ["ErrorCode"]
