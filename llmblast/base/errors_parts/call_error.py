"""
Structured call error exception type.

Wraps transport, decoding and extraction failures with a normalized
`ErrorCode` so a batch can surface a single descriptive error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class CallError(Exception):
    """Represents a failed LLM call with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider kind where the error originated (e.g., ``"openai_chat"``).
        model: Optional model name associated with the failure.
        retryable: Always ``False``; nothing in the package retries.
        status_code: HTTP status of the response, when one was received.
        index: Position of the failing prompt inside a batch, when known.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    status_code: Optional[int] = None
    index: Optional[int] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        where = f" [prompt {self.index}]" if self.index is not None else ""
        return f"{self.provider}:{self.model or '-'} {self.code.value}{where}: {self.message}"


__all__ = ["CallError"]
