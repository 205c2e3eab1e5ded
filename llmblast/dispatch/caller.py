"""Single-request caller.

Purpose:
    Send one prompt to one provider and return the generated text.

Steps:
    1. ``build_request`` picks the request builder for the descriptor variant.
       Unsupported variants fail here, before the transport is touched.
    2. One POST goes out over the injected client or the shared transport.
    3. The body is decoded as JSON and the provider's text path extracted.

Failure semantics:
    Every failure is a :class:`CallError`; the codes are ``TRANSPORT``,
    ``DECODE``, ``EXTRACTION_FAILED`` and ``UNSUPPORTED_PROVIDER``. The HTTP
    status is not inspected: an error body fails extraction and the status is
    attached to the error. Nothing is retried.
"""

from __future__ import annotations

import json
import logging
from time import perf_counter
from typing import Any, Optional

import httpx

from ..anthropic import helpers as anthropic_helpers
from ..base.dto import PreparedRequest
from ..base.errors import CallError, ErrorCode
from ..base.http import get_http_client
from ..base.logging import get_logger, log_event
from ..base.models import AnthropicMessages, OpenAIChat, Provider
from ..openai import helpers as openai_helpers

_logger = get_logger("llmblast.dispatch")


def _unsupported(provider: Any) -> CallError:
    return CallError(
        code=ErrorCode.UNSUPPORTED_PROVIDER,
        message=f"no request builder for {type(provider).__name__}",
        provider=str(getattr(provider, "kind", type(provider).__name__)),
        model=getattr(provider, "model_name", None),
    )


def build_request(prompt: str, provider: Provider) -> PreparedRequest:
    """Return the POST for ``prompt``; raises ``UNSUPPORTED_PROVIDER`` without I/O."""
    if isinstance(provider, OpenAIChat):
        return openai_helpers.build_request(prompt, provider)
    if isinstance(provider, AnthropicMessages):
        return anthropic_helpers.build_request(prompt, provider)
    raise _unsupported(provider)


def extract_content(document: Any, provider: Provider, *, status_code: Optional[int] = None) -> str:
    """Pull the generated text out of a decoded response for ``provider``."""
    if isinstance(provider, OpenAIChat):
        return openai_helpers.extract_content(document, model=provider.model_name, status_code=status_code)
    if isinstance(provider, AnthropicMessages):
        return anthropic_helpers.extract_content(document, model=provider.model_name, status_code=status_code)
    raise _unsupported(provider)


def call_llm(prompt: str, provider: Provider, *, client: Optional[httpx.Client] = None) -> str:
    """Send ``prompt`` to ``provider`` and return the generated text.

    Parameters:
        prompt: Sent verbatim; may be empty.
        provider: Immutable descriptor; read only.
        client: Transport to use. Defaults to the process-wide shared client.

    Raises:
        CallError: see module docstring for the codes.
    """
    request = build_request(prompt, provider)
    http = client if client is not None else get_http_client()

    t0 = perf_counter()
    try:
        response = http.post(request.url, content=request.body, headers=request.headers)
    except (httpx.HTTPError, httpx.StreamError, ValueError) as e:
        # ValueError covers header values the transport cannot encode.
        raise CallError(
            code=ErrorCode.TRANSPORT,
            message=str(e) or type(e).__name__,
            provider=provider.kind,
            model=provider.model_name,
            raw=e,
        ) from e

    log_event(
        _logger,
        "call.response",
        level=logging.DEBUG,
        provider=provider.kind,
        model=provider.model_name,
        status_code=response.status_code,
        duration_ms=round((perf_counter() - t0) * 1000.0, 1),
    )

    try:
        document = json.loads(response.content)
    except (ValueError, RecursionError) as e:
        raise CallError(
            code=ErrorCode.DECODE,
            message=f"response body is not JSON: {e}",
            provider=provider.kind,
            model=provider.model_name,
            status_code=response.status_code,
            raw=e,
        ) from e

    return extract_content(document, provider, status_code=response.status_code)


__all__ = ["build_request", "extract_content", "call_llm"]
