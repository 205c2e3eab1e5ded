"""OpenAI chat-completions helpers.

Purpose:
    Build the request for one prompt and pull the generated text out of the
    decoded response. Pure functions; the caller owns the transport.

Request shape:
    POST ``OPENAI_CHAT_COMPLETIONS_URL`` with
    ``{"model": ..., "temperature": 0.0, "messages": [{"role": "user", "content": prompt}]}``.

Response shape read:
    ``choices[0].message.content``; every other field is ignored.
"""

from __future__ import annotations

from typing import Any, Optional

from ..base.dto import PreparedRequest
from ..base.models import OpenAIChat
from ..base.utils import encode_body, extract_str, json_headers
from ..config.defaults import DEFAULT_TEMPERATURE, OPENAI_CHAT_COMPLETIONS_URL

CONTENT_PATH = ("choices", 0, "message", "content")


def build_payload(prompt: str, model: str) -> dict[str, Any]:
    """Construct the chat-completions body; the prompt is sent verbatim."""
    return {
        "model": model,
        "temperature": DEFAULT_TEMPERATURE,
        "messages": [{"role": "user", "content": prompt}],
    }


def build_request(prompt: str, provider: OpenAIChat) -> PreparedRequest:
    return PreparedRequest(
        url=OPENAI_CHAT_COMPLETIONS_URL,
        body=encode_body(build_payload(prompt, provider.model_name)),
        headers=json_headers(provider.api_key),
    )


def extract_content(document: Any, *, model: Optional[str] = None, status_code: Optional[int] = None) -> str:
    """Return ``choices[0].message.content`` or raise ``EXTRACTION_FAILED``."""
    return extract_str(document, CONTENT_PATH, provider="openai_chat", model=model, status_code=status_code)


__all__ = ["CONTENT_PATH", "build_payload", "build_request", "extract_content"]
