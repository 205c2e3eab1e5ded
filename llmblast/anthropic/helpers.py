"""Anthropic messages helpers.

Request building for this provider does not exist yet: :func:`build_request`
raises ``UNSUPPORTED_PROVIDER`` so nothing malformed is ever sent. Extraction
of ``content[0].text`` is defined so the response side is complete once a
request builder lands.
"""

from __future__ import annotations

from typing import Any, NoReturn, Optional

from ..base.errors import CallError, ErrorCode
from ..base.models import AnthropicMessages
from ..base.utils import extract_str

CONTENT_PATH = ("content", 0, "text")


def build_request(prompt: str, provider: AnthropicMessages) -> NoReturn:
    # TODO: POST https://api.anthropic.com/v1/messages with x-api-key, anthropic-version and max_tokens.
    raise CallError(
        code=ErrorCode.UNSUPPORTED_PROVIDER,
        message="request building for anthropic_messages is not implemented",
        provider=provider.kind,
        model=provider.model_name,
    )


def extract_content(document: Any, *, model: Optional[str] = None, status_code: Optional[int] = None) -> str:
    """Return ``content[0].text`` or raise ``EXTRACTION_FAILED``."""
    return extract_str(document, CONTENT_PATH, provider="anthropic_messages", model=model, status_code=status_code)


__all__ = ["CONTENT_PATH", "build_request", "extract_content"]
