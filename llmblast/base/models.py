"""Provider descriptors.

Purpose
-------
Identify which remote API family a call targets and carry the credentials and
model name needed to address it. The set of variants is closed:

- :class:`OpenAIChat` for the OpenAI chat-completions API.
- :class:`AnthropicMessages` for the Anthropic messages API. Its request
  building is not implemented; calls fail before any I/O.

Descriptors are frozen pydantic models: immutable after construction,
hashable, and safe to share across worker threads. No validation beyond the
field types is performed, so empty keys or model names are accepted and
surface as remote errors at call time.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .errors import CallError, ErrorCode


class _ProviderBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())

    model_name: str
    api_key: str = Field(repr=False)


class OpenAIChat(_ProviderBase):
    """OpenAI chat-completions target."""

    kind: Literal["openai_chat"] = "openai_chat"


class AnthropicMessages(_ProviderBase):
    """Anthropic messages target (request building not implemented)."""

    kind: Literal["anthropic_messages"] = "anthropic_messages"


Provider = Union[OpenAIChat, AnthropicMessages]

PROVIDER_KINDS = ("openai_chat", "anthropic_messages")

_PROVIDER_ADAPTER: TypeAdapter[Provider] = TypeAdapter(
    Annotated[Provider, Field(discriminator="kind")]
)


def parse_provider(data: Mapping[str, Any]) -> Provider:
    """Build a descriptor from a plain mapping keyed by ``kind``.

    Raises:
        CallError: ``UNSUPPORTED_PROVIDER`` when ``kind`` is missing or not one
            of :data:`PROVIDER_KINDS`.
        pydantic.ValidationError: when a known kind has malformed fields.
    """
    kind = data.get("kind")
    if kind not in PROVIDER_KINDS:
        raise CallError(
            code=ErrorCode.UNSUPPORTED_PROVIDER,
            message=f"unknown provider kind {kind!r}; expected one of {', '.join(PROVIDER_KINDS)}",
            provider=str(kind),
        )
    return _PROVIDER_ADAPTER.validate_python(dict(data))


__all__ = [
    "OpenAIChat",
    "AnthropicMessages",
    "Provider",
    "PROVIDER_KINDS",
    "parse_provider",
]
