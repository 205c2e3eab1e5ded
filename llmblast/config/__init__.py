"""Configuration layer for llmblast.

Credentials are normally resolved by the host before a descriptor is built.
These helpers cover the common case of building one straight from the process
environment, and read the optional transport settings.

Environment Variable Conventions
--------------------------------
<PREFIX>_API_KEY, <PREFIX>_MODEL with PREFIX ``OPENAI`` or ``ANTHROPIC``.
LLMBLAST_HTTP_TIMEOUT_SECONDS sets a per-request timeout (unset: none).

Public API
----------
* provider_from_env(kind, model=None, api_key=None) -> Provider
* get_http_timeout() -> float | None
"""
from __future__ import annotations

import os
from typing import Optional

from ..base.models import Provider, parse_provider
from .defaults import ANTHROPIC_DEFAULT_MODEL, HTTP_TIMEOUT_ENV, OPENAI_DEFAULT_MODEL
from .env import get_env_var_name, is_placeholder, resolve_provider_key

DEFAULT_MODELS = {
    "openai_chat": OPENAI_DEFAULT_MODEL,
    "anthropic_messages": ANTHROPIC_DEFAULT_MODEL,
}


def provider_from_env(kind: str, model: Optional[str] = None, api_key: Optional[str] = None) -> Provider:
    """Build a provider descriptor, filling gaps from the environment.

    Precedence for each field: explicit argument, environment variable,
    built-in default (model only). A missing key yields an empty string rather
    than an error; the remote API rejects it at call time.

    Raises:
        CallError: ``UNSUPPORTED_PROVIDER`` for an unknown ``kind``.
    """
    kind = (kind or "").lower()
    if api_key is None:
        api_key, _ = resolve_provider_key(kind)
    if model is None:
        env_name = get_env_var_name(kind, "MODEL")
        env_model = os.environ.get(env_name) if env_name else None
        if env_model and not is_placeholder(env_model):
            model = env_model.strip()
    return parse_provider(
        {
            "kind": kind,
            "model_name": model if model is not None else DEFAULT_MODELS.get(kind, ""),
            "api_key": api_key or "",
        }
    )


def get_http_timeout() -> Optional[float]:
    """Return the configured per-request timeout in seconds, or ``None``.

    Unset, unparsable and non-positive values all mean "no timeout".
    """
    raw = os.environ.get(HTTP_TIMEOUT_ENV)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


__all__ = ["provider_from_env", "get_http_timeout", "DEFAULT_MODELS"]
