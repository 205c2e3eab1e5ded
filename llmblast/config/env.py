"""llmblast.config.env
===================

Mapping from provider kinds to the environment variables holding their
credentials and model overrides, plus small lookup helpers.

Helpers never raise on unknown providers or unset variables; they return
``None`` and let the caller decide.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Provider kind -> environment variable prefix
ENV_PREFIX: Dict[str, str] = {
    "openai_chat": "OPENAI",
    "anthropic_messages": "ANTHROPIC",
}

# Provider kind -> ordered tuple of acceptable key variables (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "anthropic_messages": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. Case-insensitive and tolerant of surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_name(kind: str, field: str = "API_KEY") -> Optional[str]:
    """Return the canonical environment variable for ``kind`` and ``field``.

    ``field`` is the upper-case suffix, e.g. ``API_KEY`` or ``MODEL``.
    """
    prefix = ENV_PREFIX.get((kind or "").lower())
    return f"{prefix}_{field}" if prefix else None


def get_env_var_candidates(kind: str) -> Iterable[str]:
    """Yield acceptable API key variable names for ``kind``, canonical first."""
    k = (kind or "").lower()
    canonical = get_env_var_name(k)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(k, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(kind: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for ``kind`` from the process environment.

    Returns ``(value, env_var_used)`` for the first non-empty, non-placeholder
    candidate, or ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(kind):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_PREFIX",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
