"""llmblast.config.defaults
=======================

Central place for the small, stable constants used across the package:
endpoint URLs, default model names, sampling and pooling values.

This module intentionally imports nothing from the rest of the package so it
can be used from any layer without circular imports.
"""

from __future__ import annotations

# ---- Endpoints ----
OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"

# ---- Models ----
# Used by ``provider_from_env`` when neither an argument nor <PREFIX>_MODEL is set.
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-latest"

# ---- Sampling ----
# Requests are always built for deterministic sampling.
DEFAULT_TEMPERATURE = 0.0

# ---- Shared transport ----
# Idle keep-alive connections are dropped after this many seconds.
HTTP_POOL_IDLE_TIMEOUT_SECONDS = 30.0
# Optional per-request timeout override; unset means no timeout.
HTTP_TIMEOUT_ENV = "LLMBLAST_HTTP_TIMEOUT_SECONDS"
