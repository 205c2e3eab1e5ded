"""llmblast package

Concurrent batch dispatch of text prompts to a remote LLM provider.

Public API (re-exported):
    - Version: ``__version__``
    - Descriptors: :class:`OpenAIChat`, :class:`AnthropicMessages`,
      ``Provider``, :func:`parse_provider`, :func:`provider_from_env`
    - Calls: :func:`call_llm_batch`, :func:`call_llm`
    - Errors: :class:`CallError`, :class:`ErrorCode`

Example::

    import llmblast

    provider = llmblast.OpenAIChat(model_name="gpt-4o-mini", api_key="sk-...")
    answers = llmblast.call_llm_batch(["One fish.", "Two fish."], provider)

``answers[i]`` answers the i-th prompt. Any single failure raises one
:class:`CallError` for the whole batch.
"""

from .base.errors import CallError, ErrorCode
from .base.models import AnthropicMessages, OpenAIChat, Provider, parse_provider
from .config import provider_from_env
from .dispatch import call_llm, call_llm_batch

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CallError",
    "ErrorCode",
    "OpenAIChat",
    "AnthropicMessages",
    "Provider",
    "parse_provider",
    "provider_from_env",
    "call_llm",
    "call_llm_batch",
]
