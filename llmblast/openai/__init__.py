"""OpenAI chat-completions request building and response extraction."""

from .helpers import build_payload, build_request, extract_content

__all__ = ["build_payload", "build_request", "extract_content"]
