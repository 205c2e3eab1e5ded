"""Anthropic messages response extraction (request building pending)."""

from .helpers import build_request, extract_content

__all__ = ["build_request", "extract_content"]
