"""Request caller and batch dispatcher."""

from .batch import call_llm_batch
from .caller import build_request, call_llm, extract_content

__all__ = ["call_llm_batch", "call_llm", "build_request", "extract_content"]
