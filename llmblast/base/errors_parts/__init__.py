"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `llmblast.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .call_error import CallError
from .classification import classify_exception

__all__ = ["ErrorCode", "CallError", "classify_exception"]
