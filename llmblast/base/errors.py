"""Unified call error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``llmblast.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.call_error import CallError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "CallError", "classify_exception"]
