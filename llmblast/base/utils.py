"""Small helpers shared by the provider request/response modules.

- ``json_headers`` builds the fixed header set (content type + bearer token).
- ``encode_body`` serializes a payload deterministically.
- ``extract_str`` walks a decoded JSON document along a key/index path and
  returns the string at its end, raising ``EXTRACTION_FAILED`` otherwise.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Sequence, Union

from .errors import CallError, ErrorCode

PathSegment = Union[str, int]


def json_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "authorization": f"Bearer {api_key}",
    }


def encode_body(payload: Dict[str, Any]) -> bytes:
    # Insertion order is kept and separators are fixed: same input, same bytes.
    # ASCII escapes keep lone surrogates encodable.
    return json.dumps(payload, ensure_ascii=True, separators=(",", ":")).encode("ascii")


def _format_path(path: Sequence[PathSegment]) -> str:
    out = ""
    for seg in path:
        out += f"[{seg}]" if isinstance(seg, int) else (f".{seg}" if out else seg)
    return out


def extract_str(
    document: Any,
    path: Sequence[PathSegment],
    *,
    provider: str,
    model: Optional[str] = None,
    status_code: Optional[int] = None,
) -> str:
    """Return the string found at ``path`` inside ``document``.

    String segments index JSON objects, integer segments index JSON arrays; a
    segment applied to the wrong container type counts as missing.

    Raises:
        CallError: ``EXTRACTION_FAILED`` naming the first missing segment, or
            the leaf type when the value is not a string.
    """
    node = document
    for depth, seg in enumerate(path):
        if isinstance(seg, int):
            found = isinstance(node, list) and 0 <= seg < len(node)
        else:
            found = isinstance(node, dict) and seg in node
        if not found:
            raise CallError(
                code=ErrorCode.EXTRACTION_FAILED,
                message=f"response has no '{_format_path(path[: depth + 1])}'",
                provider=provider,
                model=model,
                status_code=status_code,
            )
        node = node[seg]
    if not isinstance(node, str):
        raise CallError(
            code=ErrorCode.EXTRACTION_FAILED,
            message=f"'{_format_path(path)}' is {type(node).__name__}, expected str",
            provider=provider,
            model=model,
            status_code=status_code,
        )
    return node


__all__ = ["json_headers", "encode_body", "extract_str", "PathSegment"]
