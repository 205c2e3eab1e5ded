"""Wire-level request object shared by the provider helpers.

``PreparedRequest`` is the fully resolved POST a provider helper wants sent:
target URL, headers and the already serialized body. Building it performs no
I/O, which keeps request shaping testable without a transport.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class PreparedRequest:
    """A POST ready to hand to the shared transport."""

    url: str
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)


__all__ = ["PreparedRequest"]
