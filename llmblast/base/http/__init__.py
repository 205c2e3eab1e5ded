"""HTTP utilities package.

Exposes the shared, lazily created httpx client.
"""

from .client import get_http_client, close_http_client

__all__ = ["get_http_client", "close_http_client"]
