"""Pytest configuration for the llmblast test suite.

Stub transports are built on ``httpx.MockTransport`` so no test touches the
network; the shared client is reset around every test.
"""

from __future__ import annotations

from typing import Callable, Iterator, List

import httpx
import pytest

from llmblast.base.http import close_http_client
from llmblast.base.models import OpenAIChat
from llmblast.tests.utils import RecordingTransport, openai_body, prompt_of


@pytest.fixture(autouse=True)
def reset_shared_client() -> Iterator[None]:
    close_http_client()
    yield
    close_http_client()


@pytest.fixture()
def openai_provider() -> OpenAIChat:
    return OpenAIChat(model_name="gpt-test", api_key="sk-unit")


@pytest.fixture()
def make_client() -> Iterator[Callable]:
    """Factory returning ``(client, transport)`` for a request handler."""
    clients: List[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield _make
    for c in clients:
        c.close()


@pytest.fixture()
def echo_handler() -> Callable[[httpx.Request], httpx.Response]:
    """Answer every prompt with ``echo:<prompt>``."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=openai_body(f"echo:{prompt_of(request)}"))

    return _handler
