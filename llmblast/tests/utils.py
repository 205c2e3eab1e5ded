"""Shared helpers for the llmblast tests: response bodies and stub transports."""

from __future__ import annotations

import json
import threading
from typing import Callable, List

import httpx


def openai_body(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def prompt_of(request: httpx.Request) -> str:
    return json.loads(request.content)["messages"][0]["content"]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that also records every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []
        self._lock = threading.Lock()

        def _recording(request: httpx.Request) -> httpx.Response:
            with self._lock:
                self.requests.append(request)
            return handler(request)

        super().__init__(_recording)
