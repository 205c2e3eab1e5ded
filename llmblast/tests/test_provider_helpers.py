"""Request shaping and response extraction per provider."""
from __future__ import annotations

import json

import pytest

from llmblast.anthropic import helpers as anthropic_helpers
from llmblast.base.errors import CallError, ErrorCode
from llmblast.base.models import AnthropicMessages, OpenAIChat
from llmblast.openai import helpers as openai_helpers


@pytest.fixture()
def provider() -> OpenAIChat:
    return OpenAIChat(model_name="gpt-test", api_key="sk-unit")


def test_openai_request_shape(provider):
    req = openai_helpers.build_request("Write a haiku.", provider)
    assert req.url == "https://api.openai.com/v1/chat/completions"
    assert req.headers == {"Content-Type": "application/json", "authorization": "Bearer sk-unit"}
    assert json.loads(req.body) == {
        "model": "gpt-test",
        "temperature": 0.0,
        "messages": [{"role": "user", "content": "Write a haiku."}],
    }


def test_openai_request_body_is_byte_identical(provider):
    first = openai_helpers.build_request("same prompt", provider)
    second = openai_helpers.build_request("same prompt", provider)
    assert first.body == second.body
    assert first == second


@pytest.mark.parametrize("prompt", ["", "  padded  ", "ünïcödé \"quoted\"\nnewline"])
def test_openai_prompt_is_sent_verbatim(provider, prompt):
    body = json.loads(openai_helpers.build_request(prompt, provider).body)
    assert body["messages"][0]["content"] == prompt
    assert isinstance(body["temperature"], float)


def test_openai_extracts_content():
    doc = json.loads('{"choices":[{"message":{"content":"hello"}}]}')
    assert openai_helpers.extract_content(doc) == "hello"


def test_openai_extracts_empty_string():
    assert openai_helpers.extract_content({"choices": [{"message": {"content": ""}}]}) == ""


@pytest.mark.parametrize(
    "doc, missing",
    [
        ({}, "choices"),
        ({"choices": []}, "choices[0]"),
        ({"choices": {"0": {}}}, "choices[0]"),
        ({"choices": [{}]}, "choices[0].message"),
        ({"choices": [{"message": {"role": "assistant"}}]}, "choices[0].message.content"),
        ([1, 2], "choices"),
    ],
)
def test_openai_missing_segment_fails_extraction(doc, missing):
    with pytest.raises(CallError) as info:
        openai_helpers.extract_content(doc, model="gpt-test", status_code=200)
    err = info.value
    assert err.code is ErrorCode.EXTRACTION_FAILED
    assert f"'{missing}'" in err.message
    assert err.provider == "openai_chat"
    assert err.status_code == 200


@pytest.mark.parametrize("value", [None, 42, ["a"], {"text": "a"}])
def test_openai_non_string_content_fails_extraction(value):
    with pytest.raises(CallError) as info:
        openai_helpers.extract_content({"choices": [{"message": {"content": value}}]})
    assert info.value.code is ErrorCode.EXTRACTION_FAILED


def test_anthropic_request_building_is_unsupported():
    provider = AnthropicMessages(model_name="claude-test", api_key="sk-unit")
    with pytest.raises(CallError) as info:
        anthropic_helpers.build_request("hi", provider)
    assert info.value.code is ErrorCode.UNSUPPORTED_PROVIDER
    assert info.value.retryable is False


def test_anthropic_extracts_first_text_block():
    doc = {"content": [{"type": "text", "text": "bonjour"}, {"type": "text", "text": "ignored"}]}
    assert anthropic_helpers.extract_content(doc) == "bonjour"


def test_anthropic_missing_text_fails_extraction():
    with pytest.raises(CallError) as info:
        anthropic_helpers.extract_content({"content": [{"type": "tool_use"}]})
    assert info.value.code is ErrorCode.EXTRACTION_FAILED
    assert info.value.provider == "anthropic_messages"


def test_lone_surrogate_prompt_encodes_as_ascii_escape(provider):
    body = openai_helpers.build_request("bad\ud800", provider).body
    assert body.isascii()
    assert b"\\ud800" in body
    assert json.loads(body)["messages"][0]["content"] == "bad\ud800"
    assert body == openai_helpers.build_request("bad\ud800", provider).body
