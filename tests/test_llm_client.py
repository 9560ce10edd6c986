"""Tests for the completion HTTP client and its failure mapping."""

import pytest
import requests

from bookmind import llm_client
from bookmind.errors import ApiError, EmptyResponseError, ParseError, TransportError
from bookmind.llm_client import CompletionClient, build_request


class FakeResponse:
    def __init__(self, payload=None, status_code=200, raw=None):
        self.payload = payload
        self.status_code = status_code
        self.raw = raw

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.raw is not None:
            raise ValueError("not json")
        return self.payload


def _client():
    return CompletionClient(api_key="k-123", model="sonar", base_url="https://api.test/", timeout=30)


def _patch_post(monkeypatch, response=None, error=None):
    calls = []

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if error is not None:
            raise error
        return response

    monkeypatch.setattr(llm_client.requests, "post", fake_post)
    return calls


def test_build_request_shape():
    body = build_request("sonar", "sys", "usr", 500, 0.2)

    assert body == {
        "model": "sonar",
        "messages": [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "usr"},
        ],
        "max_tokens": 500,
        "temperature": 0.2,
        "stream": False,
    }


def test_complete_returns_first_choice(monkeypatch):
    payload = {"choices": [{"message": {"role": "assistant", "content": " hello "}}]}
    calls = _patch_post(monkeypatch, FakeResponse(payload))

    assert _client().complete("sys", "usr", 100, 0.3) == " hello "

    assert len(calls) == 1
    call = calls[0]
    assert call["url"] == "https://api.test/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer k-123"
    assert call["timeout"] == 30
    assert call["json"]["stream"] is False
    assert call["json"]["max_tokens"] == 100


def test_error_payload_raises_api_error(monkeypatch):
    payload = {"error": {"message": "rate limited", "type": "rate_limit", "code": 429}}
    _patch_post(monkeypatch, FakeResponse(payload, status_code=429))

    with pytest.raises(ApiError) as exc:
        _client().complete("sys", "usr", 100, 0.3)

    assert exc.value.message == "rate limited"
    assert exc.value.type == "rate_limit"
    assert exc.value.code == "429"


def test_error_payload_wins_over_choices(monkeypatch):
    payload = {"error": {"message": "bad model"}, "choices": [{"message": {"content": "x"}}]}
    _patch_post(monkeypatch, FakeResponse(payload))

    with pytest.raises(ApiError, match="bad model"):
        _client().complete("sys", "usr", 100, 0.3)


def test_http_status_without_error_payload(monkeypatch):
    _patch_post(monkeypatch, FakeResponse({"detail": "nope"}, status_code=500))

    with pytest.raises(ApiError, match="HTTP 500"):
        _client().complete("sys", "usr", 100, 0.3)


def test_empty_choices(monkeypatch):
    _patch_post(monkeypatch, FakeResponse({"choices": []}))

    with pytest.raises(EmptyResponseError):
        _client().complete("sys", "usr", 100, 0.3)


def test_non_json_body(monkeypatch):
    _patch_post(monkeypatch, FakeResponse(raw="<html>"))

    with pytest.raises(ParseError):
        _client().complete("sys", "usr", 100, 0.3)


def test_choice_without_content(monkeypatch):
    _patch_post(monkeypatch, FakeResponse({"choices": [{"index": 0}]}))

    with pytest.raises(ParseError):
        _client().complete("sys", "usr", 100, 0.3)


def test_network_failure(monkeypatch):
    _patch_post(monkeypatch, error=requests.Timeout("timed out"))

    with pytest.raises(TransportError, match="timed out"):
        _client().complete("sys", "usr", 100, 0.3)


def test_empty_error_object_still_fails(monkeypatch):
    """A present error field fails the call even when it carries no details."""
    payload = {"error": {}, "choices": [{"message": {"content": "hi"}}]}
    _patch_post(monkeypatch, FakeResponse(payload))

    with pytest.raises(ApiError, match="unknown error"):
        _client().complete("sys", "usr", 100, 0.3)


def test_json_array_body(monkeypatch):
    _patch_post(monkeypatch, FakeResponse([{"choices": []}]))

    with pytest.raises(ParseError, match="list"):
        _client().complete("sys", "usr", 100, 0.3)
