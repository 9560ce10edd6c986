"""Shared fixtures for BookMind tests."""

import os
import tempfile

# The API module opens its SQLite store at import time.
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="bookmind-test-"))
os.environ.setdefault("BOOKMARK_BACKEND", "sqlite")

import pytest

from bookmind.models import Bookmark
from bookmind.settings import Settings


class FakeClient:
    """Stands in for CompletionClient; records every call."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, system_prompt, user_prompt, max_tokens, temperature):
        self.calls.append(
            {
                "system": system_prompt,
                "user": user_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


class FakeStore:
    def __init__(self, bookmarks=None, error=None):
        self.bookmarks = bookmarks or []
        self.error = error
        self.fetches = 0

    def get_all_bookmarks(self):
        self.fetches += 1
        if self.error is not None:
            raise self.error
        return list(self.bookmarks)


@pytest.fixture
def make_bookmark():
    counter = {"id": 0}

    def _make(title="", url="https://example.com", excerpt=None, tags=None, collection_id=None):
        counter["id"] += 1
        return Bookmark(
            id=counter["id"],
            title=title,
            url=url,
            excerpt=excerpt,
            tags=tags or [],
            collection_id=collection_id,
        )

    return _make


@pytest.fixture
def ai_settings(tmp_path):
    return Settings(
        data_dir=str(tmp_path),
        api_key="test-key",
        ai_enabled=True,
        context_limit=50,
    )


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def fake_store():
    return FakeStore
