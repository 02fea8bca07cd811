"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import bson
import pytest
from bson.raw_bson import RawBSONDocument

# Required settings must exist before portfolio_api.config is imported
os.environ.setdefault("PORTFOLIO_MONGO_DB_URI", "mongodb://localhost:27017")
os.environ.setdefault("PORTFOLIO_API_HOST", "127.0.0.1")
os.environ.setdefault("PORTFOLIO_API_PORT", "3000")
os.environ.setdefault("PORTFOLIO_USER_EMAIL", "user@example.com")

OWNER_EMAIL = "user@example.com"


class FakeCursor:
    """Async cursor over pre-encoded documents."""

    def __init__(self, items: list[bytes], error: Exception | None = None) -> None:
        self._items = list(items)
        self._error = error

    def __aiter__(self) -> "FakeCursor":
        return self

    async def __anext__(self) -> RawBSONDocument:
        if self._error is not None:
            raise self._error
        if not self._items:
            raise StopAsyncIteration
        return RawBSONDocument(self._items.pop(0))


class FakeCollection:
    """Collection that answers equality-filter finds from memory."""

    def __init__(self) -> None:
        self.documents: list[dict[str, Any]] = []
        self.corrupt: list[bytes] = []
        self.error: Exception | None = None
        self.find_calls: list[dict[str, Any]] = []

    def find(self, filter_doc: dict[str, Any]) -> FakeCursor:
        self.find_calls.append(dict(filter_doc))
        matching = [
            bson.encode(document)
            for document in self.documents
            if all(document.get(key) == value for key, value in filter_doc.items())
        ]
        return FakeCursor(matching + self.corrupt, error=self.error)


class FakeDatabase:
    """Stand-in for pymongo's AsyncDatabase."""

    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}
        self.codec_options: dict[str, Any] = {}
        self.ping_error: Exception | None = None

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection()
        return self.collections[name]

    def get_collection(self, name: str, codec_options: Any = None) -> FakeCollection:
        self.codec_options[name] = codec_options
        return self[name]

    def seed(self, name: str, documents: list[dict[str, Any]]) -> FakeCollection:
        collection = self[name]
        collection.documents.extend(documents)
        return collection

    async def command(self, name: str) -> dict[str, Any]:
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1.0}


@pytest.fixture
def corrupt_bson() -> bytes:
    """A document whose second element carries an unknown BSON type byte."""
    data = bytearray(bson.encode({"email": OWNER_EMAIL, "x": 1}))
    # Type byte of the "x" element sits right before its name
    data[data.index(b"x\x00") - 1] = 0x20
    return bytes(data)


@pytest.fixture
def fake_database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def owner_email(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the configured owner email for the duration of a test."""
    from portfolio_api.config import settings

    monkeypatch.setattr(settings, "user_email", OWNER_EMAIL)
    return OWNER_EMAIL


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
