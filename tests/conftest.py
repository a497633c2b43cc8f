from __future__ import annotations

import pytest

from picker_log.entries.repository import EntryRepository
from picker_log.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def repo(store) -> EntryRepository:
    return EntryRepository(store)


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    from picker_log.main import create_app

    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()
