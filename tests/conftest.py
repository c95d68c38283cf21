"""Shared pytest fixtures, wired to the in-memory store."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from padnote.config import Settings
from padnote.core.exceptions import StoreUnavailable
from padnote.core.hashid import HashIDEncoder
from padnote.core.memory_store import MemoryStore
from padnote.core.services import PadService
from padnote.core.store import IKeyValueStore
from padnote.main import create_app


@pytest.fixture
def test_settings():
    """Settings for tests: memory backend, fixed salt, no log files."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        redis_prefix="test",
        salt="test-salt",
        hashid_min_length=5,
        max_content_length=1000,
        debug=True,
        log_dir="",
    )


@pytest_asyncio.fixture
async def memory_store():
    """A connected in-memory store."""
    store = MemoryStore()
    await store.connect()
    yield store
    await store.disconnect()


@pytest.fixture
def encoder(test_settings):
    return HashIDEncoder(test_settings.salt, test_settings.hashid_min_length)


@pytest.fixture
def pad_service(memory_store, encoder, test_settings):
    return PadService(memory_store, encoder, test_settings.redis_prefix)


class FailingStore(IKeyValueStore):
    """Store whose every operation fails, counting the attempts."""

    def __init__(self):
        self.calls = 0

    async def connect(self):
        pass

    async def disconnect(self):
        pass

    async def incr(self, key):
        self.calls += 1
        raise StoreUnavailable("store down", {"key": key})

    async def get(self, key):
        self.calls += 1
        raise StoreUnavailable("store down", {"key": key})

    async def set(self, key, value):
        self.calls += 1
        raise StoreUnavailable("store down", {"key": key})

    async def ping(self):
        raise StoreUnavailable("store down")


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def test_app(test_settings):
    """App built around a fresh in-memory store."""
    return create_app(test_settings, store=MemoryStore())


@pytest.fixture
def client(test_app):
    """Test client; entering it runs the lifespan, which connects the store."""
    with TestClient(test_app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(test_app):
    """Async test client. ASGITransport skips the lifespan, so connect here."""
    await test_app.state.store.connect()
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac
    await test_app.state.store.disconnect()
