# Backing store setup
from fastapi import Request

from .config import Settings
from .core.memory_store import MemoryStore
from .core.redis_client import RedisClient
from .core.store import IKeyValueStore


def create_store(settings: Settings) -> IKeyValueStore:
    """Build the configured backing store (not yet connected)."""
    if settings.storage_backend == "memory":
        return MemoryStore()
    return RedisClient(settings)


def get_store(request: Request) -> IKeyValueStore:
    """Get the store the running app was built with."""
    return request.app.state.store
