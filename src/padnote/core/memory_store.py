"""In-process store, used for tests and single-process runs."""

import logging
import threading
from typing import Dict, Optional

from .exceptions import StoreUnavailable
from .store import IKeyValueStore

logger = logging.getLogger(__name__)


class MemoryStore(IKeyValueStore):
    """Dict backed store with the same primitive-level atomicity as Redis."""

    def __init__(self):
        self.storage: Dict[str, str] = {}
        self.connected = False
        self._lock = threading.Lock()

    async def connect(self) -> None:
        self.connected = True
        logger.info("Using in-memory store")

    async def disconnect(self) -> None:
        self.connected = False

    def _check(self) -> None:
        if not self.connected:
            raise StoreUnavailable("In-memory store is not connected")

    async def incr(self, key: str) -> int:
        self._check()
        with self._lock:
            try:
                value = int(self.storage.get(key, "0")) + 1
            except ValueError as e:
                raise StoreUnavailable(f"Value at {key} is not an integer", {"key": key}) from e
            self.storage[key] = str(value)
            return value

    async def get(self, key: str) -> Optional[str]:
        self._check()
        with self._lock:
            return self.storage.get(key)

    async def set(self, key: str, value: str) -> None:
        self._check()
        with self._lock:
            self.storage[key] = value

    async def ping(self) -> bool:
        self._check()
        return True
