"""Counter repository for minting pad numbers."""

import logging

from ..store import IKeyValueStore

logger = logging.getLogger(__name__)


class CounterRepository:
    """Store-wide monotonically increasing counter.

    The counter key is only ever touched through ``next()``; a fresh store
    returns 1 on the first call.
    """

    def __init__(self, store: IKeyValueStore, prefix: str):
        self.store = store
        self.key = f"{prefix}:counter"

    async def next(self) -> int:
        """Atomically increment the counter and return the new value."""
        value = await self.store.incr(self.key)
        logger.debug(f"Counter {self.key} advanced to {value}")
        return value
