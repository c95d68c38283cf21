"""Redis client for pad storage."""

import logging
from typing import Optional

import redis.asyncio as redis

from ..config import Settings
from .exceptions import StoreUnavailable
from .store import IKeyValueStore

logger = logging.getLogger(__name__)


class RedisClient(IKeyValueStore):
    """Redis backed store.

    Every driver failure is re-raised as StoreUnavailable; callers never get
    a made-up value back.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.redis: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Connect to Redis."""
        try:
            self.redis = redis.from_url(
                self.settings.redis_url,
                max_connections=self.settings.redis_max_connections,
                socket_timeout=self.settings.redis_socket_timeout,
                socket_connect_timeout=self.settings.redis_socket_timeout,
                decode_responses=True
            )
            # Test connection
            await self.redis.ping()
            logger.info("Connected to Redis successfully")
        except (redis.RedisError, OSError) as e:
            logger.error(f"Failed to connect to Redis: {e}")
            raise StoreUnavailable(f"Cannot connect to Redis: {e}") from e

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    def _client(self) -> redis.Redis:
        if self.redis is None:
            raise StoreUnavailable("Redis client is not connected")
        return self.redis

    async def incr(self, key: str) -> int:
        """Atomically increment a counter."""
        client = self._client()
        try:
            return int(await client.incr(key))
        except (redis.RedisError, OSError) as e:
            logger.error(f"Redis INCR error for key {key}: {e}")
            raise StoreUnavailable(f"INCR failed: {e}", {"key": key}) from e

    async def get(self, key: str) -> Optional[str]:
        """Get value from Redis."""
        client = self._client()
        try:
            return await client.get(key)
        except (redis.RedisError, OSError) as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            raise StoreUnavailable(f"GET failed: {e}", {"key": key}) from e

    async def set(self, key: str, value: str) -> None:
        """Set value in Redis."""
        client = self._client()
        try:
            await client.set(key, value)
        except (redis.RedisError, OSError) as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            raise StoreUnavailable(f"SET failed: {e}", {"key": key}) from e

    async def ping(self) -> bool:
        """Ping Redis."""
        client = self._client()
        try:
            return bool(await client.ping())
        except (redis.RedisError, OSError) as e:
            raise StoreUnavailable(f"PING failed: {e}") from e
