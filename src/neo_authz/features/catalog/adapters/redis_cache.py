"""Redis cache backend for catalog payloads."""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ....core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class RedisCatalogCache:
    """Redis-backed cache implementing the CatalogCache protocol.

    Shares one catalog payload between every process of a deployment so a
    reload triggered in one worker is visible to the others after TTL.
    """

    def __init__(self, client: "redis.Redis"):
        self.client = client

    @classmethod
    def from_url(cls, url: Optional[str]) -> "RedisCatalogCache":
        """Create a cache from a redis URL."""
        if not url:
            raise ConfigurationError("Redis URL is required for RedisCatalogCache")
        return cls(redis.Redis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> Optional[str]:
        value = await self.client.get(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        await self.client.set(key, value, ex=ttl or None)

    async def delete(self, key: str) -> bool:
        return bool(await self.client.delete(key))

    async def close(self) -> None:
        """Close the underlying connection pool."""
        try:
            await self.client.aclose()
        except RedisError as e:
            logger.warning(f"Failed to close redis client: {e}")
