"""Catalog source decorator that caches raw payloads."""

import json
import logging
from typing import Any, Dict, List, Optional

from ....config.settings import AuthzSettings, get_settings
from ..entities import CatalogCache, CatalogSource

logger = logging.getLogger(__name__)


class CachedCatalogSource:
    """Wraps a catalog source with a TTL cache.

    Cache failures never fail the fetch: they are logged and the wrapped
    source is used directly. Empty results are not cached.
    """

    def __init__(
        self,
        wrapped_source: CatalogSource,
        cache: CatalogCache,
        settings: Optional[AuthzSettings] = None,
    ):
        self.wrapped_source = wrapped_source
        self.cache = cache
        settings = settings or get_settings()
        self.cache_key = settings.catalog_cache_key
        self.ttl = settings.catalog_cache_ttl

    async def fetch_permissions(self) -> List[Dict[str, Any]]:
        cached = await self._read_cache()
        if cached is not None:
            logger.debug(f"Catalog cache hit: {self.cache_key}")
            return cached

        records = await self.wrapped_source.fetch_permissions()
        if records:
            await self._write_cache(records)
        return records

    async def invalidate(self) -> None:
        """Drop the cached payload so the next fetch hits the source."""
        try:
            await self.cache.delete(self.cache_key)
        except Exception as e:
            logger.warning(f"Failed to invalidate catalog cache {self.cache_key}: {e}")

    async def _read_cache(self) -> Optional[List[Dict[str, Any]]]:
        try:
            payload = await self.cache.get(self.cache_key)
        except Exception as e:
            logger.warning(f"Catalog cache read failed for {self.cache_key}: {e}")
            return None

        if payload is None:
            return None

        try:
            records = json.loads(payload)
        except ValueError as e:
            logger.warning(f"Discarding undecodable catalog cache payload: {e}")
            return None

        if not isinstance(records, list) or not records:
            return None
        return records

    async def _write_cache(self, records: List[Dict[str, Any]]) -> None:
        try:
            payload = json.dumps([dict(record) for record in records], default=str)
            await self.cache.set(self.cache_key, payload, ttl=self.ttl)
        except Exception as e:
            logger.warning(f"Catalog cache write failed for {self.cache_key}: {e}")
