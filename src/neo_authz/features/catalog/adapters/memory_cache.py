"""Memory cache backend for catalog payloads."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class MemoryCacheEntry:
    """Memory cache entry with expiry."""
    value: str
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        """Check if entry is expired."""
        if self.expires_at is None:
            return False
        return now > self.expires_at


class MemoryCatalogCache:
    """Process-local TTL cache implementing the CatalogCache protocol."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._entries: Dict[str, MemoryCacheEntry] = {}
        self._clock = clock

    async def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._clock()):
            self._entries.pop(key, None)
            logger.debug(f"Cache entry expired: {key}")
            return None

        return entry.value

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        expires_at = self._clock() + ttl if ttl else None
        self._entries[key] = MemoryCacheEntry(value=value, expires_at=expires_at)

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    async def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
