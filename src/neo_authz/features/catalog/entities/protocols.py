"""Protocol interfaces for the catalog feature.

The catalog source and the cache backend are external collaborators; the
engine only depends on these contracts.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .catalog_snapshot import CatalogSnapshot


@runtime_checkable
class CatalogSource(Protocol):
    """Protocol for fetching the permission definition list in one batch."""

    @abstractmethod
    async def fetch_permissions(self) -> List[Dict[str, Any]]:
        """Return raw permission records (id, code, name, category, ...)."""
        ...


@runtime_checkable
class CatalogCache(Protocol):
    """Protocol for the key/value store that caches raw catalog payloads."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get a cached payload, or None on miss/expiry."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        """Store a payload with an optional TTL in seconds."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a payload; returns True if something was removed."""
        ...


@runtime_checkable
class SnapshotProvider(Protocol):
    """Protocol for anything that hands out the current catalog snapshot."""

    @abstractmethod
    def current(self) -> Optional[CatalogSnapshot]:
        """Return the current snapshot, or None when no load succeeded yet."""
        ...
