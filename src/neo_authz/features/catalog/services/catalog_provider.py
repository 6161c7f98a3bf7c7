"""Catalog provider: load once, reuse many, reload by swapping snapshots."""

import asyncio
import logging
from typing import Optional

from ....core.exceptions import CatalogUnavailableError
from ..entities import CatalogSnapshot
from .catalog_loader import CatalogLoader

logger = logging.getLogger(__name__)


class CatalogProvider:
    """Holds the current catalog snapshot and refreshes it on demand.

    Readers call ``current()`` and get either the previous or the new
    snapshot, never a partially built one: refresh builds the new snapshot
    first and then rebinds a single reference.
    """

    def __init__(self, loader: CatalogLoader, snapshot: Optional[CatalogSnapshot] = None):
        self.loader = loader
        self._snapshot = snapshot
        self._refresh_lock = asyncio.Lock()

    def current(self) -> Optional[CatalogSnapshot]:
        """Return the current snapshot, or None when no load has succeeded."""
        return self._snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    async def refresh(self, force: bool = False) -> CatalogSnapshot:
        """
        Load a new snapshot and swap it in.

        A failed refresh keeps the previous snapshot in place and re-raises.

        Args:
            force: Invalidate any cache in front of the source before loading,
                so catalog changes show up before the cache TTL runs out

        Raises:
            CatalogUnavailableError: If the fetch fails, or if it returns an
                empty catalog before the first successful load
        """
        async with self._refresh_lock:
            if force:
                await self.loader.invalidate()
            try:
                snapshot = await self.loader.load()
            except CatalogUnavailableError:
                if self._snapshot is not None:
                    logger.warning("Catalog refresh failed, keeping previous snapshot")
                raise

            if snapshot.is_empty and self._snapshot is None:
                raise CatalogUnavailableError("Permission catalog is empty")

            self._snapshot = snapshot
            logger.info(f"Catalog snapshot replaced: {len(snapshot.definitions)} visible definitions")
            return snapshot

    async def get_or_load(self) -> CatalogSnapshot:
        """Return the current snapshot, loading it first if needed."""
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        return await self.refresh()

    def replace(self, snapshot: CatalogSnapshot) -> None:
        """Swap in an externally built snapshot."""
        self._snapshot = snapshot

    def invalidate(self) -> None:
        """Drop the current snapshot; checks fail closed until the next refresh.

        Cached source payloads are left alone; use ``refresh(force=True)``
        to reload past the cache.
        """
        self._snapshot = None
        logger.info("Catalog snapshot invalidated")
