"""Catalog adapters: sources and cache backends."""

from .static_source import StaticCatalogSource
from .cached_source import CachedCatalogSource
from .memory_cache import MemoryCatalogCache, MemoryCacheEntry
from .redis_cache import RedisCatalogCache

__all__ = [
    "StaticCatalogSource",
    "CachedCatalogSource",
    "MemoryCatalogCache",
    "MemoryCacheEntry",
    "RedisCatalogCache",
]
