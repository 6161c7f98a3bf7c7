"""Permission catalog feature for neo-authz.

Feature-First layout:
- entities/: permission definitions, the immutable snapshot, protocols
- services/: loading raw records and swapping snapshots
- adapters/: catalog sources and cache backends
"""

from .entities import (
    PermissionDefinition,
    PermissionRecord,
    CatalogSnapshot,
    build_snapshot,
    group_by_subcategory,
    CatalogSource,
    CatalogCache,
    SnapshotProvider,
)
from .services import CatalogLoader, CatalogProvider, load_catalog
from .adapters import (
    StaticCatalogSource,
    CachedCatalogSource,
    MemoryCatalogCache,
    RedisCatalogCache,
)


def create_catalog_provider(source, cache=None, settings=None) -> CatalogProvider:
    """
    Create a catalog provider with default implementations.

    Args:
        source: External catalog source
        cache: Optional cache backend; wraps the source when given
        settings: Optional settings

    Returns:
        CatalogProvider with no snapshot loaded yet
    """
    if cache is not None:
        source = CachedCatalogSource(wrapped_source=source, cache=cache, settings=settings)
    return CatalogProvider(loader=CatalogLoader(source=source, settings=settings))


__all__ = [
    # Entities
    "PermissionDefinition",
    "PermissionRecord",
    "CatalogSnapshot",
    "build_snapshot",
    "group_by_subcategory",

    # Protocols
    "CatalogSource",
    "CatalogCache",
    "SnapshotProvider",

    # Services
    "CatalogLoader",
    "CatalogProvider",
    "load_catalog",

    # Adapters
    "StaticCatalogSource",
    "CachedCatalogSource",
    "MemoryCatalogCache",
    "RedisCatalogCache",

    # Factory functions
    "create_catalog_provider",
]
