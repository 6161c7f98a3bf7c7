"""Catalog entities package.

Permission definitions, the immutable catalog snapshot, and protocols for
the external catalog source and cache.
"""

from .permission_definition import PermissionDefinition, PermissionRecord
from .catalog_snapshot import (
    CatalogSnapshot,
    build_snapshot,
    group_by_subcategory,
    sort_by_subcategory,
    subcategory_rank,
)
from .protocols import CatalogSource, CatalogCache, SnapshotProvider

__all__ = [
    # Domain entities
    "PermissionDefinition",
    "PermissionRecord",
    "CatalogSnapshot",
    "build_snapshot",

    # Ordering helpers
    "group_by_subcategory",
    "sort_by_subcategory",
    "subcategory_rank",

    # Protocols
    "CatalogSource",
    "CatalogCache",
    "SnapshotProvider",
]
