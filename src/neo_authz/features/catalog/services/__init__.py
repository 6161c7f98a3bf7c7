"""Catalog services: loading and snapshot lifecycle."""

from .catalog_loader import CatalogLoader, load_catalog
from .catalog_provider import CatalogProvider

__all__ = [
    "CatalogLoader",
    "CatalogProvider",
    "load_catalog",
]
