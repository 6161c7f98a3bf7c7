"""Grants feature.

Grant sets in their two structural forms (basic categories, granular codes),
the principal that holds them, and the mapper translating between forms.
"""

from .entities import (
    BasicGrantSet,
    GranularGrantSet,
    GrantSet,
    Principal,
    parse_grant_set,
)
from .services import CategoryMapper, create_category_mapper

__all__ = [
    # Entities
    "BasicGrantSet",
    "GranularGrantSet",
    "GrantSet",
    "Principal",
    "parse_grant_set",

    # Services
    "CategoryMapper",
    "create_category_mapper",
]
