"""Grant services package."""

from .category_mapper import CategoryMapper, create_category_mapper

__all__ = [
    "CategoryMapper",
    "create_category_mapper",
]
