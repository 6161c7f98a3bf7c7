"""Preset entities."""

from .preset import Preset, PermissionFilter, category_filter, code_filter

__all__ = [
    "Preset",
    "PermissionFilter",
    "category_filter",
    "code_filter",
]
