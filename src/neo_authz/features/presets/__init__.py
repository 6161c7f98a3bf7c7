"""Presets feature.

Named, catalog-derived permission bundles (replace or additive toggle) and
the engine applying them to grant sets.
"""

from .entities import Preset, PermissionFilter, category_filter, code_filter
from .services import (
    CATEGORY_PRESET_ORDER,
    CLEAR_ALL_PRESET,
    PresetEngine,
    PresetRegistry,
    build_category_preset,
    create_preset_engine,
)

__all__ = [
    # Entities
    "Preset",
    "PermissionFilter",
    "category_filter",
    "code_filter",

    # Services
    "PresetEngine",
    "PresetRegistry",
    "CATEGORY_PRESET_ORDER",
    "CLEAR_ALL_PRESET",
    "build_category_preset",
    "create_preset_engine",
]
