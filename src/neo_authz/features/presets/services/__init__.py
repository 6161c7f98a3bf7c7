"""Preset services package."""

from .preset_engine import PresetEngine, create_preset_engine
from .preset_registry import (
    CATEGORY_PRESET_ORDER,
    CLEAR_ALL_PRESET,
    PresetRegistry,
    build_category_preset,
)

__all__ = [
    "PresetEngine",
    "create_preset_engine",
    "PresetRegistry",
    "CATEGORY_PRESET_ORDER",
    "CLEAR_ALL_PRESET",
    "build_category_preset",
]
