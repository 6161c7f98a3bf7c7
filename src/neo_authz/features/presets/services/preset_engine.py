"""Preset engine.

Applies presets to grant sets. Replace presets set the grants to exactly
the matched codes; additive presets are two-state toggles: when every
matched code is already granted they remove them all, otherwise they grant
them all. Category select-all and clear-all are expressed as presets and go
through the same ``apply`` path.

Output is always a GranularGrantSet; basic input is expanded first.
"""

from typing import Optional, Tuple, Union

from ....config.constants import PermissionCategory
from ....core.exceptions import PresetNotFoundError
from ...catalog.entities import CatalogSnapshot
from ...grants.entities import GrantSet, GranularGrantSet
from ...grants.services import CategoryMapper
from ..entities import Preset
from .preset_registry import CLEAR_ALL_PRESET, PresetRegistry, build_category_preset


class PresetEngine:
    """Applies presets and direct edits to grant sets."""

    def __init__(
        self,
        registry: Optional[PresetRegistry] = None,
        mapper: Optional[CategoryMapper] = None,
    ):
        self.registry = registry if registry is not None else PresetRegistry.default()
        self.mapper = mapper or CategoryMapper()

    def _granular(self, current: GrantSet) -> GranularGrantSet:
        return self.mapper.to_granular_set(current)

    def is_active(
        self,
        preset: Preset,
        current: GrantSet,
        catalog: Optional[CatalogSnapshot],
    ) -> bool:
        """
        Whether an additive preset is fully applied.

        Always False for replace presets and for presets matching nothing.
        """
        if not preset.additive:
            return False
        matched = preset.matched_codes(catalog)
        if not matched:
            return False
        return matched <= self._granular(current).codes

    def apply(
        self,
        preset: Preset,
        current: GrantSet,
        catalog: Optional[CatalogSnapshot],
    ) -> GranularGrantSet:
        """
        Apply a preset to the current grants.

        Args:
            preset: Preset to apply
            current: Current grants (basic input is expanded to granular)
            catalog: Snapshot the preset filter is evaluated against

        Returns:
            New granular grant set
        """
        matched = preset.matched_codes(catalog)

        if not preset.additive:
            return GranularGrantSet(matched)

        granular = self._granular(current)
        if not matched:
            return granular

        if matched <= granular.codes:
            return granular.difference(matched)
        return granular.union(matched)

    def apply_key(
        self,
        key: str,
        current: GrantSet,
        catalog: Optional[CatalogSnapshot],
    ) -> GranularGrantSet:
        """Apply a registered preset by key (raises PresetNotFoundError)."""
        return self.apply(self.registry.get(key), current, catalog)

    def category_preset(self, category: Union[PermissionCategory, str]) -> Preset:
        """
        Additive preset covering one category.

        Raises:
            PresetNotFoundError: If the category is not recognised
        """
        parsed = PermissionCategory.parse(category)
        if parsed is None:
            raise PresetNotFoundError(
                f"No category preset for {category!r}",
                details={"category": str(category)},
            )
        return build_category_preset(parsed)

    def select_category(
        self,
        category: Union[PermissionCategory, str],
        current: GrantSet,
        catalog: Optional[CatalogSnapshot],
    ) -> GranularGrantSet:
        """Select-all toggle for one category: grant it fully, or clear it when already full."""
        return self.apply(self.category_preset(category), current, catalog)

    def clear_all(
        self,
        current: GrantSet,
        catalog: Optional[CatalogSnapshot],
    ) -> GranularGrantSet:
        """Replace the grants with nothing."""
        return self.apply(CLEAR_ALL_PRESET, current, catalog)

    def toggle_permission(self, current: GrantSet, code: str, checked: bool) -> GranularGrantSet:
        """Add or remove a single code."""
        granular = self._granular(current)
        if checked:
            return granular.with_code(code)
        return granular.without_code(code)

    def category_selection(
        self,
        category: Union[PermissionCategory, str],
        current: GrantSet,
        catalog: Optional[CatalogSnapshot],
    ) -> Tuple[int, int]:
        """``(selected, total)`` visible codes of one category."""
        parsed = PermissionCategory.parse(category)
        if parsed is None or catalog is None:
            return 0, 0
        codes = self._granular(current).codes
        definitions = catalog.in_category(parsed)
        return sum(1 for definition in definitions if definition.code in codes), len(definitions)


def create_preset_engine(
    registry: Optional[PresetRegistry] = None,
    mapper: Optional[CategoryMapper] = None,
) -> PresetEngine:
    """Create a preset engine with the built-in presets by default."""
    return PresetEngine(registry=registry, mapper=mapper)
