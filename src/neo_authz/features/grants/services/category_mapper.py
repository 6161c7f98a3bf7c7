"""Category mapper: translates between basic and granular grant representations.

Basic access is a curated bundle per category (``BASIC_TO_GRANULAR``), not
every code of the category, so the expansion is table driven and never
derived from the catalog.
"""

from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ....config.constants import BASIC_TO_GRANULAR, PermissionCategory
from ....core.value_objects import category_of, is_granular_value
from ...catalog.entities import CatalogSnapshot
from ..entities import BasicGrantSet, GrantSet, GranularGrantSet

CategoryLike = Union[PermissionCategory, str]


class CategoryMapper:
    """Bidirectional basic <-> granular translator."""

    def __init__(self, expansion: Optional[Mapping[PermissionCategory, Sequence[str]]] = None):
        """
        Initialize category mapper.

        Args:
            expansion: Category to granular codes table; defaults to the
                curated BASIC_TO_GRANULAR bundles
        """
        table = BASIC_TO_GRANULAR if expansion is None else expansion
        self._expansion: Dict[PermissionCategory, Tuple[str, ...]] = {
            category: tuple(table.get(category, ())) for category in PermissionCategory
        }

    def expansion_for(self, category: CategoryLike) -> Tuple[str, ...]:
        """Codes granted by one basic category; unknown categories expand to nothing."""
        parsed = PermissionCategory.parse(category)
        if parsed is None:
            return ()
        return self._expansion[parsed]

    def to_granular(self, categories: Iterable[CategoryLike]) -> List[str]:
        """
        Expand basic categories into granular codes.

        The result keeps table order and drops duplicates.

        Example:
            >>> CategoryMapper().to_granular(["device"])
            ['device:view', 'device:create', 'device:update']
        """
        codes: List[str] = []
        seen = set()
        for category in categories:
            for code in self.expansion_for(category):
                if code not in seen:
                    seen.add(code)
                    codes.append(code)
        return codes

    def to_basic(self, codes: Iterable[str]) -> List[PermissionCategory]:
        """
        Collapse granular codes into the categories they belong to.

        A category is kept only when its expansion is non-empty, so the
        mapping is lossy by construction.
        """
        categories: List[PermissionCategory] = []
        for code in codes:
            if not isinstance(code, str):
                continue
            category = category_of(code)
            if category is None or not self._expansion[category]:
                continue
            if category not in categories:
                categories.append(category)
        return categories

    @staticmethod
    def is_granular_form(values: Iterable[object]) -> bool:
        """Legacy mode detection: granular iff any entry contains the separator."""
        return any(isinstance(value, str) and is_granular_value(value) for value in values)

    def to_granular_set(self, grants: GrantSet) -> GranularGrantSet:
        if isinstance(grants, GranularGrantSet):
            return grants
        return GranularGrantSet(frozenset(self.to_granular(grants.categories)))

    def to_basic_set(self, grants: GrantSet) -> BasicGrantSet:
        if isinstance(grants, BasicGrantSet):
            return grants
        return BasicGrantSet(frozenset(self.to_basic(grants.codes)))

    def effective_codes(self, grants: GrantSet) -> FrozenSet[str]:
        """Codes the grant set actually grants."""
        return self.to_granular_set(grants).codes

    def category_summary(
        self,
        grants: GrantSet,
        catalog: CatalogSnapshot,
    ) -> Dict[PermissionCategory, Tuple[int, int]]:
        """
        Per-category ``(selected, total)`` counts over visible definitions.

        Categories appear in catalog display order.
        """
        selected = self.effective_codes(grants)
        summary: Dict[PermissionCategory, Tuple[int, int]] = {}
        for category, definitions in catalog.grouped.items():
            granted = sum(1 for definition in definitions if definition.code in selected)
            summary[category] = (granted, len(definitions))
        return summary


def create_category_mapper(
    expansion: Optional[Mapping[PermissionCategory, Sequence[str]]] = None,
) -> CategoryMapper:
    """Create a category mapper with the curated expansion table by default."""
    return CategoryMapper(expansion=expansion)
