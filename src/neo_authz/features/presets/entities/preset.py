"""Preset entity: a named, catalog-derived permission bundle."""

from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Optional

from ....config.constants import PermissionCategory
from ...catalog.entities import CatalogSnapshot, PermissionDefinition

PermissionFilter = Callable[[PermissionDefinition], bool]


@dataclass(frozen=True)
class Preset:
    """Permission bundle applied to a grant set in one step.

    A replace preset sets the grants to exactly the matched codes. An
    additive preset toggles the matched codes in or out of the current
    grants.
    """

    key: str
    filter: PermissionFilter = field(compare=False, repr=False)
    additive: bool = False
    label: str = ""
    description: str = ""
    category: Optional[PermissionCategory] = None

    def __post_init__(self):
        if not self.key or not self.key.strip():
            raise ValueError("Preset key cannot be empty")
        if not callable(self.filter):
            raise ValueError(f"Preset filter must be callable: {self.key}")

    def matches(self, definition: PermissionDefinition) -> bool:
        return bool(self.filter(definition))

    def matched_codes(self, catalog: Optional[CatalogSnapshot]) -> FrozenSet[str]:
        """Codes of visible definitions selected by this preset."""
        if catalog is None:
            return frozenset()
        return frozenset(definition.code for definition in catalog.all if self.matches(definition))

    @property
    def is_category_preset(self) -> bool:
        return self.additive and self.category is not None


def category_filter(*categories: PermissionCategory) -> PermissionFilter:
    """Filter selecting definitions of the given categories."""
    selected = frozenset(categories)
    return lambda definition: definition.category in selected


def code_filter(suffixes=(), contains=()) -> PermissionFilter:
    """Filter on code suffixes and substrings (any match selects)."""
    suffixes = tuple(suffixes)
    contains = tuple(contains)

    def _matches(definition: PermissionDefinition) -> bool:
        code = definition.code
        return (bool(suffixes) and code.endswith(suffixes)) or any(part in code for part in contains)

    return _matches
