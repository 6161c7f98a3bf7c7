"""Grant set value objects.

A grant set is either *basic* (category-level shorthand) or *granular*
(fully qualified codes). The form is part of the type, so callers never
have to guess it from string contents. Both variants are immutable; every
operation returns a new instance.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Union

from ....config.constants import BASIC_TO_GRANULAR, PermissionCategory
from ....core.value_objects import is_granular_value


def _clean_entries(values: Iterable[object]) -> List[str]:
    """Drop non-string and blank entries from a persisted grant list."""
    if values is None or isinstance(values, (str, bytes)):
        return []
    cleaned = []
    for value in values:
        if not isinstance(value, str):
            continue
        value = value.strip()
        if value:
            cleaned.append(value)
    return cleaned


@dataclass(frozen=True)
class BasicGrantSet:
    """Category-level grants; each category stands for its curated bundle."""

    categories: FrozenSet[PermissionCategory] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "categories", frozenset(
            category for category in (PermissionCategory.parse(c) for c in self.categories)
            if category is not None
        ))

    @classmethod
    def of(cls, *categories: Union[PermissionCategory, str]) -> "BasicGrantSet":
        return cls(frozenset(categories))

    @property
    def is_basic(self) -> bool:
        return True

    @property
    def is_granular(self) -> bool:
        return False

    def with_category(self, category: Union[PermissionCategory, str]) -> "BasicGrantSet":
        return BasicGrantSet(self.categories | {category})

    def without_category(self, category: Union[PermissionCategory, str]) -> "BasicGrantSet":
        parsed = PermissionCategory.parse(category)
        return BasicGrantSet(self.categories - {parsed})

    def granular_codes(self) -> FrozenSet[str]:
        """Codes granted through the curated basic expansions."""
        return frozenset(
            code for category in self.categories for code in BASIC_TO_GRANULAR[category]
        )

    def to_list(self) -> List[str]:
        """Sorted list of category names for the external store."""
        return sorted(category.value for category in self.categories)

    def __contains__(self, item: object) -> bool:
        return PermissionCategory.parse(item) in self.categories

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self):
        return iter(sorted(self.categories, key=lambda c: c.value))


@dataclass(frozen=True)
class GranularGrantSet:
    """Fine-grained grants, one entry per permission code."""

    codes: FrozenSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "codes", frozenset(_clean_entries(self.codes)))

    @classmethod
    def of(cls, *codes: str) -> "GranularGrantSet":
        return cls(frozenset(codes))

    @property
    def is_basic(self) -> bool:
        return False

    @property
    def is_granular(self) -> bool:
        return True

    def with_code(self, code: str) -> "GranularGrantSet":
        return GranularGrantSet(self.codes | {code})

    def without_code(self, code: str) -> "GranularGrantSet":
        return GranularGrantSet(self.codes - {code})

    def union(self, codes: Iterable[str]) -> "GranularGrantSet":
        return GranularGrantSet(self.codes | frozenset(codes))

    def difference(self, codes: Iterable[str]) -> "GranularGrantSet":
        return GranularGrantSet(self.codes - frozenset(codes))

    def contains_all(self, codes: Iterable[str]) -> bool:
        return all(code in self.codes for code in codes)

    def granular_codes(self) -> FrozenSet[str]:
        return self.codes

    def to_list(self) -> List[str]:
        """Sorted list of codes for the external store."""
        return sorted(self.codes)

    def __contains__(self, item: object) -> bool:
        return item in self.codes

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self):
        return iter(sorted(self.codes))


GrantSet = Union[BasicGrantSet, GranularGrantSet]


def parse_grant_set(values: Iterable[object]) -> GrantSet:
    """
    Ingest a persisted grant list.

    Non-string and blank entries are ignored. The list is granular when at
    least one entry contains the code separator, basic otherwise; in basic
    form unrecognised category names are dropped.

    Args:
        values: Raw list as stored next to the principal's role

    Returns:
        BasicGrantSet or GranularGrantSet
    """
    entries = _clean_entries(values)
    if any(is_granular_value(entry) for entry in entries):
        return GranularGrantSet(frozenset(entries))
    return BasicGrantSet(frozenset(entries))
