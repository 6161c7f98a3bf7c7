"""Immutable catalog snapshot.

A snapshot is the unit the engine receives: it is built once per load and
never mutated. Reloading the catalog means building a new snapshot and
swapping the reference (see CatalogProvider).
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from ....config.constants import SUBCATEGORY_ORDER, PermissionCategory
from .permission_definition import PermissionDefinition


def subcategory_rank(subcategory: str) -> int:
    """Sort rank of a subcategory; unknown values rank after every known one."""
    try:
        return SUBCATEGORY_ORDER.index(subcategory)
    except ValueError:
        return len(SUBCATEGORY_ORDER)


def sort_by_subcategory(definitions: Iterable[PermissionDefinition]) -> List[PermissionDefinition]:
    """Stable sort by subcategory priority, keeping input order within a rank."""
    return sorted(definitions, key=lambda d: subcategory_rank(d.effective_subcategory))


def group_by_subcategory(
    definitions: Iterable[PermissionDefinition],
) -> List[Tuple[str, List[PermissionDefinition]]]:
    """Group definitions by subcategory, ordered by subcategory priority.

    Unknown subcategories come last, in order of first appearance.
    """
    grouped: Dict[str, List[PermissionDefinition]] = {}
    for definition in definitions:
        grouped.setdefault(definition.effective_subcategory, []).append(definition)

    return sorted(grouped.items(), key=lambda item: subcategory_rank(item[0]))


@dataclass(frozen=True)
class CatalogSnapshot:
    """Read-only view over the active, visible permission definitions."""

    definitions: Tuple[PermissionDefinition, ...] = ()
    known_codes: FrozenSet[str] = frozenset()
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Derived lookups (not part of equality)
    _by_code: Dict[str, PermissionDefinition] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _grouped: Dict[PermissionCategory, Tuple[PermissionDefinition, ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Build code index and category grouping."""
        definitions = tuple(self.definitions)
        object.__setattr__(self, "definitions", definitions)

        by_code = {definition.code: definition for definition in definitions}
        object.__setattr__(self, "_by_code", by_code)
        object.__setattr__(self, "known_codes", frozenset(self.known_codes) | frozenset(by_code))

        # Category order follows first appearance in the loaded list
        buckets: Dict[PermissionCategory, List[PermissionDefinition]] = {}
        for definition in definitions:
            buckets.setdefault(definition.category, []).append(definition)

        grouped = {
            category: tuple(sort_by_subcategory(items))
            for category, items in buckets.items()
        }
        object.__setattr__(self, "_grouped", grouped)

    @classmethod
    def empty(cls) -> "CatalogSnapshot":
        """Snapshot with no definitions."""
        return cls()

    @property
    def all(self) -> List[PermissionDefinition]:
        """All visible definitions in load order."""
        return list(self.definitions)

    @property
    def grouped(self) -> Dict[PermissionCategory, List[PermissionDefinition]]:
        """Definitions grouped by category (display order preserved)."""
        return {category: list(items) for category, items in self._grouped.items()}

    @property
    def categories(self) -> List[PermissionCategory]:
        """Categories present in the snapshot, in display order."""
        return list(self._grouped)

    @property
    def codes(self) -> FrozenSet[str]:
        """Codes of the visible definitions."""
        return frozenset(self._by_code)

    @property
    def is_empty(self) -> bool:
        return not self.known_codes

    def get(self, code: str) -> Optional[PermissionDefinition]:
        """Get the visible definition for a code."""
        return self._by_code.get(code)

    def is_known(self, code: str) -> bool:
        """Whether the code exists and is active (hidden codes included)."""
        return code in self.known_codes

    def in_category(self, category: PermissionCategory) -> List[PermissionDefinition]:
        """Visible definitions of one category, subcategory ordered."""
        return list(self._grouped.get(category, ()))

    def filter(self, predicate) -> List[PermissionDefinition]:
        """Visible definitions matching a predicate, in load order."""
        return [definition for definition in self.definitions if predicate(definition)]

    def search(self, text: str) -> Dict[PermissionCategory, List[PermissionDefinition]]:
        """Grouped definitions matching a search text; empty categories are omitted."""
        if not text or not text.strip():
            return self.grouped

        result: Dict[PermissionCategory, List[PermissionDefinition]] = {}
        for category, items in self._grouped.items():
            matched = [definition for definition in items if definition.matches_search(text)]
            if matched:
                result[category] = matched
        return result

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return (
            f"CatalogSnapshot(definitions={len(self.definitions)}, "
            f"known={len(self.known_codes)}, loaded_at={self.loaded_at.isoformat()})"
        )


def build_snapshot(
    definitions: Sequence[PermissionDefinition],
    known_codes: Iterable[str] = (),
) -> CatalogSnapshot:
    """Convenience constructor used by tests and static catalogs."""
    return CatalogSnapshot(definitions=tuple(definitions), known_codes=frozenset(known_codes))
