"""In-memory catalog source."""

import copy
from typing import Any, Dict, Iterable, List, Mapping


class StaticCatalogSource:
    """Catalog source backed by a fixed list of records.

    Useful for seeded catalogs, offline tooling and tests.
    """

    def __init__(self, records: Iterable[Mapping[str, Any]]):
        self._records = [dict(record) for record in records]

    async def fetch_permissions(self) -> List[Dict[str, Any]]:
        """Return a deep copy of the configured records."""
        return copy.deepcopy(self._records)
