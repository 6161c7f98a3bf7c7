"""Catalog loading.

Turns raw records from the external catalog source into an immutable
CatalogSnapshot: inactive definitions, hidden codes and unknown categories
are filtered out, and duplicate codes keep their first occurrence.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Set, Union

from pydantic import ValidationError

from ....config.constants import PermissionCategory
from ....config.settings import AuthzSettings, get_settings
from ....core.exceptions import CatalogUnavailableError, InvalidPermissionRecordError
from ..entities import (
    CatalogSnapshot,
    CatalogSource,
    PermissionDefinition,
    PermissionRecord,
    build_snapshot,
)

logger = logging.getLogger(__name__)

RawRecord = Union[Mapping[str, Any], PermissionRecord, PermissionDefinition]


def _to_definition(raw: RawRecord) -> PermissionDefinition:
    """Convert one raw record, raising InvalidPermissionRecordError on bad data."""
    if isinstance(raw, PermissionDefinition):
        return raw

    try:
        record = raw if isinstance(raw, PermissionRecord) else PermissionRecord.model_validate(raw)
    except ValidationError as e:
        raise InvalidPermissionRecordError(
            f"Invalid permission record: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e

    if PermissionCategory.parse(record.category) is None:
        raise InvalidPermissionRecordError(
            f"Unknown permission category {record.category!r} for code {record.code}",
            details={"code": record.code, "category": record.category},
        )

    return PermissionDefinition.from_record(record)


def load_catalog(
    records: Iterable[RawRecord],
    hidden_permissions: Optional[Iterable[str]] = None,
) -> CatalogSnapshot:
    """
    Build a catalog snapshot from raw records.

    Args:
        records: Raw records from the catalog source (dicts, records or definitions)
        hidden_permissions: Codes never exposed to pickers; defaults to settings

    Returns:
        CatalogSnapshot whose ``all`` holds the visible definitions and whose
        ``known_codes`` also covers active hidden codes
    """
    hidden: Set[str] = set(
        get_settings().hidden_permissions if hidden_permissions is None else hidden_permissions
    )

    visible: List[PermissionDefinition] = []
    known_codes: Set[str] = set()
    skipped = 0

    for raw in records:
        try:
            definition = _to_definition(raw)
        except InvalidPermissionRecordError as e:
            skipped += 1
            logger.warning(f"Skipping permission record: {e.message}")
            continue

        if not definition.is_active:
            continue

        if definition.code in known_codes:
            logger.warning(f"Duplicate permission code in catalog: {definition.code}")
            continue

        known_codes.add(definition.code)
        if definition.code in hidden:
            continue

        visible.append(definition)

    logger.debug(
        f"Loaded catalog: {len(visible)} visible, {len(known_codes)} active, {skipped} skipped"
    )
    return build_snapshot(visible, known_codes=known_codes)


class CatalogLoader:
    """Fetches raw records from a catalog source and builds snapshots."""

    def __init__(self, source: CatalogSource, settings: Optional[AuthzSettings] = None):
        """
        Initialize catalog loader.

        Args:
            source: External catalog source
            settings: Optional settings (hidden permission list)
        """
        self.source = source
        self.settings = settings or get_settings()

    async def load(self) -> CatalogSnapshot:
        """
        Fetch and build a new snapshot.

        Raises:
            CatalogUnavailableError: If the fetch fails
        """
        try:
            records = await self.source.fetch_permissions()
        except CatalogUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Permission catalog fetch failed: {e}")
            raise CatalogUnavailableError(f"Permission catalog fetch failed: {e}") from e

        if records is None:
            raise CatalogUnavailableError("Permission catalog source returned no data")

        return load_catalog(records, hidden_permissions=self.settings.hidden_permissions)

    async def invalidate(self) -> None:
        """Drop any payload cached in front of the source so the next load fetches fresh rows."""
        invalidate = getattr(self.source, "invalidate", None)
        if invalidate is None:
            return
        await invalidate()
