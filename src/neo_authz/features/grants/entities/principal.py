"""Principal entity: an organization role plus the grants held in that organization."""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from ....config.constants import OrganizationRole
from .grant_set import GrantSet, GranularGrantSet, parse_grant_set


@dataclass(frozen=True)
class Principal:
    """Subject of an authorization decision.

    ``role`` is kept as the raw persisted string; it is interpreted by the
    resolver (exact, case-sensitive match against Owner/Manager/Member).
    """

    role: str
    grants: GrantSet = field(default_factory=GranularGrantSet)

    def __post_init__(self):
        if isinstance(self.role, OrganizationRole):
            object.__setattr__(self, "role", self.role.value)
        elif not isinstance(self.role, str):
            object.__setattr__(self, "role", "")

    @classmethod
    def from_record(cls, role: Optional[str], permissions: Optional[Iterable[Any]]) -> "Principal":
        """Build a principal from the persisted role string and grant list."""
        return cls(role=role or "", grants=parse_grant_set(permissions or []))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Principal":
        """Build from a membership row with ``role`` and ``permissions`` keys."""
        return cls.from_record(data.get("role"), data.get("permissions"))

    @property
    def parsed_role(self) -> Optional[OrganizationRole]:
        """The recognised role, or None for unknown/blank role strings."""
        return OrganizationRole.parse(self.role)

    def with_grants(self, grants: GrantSet) -> "Principal":
        return Principal(role=self.role, grants=grants)

    def __str__(self) -> str:
        return f"Principal(role={self.role!r}, grants={len(self.grants)})"
