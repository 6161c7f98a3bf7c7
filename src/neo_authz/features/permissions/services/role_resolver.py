"""Role resolver: the single source of truth for "may this principal do that".

Decision functions are pure and total. They take the catalog snapshot as an
argument, never log and never raise for unknown input: unknown codes,
unknown roles and a missing catalog all resolve to a denial.
"""

from typing import AbstractSet, FrozenSet, Iterable, List, Optional

from ....config.constants import OrganizationRole, UnknownRolePolicy
from ....config.settings import AuthzSettings, get_settings
from ...catalog.entities import CatalogSnapshot
from ...grants.entities import Principal
from ...grants.services import CategoryMapper


class RoleResolver:
    """Maps role plus explicit grants to an effective-permission decision.

    - Owner: always allowed, the catalog is not consulted.
    - Manager: allowed unless the code is high-risk; high-risk codes need an
      explicit grant of a known code.
    - Member: allowed only for explicitly granted known codes.
    - Unknown role: denied, or resolved as Member when the policy says so.
    """

    def __init__(
        self,
        high_risk_permissions: AbstractSet[str],
        unknown_role_policy: UnknownRolePolicy = UnknownRolePolicy.DENY,
        mapper: Optional[CategoryMapper] = None,
    ):
        self.high_risk_permissions: FrozenSet[str] = frozenset(high_risk_permissions)
        self.unknown_role_policy = unknown_role_policy
        self.mapper = mapper or CategoryMapper()

    def effective_role(self, principal: Principal) -> Optional[OrganizationRole]:
        """Role used for resolution after applying the unknown-role policy."""
        role = OrganizationRole.parse(principal.role)
        if role is None and self.unknown_role_policy == UnknownRolePolicy.MEMBER:
            return OrganizationRole.MEMBER
        return role

    def is_high_risk(self, code: str) -> bool:
        return code in self.high_risk_permissions

    def _explicitly_granted(
        self,
        principal: Principal,
        code: str,
        catalog: Optional[CatalogSnapshot],
    ) -> bool:
        if catalog is None or not catalog.is_known(code):
            return False
        return code in self.mapper.effective_codes(principal.grants)

    def resolve(
        self,
        principal: Principal,
        code: str,
        catalog: Optional[CatalogSnapshot],
    ) -> bool:
        """
        Decide a single permission code.

        Args:
            principal: Role and grants being checked
            code: Permission code
            catalog: Current catalog snapshot, or None when unavailable

        Returns:
            True if the principal holds the permission
        """
        role = self.effective_role(principal)

        if role == OrganizationRole.OWNER:
            return True

        if role is None or catalog is None:
            return False

        if role == OrganizationRole.MANAGER:
            if not self.is_high_risk(code):
                return True
            return self._explicitly_granted(principal, code, catalog)

        return self._explicitly_granted(principal, code, catalog)

    def resolve_any(
        self,
        principal: Principal,
        codes: Iterable[str],
        catalog: Optional[CatalogSnapshot],
    ) -> bool:
        """True if any code resolves; an empty input is False."""
        return any(self.resolve(principal, code, catalog) for code in codes)

    def resolve_all(
        self,
        principal: Principal,
        codes: Iterable[str],
        catalog: Optional[CatalogSnapshot],
    ) -> bool:
        """True if every code resolves; an empty input is True."""
        return all(self.resolve(principal, code, catalog) for code in codes)

    def granted_codes(
        self,
        principal: Principal,
        candidates: Iterable[str],
        catalog: Optional[CatalogSnapshot],
    ) -> List[str]:
        """Candidates that resolve, in input order without duplicates."""
        granted: List[str] = []
        seen = set()
        for code in candidates:
            if code in seen:
                continue
            seen.add(code)
            if self.resolve(principal, code, catalog):
                granted.append(code)
        return granted


def create_role_resolver(
    settings: Optional[AuthzSettings] = None,
    mapper: Optional[CategoryMapper] = None,
) -> RoleResolver:
    """Create a role resolver configured from settings."""
    settings = settings or get_settings()
    return RoleResolver(
        high_risk_permissions=settings.high_risk_permissions,
        unknown_role_policy=settings.unknown_role_policy,
        mapper=mapper,
    )
