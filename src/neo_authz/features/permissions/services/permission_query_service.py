"""Permission query service.

Thin facade over the role resolver for UI guards and the role editing
workflow: single/any/all checks against the current catalog snapshot, tab
access, and role predicates.
"""

from typing import Iterable, List, Optional, Union

from ....config.constants import TAB_PERMISSIONS, CheckMode, OrganizationRole
from ....core.exceptions import PermissionDeniedError
from ...catalog.entities import CatalogSnapshot, SnapshotProvider
from ...grants.entities import Principal
from .role_resolver import RoleResolver

PermissionInput = Union[str, Iterable[str]]


class PermissionQueryService:
    """Permission checks against whatever snapshot the provider currently holds."""

    def __init__(self, resolver: RoleResolver, catalog_provider: SnapshotProvider):
        """
        Initialize permission query service.

        Args:
            resolver: Role resolver making the decisions
            catalog_provider: Source of the current catalog snapshot
        """
        self.resolver = resolver
        self.catalog_provider = catalog_provider

    @property
    def catalog(self) -> Optional[CatalogSnapshot]:
        return self.catalog_provider.current()

    # Checks

    def has_permission(self, principal: Principal, code: str) -> bool:
        return self.resolver.resolve(principal, code, self.catalog)

    def has_any_permission(self, principal: Principal, codes: Iterable[str]) -> bool:
        return self.resolver.resolve_any(principal, codes, self.catalog)

    def has_all_permissions(self, principal: Principal, codes: Iterable[str]) -> bool:
        return self.resolver.resolve_all(principal, codes, self.catalog)

    def granted_codes(self, principal: Principal, candidates: Iterable[str]) -> List[str]:
        """Which of the candidate codes are currently granted."""
        return self.resolver.granted_codes(principal, candidates, self.catalog)

    def is_high_risk_permission(self, code: str) -> bool:
        return self.resolver.is_high_risk(code)

    def check(
        self,
        principal: Principal,
        permission: PermissionInput,
        mode: Union[CheckMode, str] = CheckMode.ANY,
    ) -> bool:
        """
        Guard helper accepting a single code or a list of codes.

        Args:
            principal: Principal being checked
            permission: A code or an iterable of codes
            mode: "all" for sequences; any other value checks as "any"

        Returns:
            True if the guard passes
        """
        if isinstance(permission, str):
            return self.has_permission(principal, permission)

        if CheckMode.parse(mode) == CheckMode.ALL:
            return self.has_all_permissions(principal, permission)
        return self.has_any_permission(principal, permission)

    def can_access_tab(self, principal: Principal, tab: str) -> bool:
        """Whether the principal may open a console tab; unknown tabs are denied."""
        required = TAB_PERMISSIONS.get(tab)
        if not required:
            return False
        return self.has_any_permission(principal, required)

    def require_permission(
        self,
        principal: Principal,
        permission: PermissionInput,
        mode: Union[CheckMode, str] = CheckMode.ANY,
    ) -> None:
        """
        Raise if the guard does not pass.

        Raises:
            PermissionDeniedError: If the principal lacks the permission(s)
        """
        if isinstance(permission, str):
            if self.has_permission(principal, permission):
                return
            codes = [permission]
        else:
            codes = list(permission)
            if self.check(principal, codes, mode):
                return

        raise PermissionDeniedError(
            f"Permission denied: {', '.join(codes)}",
            details={
                "role": principal.role,
                "required": codes,
                "mode": CheckMode.parse(mode).value,
            },
        )

    # Role predicates (plain role string equality)

    @staticmethod
    def is_owner(principal: Principal) -> bool:
        return principal.role == OrganizationRole.OWNER.value

    @staticmethod
    def is_manager(principal: Principal) -> bool:
        return principal.role == OrganizationRole.MANAGER.value

    @staticmethod
    def is_member(principal: Principal) -> bool:
        return principal.role == OrganizationRole.MEMBER.value

    @classmethod
    def is_owner_or_manager(cls, principal: Principal) -> bool:
        return cls.is_owner(principal) or cls.is_manager(principal)
