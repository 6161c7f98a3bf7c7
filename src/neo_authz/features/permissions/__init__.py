"""Permissions feature.

Role resolution (Owner/Manager/Member with the high-risk gate) and the
query facade consumed by guards.
"""

from typing import Optional

from ...config.settings import AuthzSettings
from ..catalog.entities import SnapshotProvider
from .services import PermissionQueryService, RoleResolver, create_role_resolver


def create_permission_query_service(
    catalog_provider: SnapshotProvider,
    settings: Optional[AuthzSettings] = None,
) -> PermissionQueryService:
    """Create a query service with a settings-configured resolver."""
    return PermissionQueryService(
        resolver=create_role_resolver(settings),
        catalog_provider=catalog_provider,
    )


__all__ = [
    "PermissionQueryService",
    "RoleResolver",
    "create_role_resolver",
    "create_permission_query_service",
]
