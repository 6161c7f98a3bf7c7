"""Permission services package.

Role resolution and the query facade built on top of it.
"""

from .permission_query_service import PermissionQueryService
from .role_resolver import RoleResolver, create_role_resolver

__all__ = [
    "PermissionQueryService",
    "RoleResolver",
    "create_role_resolver",
]
