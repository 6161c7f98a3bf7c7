"""Constants and enums for neo-authz.

This module defines the closed sets (categories, risk levels, organization
roles) and the statically compiled permission tables the engine ships with.
The code lists correspond to the permission rows seeded in the console's
permission catalog.
"""

from enum import Enum
from typing import Dict, Final, FrozenSet, Optional, Tuple


# Code format
CODE_SEPARATOR: Final[str] = ":"


class PermissionCategory(str, Enum):
    """Permission categories - one per administrative menu of the console."""

    SERVICE = "service"
    INFRA = "infra"
    BACKUP = "backup"
    DEVICE = "device"
    DATABASE = "database"

    @classmethod
    def parse(cls, value: object) -> Optional["PermissionCategory"]:
        """Return the category for a raw value, or None when unrecognised."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class RiskLevel(str, Enum):
    """Risk levels tagged on catalog definitions."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class OrganizationRole(str, Enum):
    """Organization roles - values match the persisted role strings exactly."""

    OWNER = "Owner"
    MANAGER = "Manager"
    MEMBER = "Member"

    @classmethod
    def parse(cls, value: object) -> Optional["OrganizationRole"]:
        """Return the role for a raw role string, or None when unrecognised."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class UnknownRolePolicy(str, Enum):
    """How the resolver treats a role string that is not Owner/Manager/Member."""

    DENY = "deny"
    MEMBER = "member"


class CheckMode(str, Enum):
    """Composite check mode for guards."""

    ANY = "any"
    ALL = "all"

    @classmethod
    def parse(cls, value: object) -> "CheckMode":
        """Return ALL only for "all"; every other value checks as ANY."""
        if value == cls.ALL.value:
            return cls.ALL
        return cls.ANY


# Subcategory display priority inside a category; unknown values sort last.
SUBCATEGORY_ORDER: Final[Tuple[str, ...]] = (
    "view", "create", "update", "delete", "execute", "manage", "other"
)
DEFAULT_SUBCATEGORY: Final[str] = "other"


class ServicePermissions:
    """Service management: git repositories, build/deploy, security scans, operations."""

    VIEW: Final[str] = "service:view"
    CREATE: Final[str] = "service:create"
    UPDATE: Final[str] = "service:update"
    DELETE: Final[str] = "service:delete"
    BUILD_VIEW: Final[str] = "service:build:view"
    BUILD_EXECUTE: Final[str] = "service:build:execute"
    DEPLOY_VIEW: Final[str] = "service:deploy:view"
    DEPLOY_EXECUTE: Final[str] = "service:deploy:execute"
    OPERATE_VIEW: Final[str] = "service:operate:view"
    OPERATE_RESTART: Final[str] = "service:operate:restart"
    OPERATE_SCALE: Final[str] = "service:operate:scale"
    OPERATE_LOGS: Final[str] = "service:operate:logs"
    OPERATE_EXEC: Final[str] = "service:operate:exec"
    SECURITY_VIEW: Final[str] = "service:security:view"
    SECURITY_EXECUTE: Final[str] = "service:security:execute"


class InfraPermissions:
    """Runtime environments: clusters, Kubernetes, Docker/Podman."""

    VIEW: Final[str] = "infra:view"
    CREATE: Final[str] = "infra:create"
    UPDATE: Final[str] = "infra:update"
    DELETE: Final[str] = "infra:delete"
    K8S_VIEW: Final[str] = "infra:k8s:view"
    K8S_MANAGE: Final[str] = "infra:k8s:manage"
    DOCKER_VIEW: Final[str] = "infra:docker:view"
    DOCKER_MANAGE: Final[str] = "infra:docker:manage"


class BackupPermissions:
    """Backup jobs and backup storage."""

    VIEW: Final[str] = "backup:view"
    CREATE: Final[str] = "backup:create"
    DELETE: Final[str] = "backup:delete"
    RESTORE: Final[str] = "backup:restore"
    DOWNLOAD: Final[str] = "backup:download"
    STORAGE_VIEW: Final[str] = "backup:storage:view"
    STORAGE_MANAGE: Final[str] = "backup:storage:manage"


class DevicePermissions:
    """Device registry."""

    VIEW: Final[str] = "device:view"
    CREATE: Final[str] = "device:create"
    UPDATE: Final[str] = "device:update"
    DELETE: Final[str] = "device:delete"


class DatabasePermissions:
    """Database connections, sync jobs and migrations."""

    VIEW: Final[str] = "database:view"
    CREATE: Final[str] = "database:create"
    UPDATE: Final[str] = "database:update"
    DELETE: Final[str] = "database:delete"
    TEST: Final[str] = "database:test"
    SYNC_VIEW: Final[str] = "database:sync:view"
    SYNC_EXECUTE: Final[str] = "database:sync:execute"
    MIGRATE_EXECUTE: Final[str] = "database:migrate:execute"


# Codes that need an explicit grant even for Managers. Kept as a fixed list so
# an emergency lockdown does not depend on a catalog reload.
HIGH_RISK_PERMISSIONS: Final[FrozenSet[str]] = frozenset({
    ServicePermissions.DELETE,
    ServicePermissions.OPERATE_EXEC,
    InfraPermissions.DELETE,
    InfraPermissions.K8S_MANAGE,
    BackupPermissions.DELETE,
    BackupPermissions.RESTORE,
    DatabasePermissions.DELETE,
    DatabasePermissions.MIGRATE_EXECUTE,
})

# Administrative-only codes never exposed to permission pickers.
HIDDEN_PERMISSIONS: Final[FrozenSet[str]] = frozenset({
    "backup:download",
    "infra:k8s:namespace:delete",
    "service:build:cancel",
    "service:deploy:rollback",
})

# Curated "basic" bundles: a category grants these codes, not every code of
# the category. Destructive codes are left out on purpose.
BASIC_TO_GRANULAR: Final[Dict[PermissionCategory, Tuple[str, ...]]] = {
    PermissionCategory.SERVICE: (
        ServicePermissions.VIEW,
        ServicePermissions.CREATE,
        ServicePermissions.UPDATE,
        ServicePermissions.BUILD_VIEW,
        ServicePermissions.BUILD_EXECUTE,
        ServicePermissions.DEPLOY_VIEW,
        ServicePermissions.DEPLOY_EXECUTE,
        ServicePermissions.OPERATE_VIEW,
        ServicePermissions.OPERATE_RESTART,
        ServicePermissions.OPERATE_LOGS,
        ServicePermissions.SECURITY_VIEW,
        ServicePermissions.SECURITY_EXECUTE,
    ),
    PermissionCategory.INFRA: (
        InfraPermissions.VIEW,
        InfraPermissions.CREATE,
        InfraPermissions.UPDATE,
        InfraPermissions.K8S_VIEW,
        InfraPermissions.K8S_MANAGE,
        InfraPermissions.DOCKER_VIEW,
        InfraPermissions.DOCKER_MANAGE,
    ),
    PermissionCategory.BACKUP: (
        BackupPermissions.VIEW,
        BackupPermissions.CREATE,
        BackupPermissions.DOWNLOAD,
        BackupPermissions.STORAGE_VIEW,
        BackupPermissions.STORAGE_MANAGE,
    ),
    PermissionCategory.DEVICE: (
        DevicePermissions.VIEW,
        DevicePermissions.CREATE,
        DevicePermissions.UPDATE,
    ),
    PermissionCategory.DATABASE: (
        DatabasePermissions.VIEW,
        DatabasePermissions.CREATE,
        DatabasePermissions.UPDATE,
        DatabasePermissions.TEST,
        DatabasePermissions.SYNC_VIEW,
        DatabasePermissions.SYNC_EXECUTE,
    ),
}

_missing = set(PermissionCategory) - set(BASIC_TO_GRANULAR)
if _missing:
    raise RuntimeError(f"BASIC_TO_GRANULAR is missing categories: {sorted(c.value for c in _missing)}")

# Codes required to open each console tab.
TAB_PERMISSIONS: Final[Dict[str, Tuple[str, ...]]] = {
    "service": (ServicePermissions.VIEW,),
    "infra": (InfraPermissions.VIEW,),
    "backup": (BackupPermissions.VIEW,),
    "device": (DevicePermissions.VIEW,),
    "database": (DatabasePermissions.VIEW,),
}

# Category display order used when no catalog order is available.
CATEGORY_ORDER: Final[Tuple[PermissionCategory, ...]] = (
    PermissionCategory.SERVICE,
    PermissionCategory.INFRA,
    PermissionCategory.BACKUP,
    PermissionCategory.DEVICE,
    PermissionCategory.DATABASE,
)

CATEGORY_NAMES: Final[Dict[PermissionCategory, str]] = {
    PermissionCategory.SERVICE: "서비스 관리",
    PermissionCategory.INFRA: "런타임 환경",
    PermissionCategory.BACKUP: "백업 관리",
    PermissionCategory.DEVICE: "장비 관리",
    PermissionCategory.DATABASE: "데이터베이스",
}

RISK_LEVEL_NAMES: Final[Dict[RiskLevel, str]] = {
    RiskLevel.LOW: "낮음",
    RiskLevel.MEDIUM: "보통",
    RiskLevel.HIGH: "높음",
    RiskLevel.CRITICAL: "매우 높음",
}


class CatalogCacheDefaults:
    """Catalog cache defaults."""

    KEY: Final[str] = "authz:catalog:permissions"
    TTL: Final[int] = 600  # 10 minutes
