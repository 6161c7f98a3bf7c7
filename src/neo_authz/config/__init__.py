"""Configuration module for neo-authz.

Constants and static permission tables, environment-driven settings, and
logging configuration.
"""

from .constants import (
    CODE_SEPARATOR,
    PermissionCategory,
    RiskLevel,
    OrganizationRole,
    UnknownRolePolicy,
    CheckMode,
    SUBCATEGORY_ORDER,
    DEFAULT_SUBCATEGORY,
    ServicePermissions,
    InfraPermissions,
    BackupPermissions,
    DevicePermissions,
    DatabasePermissions,
    HIGH_RISK_PERMISSIONS,
    HIDDEN_PERMISSIONS,
    BASIC_TO_GRANULAR,
    TAB_PERMISSIONS,
    CATEGORY_ORDER,
    CATEGORY_NAMES,
    RISK_LEVEL_NAMES,
    CatalogCacheDefaults,
)

from .settings import AuthzSettings, get_settings

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "CODE_SEPARATOR",
    "PermissionCategory",
    "RiskLevel",
    "OrganizationRole",
    "UnknownRolePolicy",
    "CheckMode",
    "SUBCATEGORY_ORDER",
    "DEFAULT_SUBCATEGORY",
    "ServicePermissions",
    "InfraPermissions",
    "BackupPermissions",
    "DevicePermissions",
    "DatabasePermissions",
    "HIGH_RISK_PERMISSIONS",
    "HIDDEN_PERMISSIONS",
    "BASIC_TO_GRANULAR",
    "TAB_PERMISSIONS",
    "CATEGORY_ORDER",
    "CATEGORY_NAMES",
    "RISK_LEVEL_NAMES",
    "CatalogCacheDefaults",

    # Settings
    "AuthzSettings",
    "get_settings",

    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
