"""Neo-Authz - authorization resolution engine for the admin console.

Decides whether an organization principal (Owner/Manager/Member plus
explicit grants) may perform an action, and provides the bookkeeping used
when editing permissions: catalog grouping, the high-risk gate, basic and
granular grant forms, and presets.

Importing the package does not configure logging; call ``setup_logging()``
from the host application when needed.
"""

from .__version__ import __version__

from .config import (
    # Enums and tables
    PermissionCategory,
    RiskLevel,
    OrganizationRole,
    UnknownRolePolicy,
    CheckMode,
    HIGH_RISK_PERMISSIONS,
    HIDDEN_PERMISSIONS,
    BASIC_TO_GRANULAR,
    TAB_PERMISSIONS,

    # Settings and logging
    AuthzSettings,
    get_settings,
    setup_logging,
    get_logger,
)

from .core.exceptions import (
    NeoAuthzError,
    ConfigurationError,
    CatalogError,
    CatalogUnavailableError,
    InvalidPermissionRecordError,
    InvalidPermissionCodeError,
    AuthorizationError,
    PermissionDeniedError,
    PresetError,
    PresetNotFoundError,
    create_error_response,
)

from .core.value_objects import (
    PermissionCode,
    validate_permission_code,
    is_valid_permission_code,
)

from .features.catalog import (
    PermissionDefinition,
    CatalogSnapshot,
    CatalogLoader,
    CatalogProvider,
    StaticCatalogSource,
    CachedCatalogSource,
    MemoryCatalogCache,
    RedisCatalogCache,
    load_catalog,
    group_by_subcategory,
    create_catalog_provider,
)

from .features.grants import (
    BasicGrantSet,
    GranularGrantSet,
    GrantSet,
    Principal,
    parse_grant_set,
    CategoryMapper,
)

from .features.permissions import (
    RoleResolver,
    PermissionQueryService,
    create_role_resolver,
    create_permission_query_service,
)

from .features.presets import (
    Preset,
    PresetEngine,
    PresetRegistry,
    create_preset_engine,
)

__all__ = [
    "__version__",

    # Config
    "PermissionCategory",
    "RiskLevel",
    "OrganizationRole",
    "UnknownRolePolicy",
    "CheckMode",
    "HIGH_RISK_PERMISSIONS",
    "HIDDEN_PERMISSIONS",
    "BASIC_TO_GRANULAR",
    "TAB_PERMISSIONS",
    "AuthzSettings",
    "get_settings",
    "setup_logging",
    "get_logger",

    # Exceptions
    "NeoAuthzError",
    "ConfigurationError",
    "CatalogError",
    "CatalogUnavailableError",
    "InvalidPermissionRecordError",
    "InvalidPermissionCodeError",
    "AuthorizationError",
    "PermissionDeniedError",
    "PresetError",
    "PresetNotFoundError",
    "create_error_response",

    # Value objects
    "PermissionCode",
    "validate_permission_code",
    "is_valid_permission_code",

    # Catalog
    "PermissionDefinition",
    "CatalogSnapshot",
    "CatalogLoader",
    "CatalogProvider",
    "StaticCatalogSource",
    "CachedCatalogSource",
    "MemoryCatalogCache",
    "RedisCatalogCache",
    "load_catalog",
    "group_by_subcategory",
    "create_catalog_provider",

    # Grants
    "BasicGrantSet",
    "GranularGrantSet",
    "GrantSet",
    "Principal",
    "parse_grant_set",
    "CategoryMapper",

    # Permissions
    "RoleResolver",
    "PermissionQueryService",
    "create_role_resolver",
    "create_permission_query_service",

    # Presets
    "Preset",
    "PresetEngine",
    "PresetRegistry",
    "create_preset_engine",
]
