"""Value objects for neo-authz."""

from .permission_code import (
    PermissionCode,
    PERMISSION_CODE_PATTERN,
    create_permission_code,
    is_valid_permission_code,
    validate_permission_code,
    is_granular_value,
    parse_permission_code,
    category_segment,
    category_of,
)

__all__ = [
    "PermissionCode",
    "PERMISSION_CODE_PATTERN",
    "create_permission_code",
    "is_valid_permission_code",
    "validate_permission_code",
    "is_granular_value",
    "parse_permission_code",
    "category_segment",
    "category_of",
]
