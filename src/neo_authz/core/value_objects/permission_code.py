"""
Permission code value object for type-safe permission identification.

Permission codes are colon-delimited: ``category[:subcategory[:action]]``,
for example ``service:build:execute``. The first segment always names the
category.
"""

import re
from typing import NewType, Optional, Tuple

from ...config.constants import CODE_SEPARATOR, PermissionCategory
from ..exceptions import InvalidPermissionCodeError

# Type-safe permission code based on string
PermissionCode = NewType('PermissionCode', str)

# Each segment starts with a letter; k8s-style digits are allowed after it
PERMISSION_CODE_PATTERN = re.compile(r'^[a-z][a-z0-9_]*(?::[a-z][a-z0-9_]*)+$')
_SEGMENT_PATTERN = re.compile(r'^[a-z][a-z0-9_]*$')


def create_permission_code(category: str, *segments: str) -> PermissionCode:
    """
    Create a permission code from a category and one or more segments.

    Raises:
        InvalidPermissionCodeError: If any segment is invalid or none is given

    Example:
        >>> create_permission_code("service", "build", "execute")
        'service:build:execute'
    """
    if not segments:
        raise InvalidPermissionCodeError(
            f"Permission code needs at least one segment after the category: {category}"
        )
    for segment in (category, *segments):
        if not _SEGMENT_PATTERN.match(segment):
            raise InvalidPermissionCodeError(f"Invalid permission code segment: {segment!r}")

    return PermissionCode(CODE_SEPARATOR.join((category, *segments)))


def is_valid_permission_code(permission_code: object) -> bool:
    """
    Check if a value is a well-formed permission code.

    Example:
        >>> is_valid_permission_code("infra:k8s:manage")
        True
        >>> is_valid_permission_code("infra")  # a basic category, not a code
        False
    """
    return isinstance(permission_code, str) and bool(PERMISSION_CODE_PATTERN.match(permission_code))


def validate_permission_code(permission_code: str) -> PermissionCode:
    """
    Validate and convert a string to a PermissionCode.

    Raises:
        InvalidPermissionCodeError: If the string doesn't match the code format
    """
    if not is_valid_permission_code(permission_code):
        raise InvalidPermissionCodeError(
            f"Invalid permission code format: {permission_code!r}. "
            f"Expected format: category:action (e.g., 'service:view')",
            details={"code": permission_code},
        )
    return PermissionCode(permission_code)


def is_granular_value(value: str) -> bool:
    """Check whether a stored grant entry is a granular code (contains the separator)."""
    return CODE_SEPARATOR in value


def parse_permission_code(permission_code: str) -> Tuple[str, str]:
    """
    Split a code into its category segment and the joined remainder.

    Example:
        >>> parse_permission_code("service:build:execute")
        ('service', 'build:execute')
    """
    category, _, remainder = permission_code.partition(CODE_SEPARATOR)
    return category, remainder


def category_segment(permission_code: str) -> str:
    """Return the first segment of a code."""
    return permission_code.split(CODE_SEPARATOR, 1)[0]


def category_of(permission_code: str) -> Optional[PermissionCategory]:
    """Return the category of a code, or None when the segment is unrecognised."""
    return PermissionCategory.parse(category_segment(permission_code))
